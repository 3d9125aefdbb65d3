# ua_classifier/classifier.py

import re
from typing import Optional

from ua_classifier.baseline import WorkingRecord
from ua_classifier.deadline import Deadline
from ua_classifier.rules import RuleSet, DEFAULT_RULES

GENERIC_BOT_PATTERN = re.compile(r"bot|crawler|spider|scraper|crawl", re.IGNORECASE)
TABLET_PATTERN = re.compile(r"tablet|ipad|playbook", re.IGNORECASE)
MOBILE_OS_MARKERS = ("android", "ios", "windows phone")

# A match in these categories ends rule application
TERMINAL_CATEGORIES = ("bots", "devices")


def apply_rules(
    ua_string: str,
    record: WorkingRecord,
    rules: RuleSet = DEFAULT_RULES,
    deadline: Optional[Deadline] = None,
) -> Optional[str]:
    """
    Apply override rules to the baseline record in place.

    Categories run bots -> devices -> browsers, first match wins within
    each. A bot or device match stops the engine.

    Returns the category that fired, or None.
    """
    fired = None

    for category, category_rules in rules.categories():
        for rule in category_rules:
            if deadline is not None:
                deadline.check()

            match = rule.pattern.search(ua_string)
            if match:
                rule.apply(match, record)
                fired = category
                break

        if fired in TERMINAL_CATEGORIES:
            return fired

    return fired


def infer_device_type(ua_string: str, record: WorkingRecord) -> str:
    """
    Final device category for a record that went through the rule engine.

    Returns one of: bot, a rule-assigned type (console, vr, smarttv, vehicle, ...),
    tablet, mobile, desktop
    """
    if record.bot or GENERIC_BOT_PATTERN.search(ua_string):
        return "bot"

    if record.device.type and record.device.type != "desktop":
        return record.device.type

    os_name = (record.os.name or "").lower()
    if any(marker in os_name for marker in MOBILE_OS_MARKERS):
        return "tablet" if TABLET_PATTERN.search(ua_string) else "mobile"

    return "desktop"
