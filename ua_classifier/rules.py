# ua_classifier/rules.py

import re
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from ua_classifier.baseline import WorkingRecord, BotInfo, major_of

# $1, $2 ... in a device model template
_TEMPLATE_GROUP = re.compile(r"\$(\d+)")


@dataclass(frozen=True)
class BrowserRule:
    name: str
    pattern: re.Pattern

    def apply(self, match: re.Match, record: WorkingRecord) -> None:
        record.browser.name = self.name
        version = match.group(1) if match.re.groups else None
        if version:
            record.browser.version = version
            record.browser.major = major_of(version)


@dataclass(frozen=True)
class BotRule:
    name: str
    type: str
    pattern: re.Pattern

    def apply(self, match: re.Match, record: WorkingRecord) -> None:
        record.device.type = "bot"
        record.bot = BotInfo(name=self.name, type=self.type)


@dataclass(frozen=True)
class DeviceRule:
    vendor: str
    model: str
    type: str
    pattern: re.Pattern

    def expand_model(self, match: re.Match) -> str:
        """Substitute $N with capture group N (empty if unmatched or missing)"""

        def group(ref: re.Match) -> str:
            index = int(ref.group(1))
            if index > match.re.groups:
                return ""
            return match.group(index) or ""

        return _TEMPLATE_GROUP.sub(group, self.model)

    def apply(self, match: re.Match, record: WorkingRecord) -> None:
        record.device.vendor = self.vendor
        record.device.model = self.expand_model(match)
        if self.type:
            record.device.type = self.type


Rule = Union[BrowserRule, BotRule, DeviceRule]


@dataclass(frozen=True)
class RuleSet:
    """Override rules by category, each list in match order"""
    bots: List[BotRule] = field(default_factory=list)
    devices: List[DeviceRule] = field(default_factory=list)
    browsers: List[BrowserRule] = field(default_factory=list)

    def categories(self) -> list[tuple[str, Sequence[Rule]]]:
        # Fixed application order
        return [
            ("bots", self.bots),
            ("devices", self.devices),
            ("browsers", self.browsers),
        ]


@dataclass(frozen=True)
class VersionMapping:
    """OS version strings that baseline parsers misreport"""
    prefix: str
    os_name: str
    os_version: str


def _p(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


DEFAULT_RULES = RuleSet(
    bots=[
        BotRule("Googlebot", "crawler", _p(r"\bGooglebot/([\d.]+)")),
        BotRule("Bingbot", "crawler", _p(r"\bbingbot/([\d.]+)")),
        BotRule("Puppeteer", "automation", _p(r"\bPuppeteer/([\d.]+)")),
        BotRule("Playwright", "automation", _p(r"\bPlaywright/([\d.]+)")),
        BotRule("Selenium", "automation", _p(r"\bSelenium\b")),
        BotRule("Headless Chrome", "automation", _p(r"\bHeadlessChrome/([\d.]+)")),
    ],
    devices=[
        DeviceRule("Tesla", "Car Browser", "vehicle", _p(r"\bTesla/([\d.]+)")),
        DeviceRule("Nintendo", "Switch", "console", _p(r"\bNintendo Switch\b")),
        DeviceRule("Sony", "PlayStation $1", "console", _p(r"\bPlayStation (\d+)")),
        DeviceRule("Microsoft", "Xbox", "console", _p(r"\bXbox\b")),
        DeviceRule("Oculus", "Quest", "vr", _p(r"Oculus|Quest")),
        DeviceRule("Unknown", "Smart TV", "smarttv", _p(r"Smart-TV|BRAVIA")),
    ],
    browsers=[
        BrowserRule("WeChat", _p(r"MicroMessenger/([\d.]+)")),
        BrowserRule("QQ Browser", _p(r"\bQQBrowser/([\d.]+)")),
        BrowserRule("UC Browser", _p(r"\bUCBrowser/([\d.]+)")),
        BrowserRule("BaiduBoxApp", _p(r"baiduboxapp/([\d.]+)")),
        BrowserRule("360 Secure Browser", _p(r"\b360SE\b")),
        BrowserRule("Sogou Mobile Browser", _p(r"\bSogouMobileBrowser/([\d.]+)")),
        BrowserRule("Maxthon", _p(r"\bMaxthon/([\d.]+)")),
        BrowserRule("DingTalk", _p(r"\bDingTalk/([\d.]+)")),
    ],
)

# First matching prefix wins
DEFAULT_VERSION_MAPPINGS: list[VersionMapping] = [
    VersionMapping("Mac OS X 10.16", "macOS", "11"),  # Big Sur reported as 10.16
    VersionMapping("Mac OS 10.16", "macOS", "11"),
    VersionMapping("Windows NT 10.0", "Windows", "10"),
    VersionMapping("Windows NT 6.3", "Windows", "8.1"),
]

DEVICE_TYPES = {"bot", "console", "vr", "smarttv", "vehicle", "tablet", "mobile", "desktop"}


def device_types(rules: RuleSet) -> set[str]:
    """Closed set of device.type values for a rule set"""
    return DEVICE_TYPES | {rule.type for rule in rules.devices if rule.type}
