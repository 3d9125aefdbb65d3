# ua_classifier/normalizer.py

import re
from typing import Iterable, Optional, Tuple

from ua_classifier.baseline import WorkingRecord
from ua_classifier.rules import VersionMapping, DEFAULT_VERSION_MAPPINGS
from ua_classifier.schemas import ClassificationResult, OS, Browser, Device, Engine, CPU, Bot

UNKNOWN = "Unknown"
LEGACY_MAC_PREFIX = "Mac OS"
MODERN_MAC_NAME = "macOS"

_TRAILING_ZEROS = re.compile(r"(?:\.0)+$")


def clean_version(version: Optional[str]) -> Optional[str]:
    """Strip trailing ".0" groups: 10.0.0 -> 10, 10.5.0.0 -> 10.5"""
    if not version:
        return None
    return _TRAILING_ZEROS.sub("", version)


def map_os_version(
    name: str,
    version: Optional[str],
    mappings: Iterable[VersionMapping] = DEFAULT_VERSION_MAPPINGS,
) -> Tuple[str, Optional[str]]:
    """
    Correct known misreported OS versions.

    The prefix is tried against the version itself, then against the
    "<name> <version>" label. Only the first matching mapping applies.
    """
    if not version:
        return name, version

    candidates = (version, f"{name} {version}")

    for mapping in mappings:
        for candidate in candidates:
            if candidate.startswith(mapping.prefix):
                return mapping.os_name, mapping.os_version + candidate[len(mapping.prefix):]

    return name, version


def normalize(
    record: WorkingRecord,
    mappings: Iterable[VersionMapping] = DEFAULT_VERSION_MAPPINGS,
) -> ClassificationResult:
    """
    Build the final record.
    Order: version mapping, Mac OS rebrand, then version cleaning.
    """
    os_name, os_version = map_os_version(record.os.name or UNKNOWN, record.os.version, mappings)
    if os_name.startswith(LEGACY_MAC_PREFIX):
        os_name = MODERN_MAC_NAME

    bot = Bot(name=record.bot.name, type=record.bot.type) if record.bot else None

    return ClassificationResult(
        os=OS(name=os_name, version=clean_version(os_version)),
        browser=Browser(
            name=record.browser.name,
            version=clean_version(record.browser.version),
            major=record.browser.major,
        ),
        device=Device(
            type=record.device.type or "desktop",
            vendor=record.device.vendor,
            model=record.device.model,
        ),
        engine=Engine(name=record.engine.name, version=clean_version(record.engine.version)),
        cpu=CPU(architecture=record.cpu.architecture),
        bot=bot,
    )
