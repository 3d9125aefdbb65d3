# ua_classifier/baseline.py

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from user_agents import parse as parse_user_agent

# ua-parser's "not identified" sentinel
UNKNOWN_FAMILY = "Other"

# ua-parser fallbacks that name no real device
PLACEHOLDER_DEVICE_FAMILIES = {"Spider", "Generic Feature Phone", "Generic Smartphone"}
PLACEHOLDER_DEVICE_BRANDS = {"Spider", "Generic"}


@dataclass
class OSInfo:
    name: Optional[str] = None
    version: Optional[str] = None


@dataclass
class BrowserInfo:
    name: Optional[str] = None
    version: Optional[str] = None
    major: Optional[str] = None


@dataclass
class DeviceInfo:
    type: Optional[str] = None
    vendor: Optional[str] = None
    model: Optional[str] = None


@dataclass
class EngineInfo:
    name: Optional[str] = None
    version: Optional[str] = None


@dataclass
class CPUInfo:
    architecture: Optional[str] = None


@dataclass
class BotInfo:
    name: str
    type: str


@dataclass
class WorkingRecord:
    """Mutable classification record passed through the pipeline"""
    os: OSInfo = field(default_factory=OSInfo)
    browser: BrowserInfo = field(default_factory=BrowserInfo)
    device: DeviceInfo = field(default_factory=DeviceInfo)
    engine: EngineInfo = field(default_factory=EngineInfo)
    cpu: CPUInfo = field(default_factory=CPUInfo)
    bot: Optional[BotInfo] = None


# Patterns matched in order - first match wins.
# Blink reports the Chrome version, Gecko the rv: token.
ENGINE_PATTERNS: list[Tuple[str, re.Pattern]] = [
    ("EdgeHTML", re.compile(r"\bEdge/([\d.]+)", re.IGNORECASE)),
    ("Presto", re.compile(r"\bPresto/([\d.]+)", re.IGNORECASE)),
    ("Trident", re.compile(r"\bTrident/([\d.]+)", re.IGNORECASE)),
    ("Blink", re.compile(r"\bAppleWebKit/[\d.]+\b.*?\b(?:Chrome|Chromium)/([\d.]+)", re.IGNORECASE)),
    ("WebKit", re.compile(r"\bAppleWebKit/([\d.]+)", re.IGNORECASE)),
    ("Gecko", re.compile(r"\brv:([\d.]+)\)\s*Gecko/", re.IGNORECASE)),
]

CPU_PATTERNS: list[Tuple[str, re.Pattern]] = [
    ("amd64", re.compile(r"x86_64|x86-64|\bx64\b|Win64|WOW64|amd64", re.IGNORECASE)),
    ("ia32", re.compile(r"\bi[3-6]86\b|\bx86(?![_-]64)\b", re.IGNORECASE)),
    ("arm64", re.compile(r"aarch64|arm64", re.IGNORECASE)),
    ("arm", re.compile(r"\barmv?\d*l?\b", re.IGNORECASE)),
    ("ppc", re.compile(r"\bPPC\b|PowerPC", re.IGNORECASE)),
]


def _family(value: Optional[str]) -> Optional[str]:
    if not value or value == UNKNOWN_FAMILY:
        return None
    return value


def major_of(version: Optional[str]) -> Optional[str]:
    if not version:
        return None
    return version.split(".")[0]


def detect_engine(ua_string: str) -> Tuple[Optional[str], Optional[str]]:
    for name, pattern in ENGINE_PATTERNS:
        match = pattern.search(ua_string)
        if match:
            return name, match.group(1)
    return None, None


def detect_cpu(ua_string: str) -> Optional[str]:
    for architecture, pattern in CPU_PATTERNS:
        if pattern.search(ua_string):
            return architecture
    return None


def parse_baseline(ua_string: str) -> WorkingRecord:
    """
    Produce the baseline record for a raw UA string.

    Browser, OS and device come from the user-agents library;
    engine and CPU from the pattern tables above.
    """
    ua = parse_user_agent(ua_string)
    record = WorkingRecord()

    record.browser.name = _family(ua.browser.family)
    record.browser.version = ua.browser.version_string or None
    record.browser.major = major_of(record.browser.version)

    record.os.name = _family(ua.os.family)
    record.os.version = ua.os.version_string or None

    if ua.device.family not in PLACEHOLDER_DEVICE_FAMILIES:
        if ua.is_tablet:
            record.device.type = "tablet"
        elif ua.is_mobile:
            record.device.type = "mobile"

    if ua.device.brand not in PLACEHOLDER_DEVICE_BRANDS:
        record.device.vendor = _family(ua.device.brand)
        record.device.model = _family(ua.device.model)

    record.engine.name, record.engine.version = detect_engine(ua_string)
    record.cpu.architecture = detect_cpu(ua_string)

    return record
