import pytest

from ua_classifier.baseline import BotInfo, parse_baseline
from ua_classifier.classifier import apply_rules, infer_device_type
from ua_classifier.rules import DEFAULT_RULES, device_types

from conftest import (
    make_record,
    CHROME_WINDOWS,
    IPHONE_SAFARI,
    IPAD_SAFARI,
    FIREFOX_BIG_SUR,
    NINTENDO_SWITCH,
    WECHAT_ANDROID,
    GOOGLEBOT_ON_PLAYSTATION,
)


def test_flagged_bot_wins_over_rule_type():
    record = make_record(device_type="console")
    record.bot = BotInfo(name="Googlebot", type="crawler")

    assert infer_device_type("anything", record) == "bot"


@pytest.mark.parametrize("ua", ["MyCrawler/1.0", "AhrefsBot/7.0", "Baiduspider", "web-scraper", "SiteCrawl"])
def test_generic_bot_tokens(ua):
    assert infer_device_type(ua, make_record(os_name="Android")) == "bot"


def test_rule_assigned_type_is_preserved():
    record = make_record(device_type="vr", os_name="Android")

    assert infer_device_type("Mozilla/5.0 (Linux; Android 10; Quest 2)", record) == "vr"


def test_mobile_os_without_tablet_marker_is_mobile():
    assert infer_device_type("Mozilla/5.0 (Linux; Android 13)", make_record(os_name="Android")) == "mobile"


def test_mobile_os_with_tablet_marker_is_tablet():
    record = make_record(os_name="Android")

    assert infer_device_type("Mozilla/5.0 (Linux; Android 13; Tablet)", record) == "tablet"


def test_windows_phone_is_mobile():
    record = make_record(os_name="Windows Phone")

    assert infer_device_type("Mozilla/5.0 (Windows Phone 10.0)", record) == "mobile"


def test_desktop_type_falls_through_to_heuristics():
    record = make_record(device_type="desktop", os_name="iOS")

    assert infer_device_type("Mozilla/5.0 (iPad)", record) == "tablet"


def test_default_is_desktop():
    assert infer_device_type("Mozilla/5.0 (X11; Linux x86_64)", make_record(os_name="Linux")) == "desktop"
    assert infer_device_type("", make_record()) == "desktop"


@pytest.mark.parametrize(
    "ua",
    [
        CHROME_WINDOWS,
        IPHONE_SAFARI,
        IPAD_SAFARI,
        FIREFOX_BIG_SUR,
        NINTENDO_SWITCH,
        WECHAT_ANDROID,
        GOOGLEBOT_ON_PLAYSTATION,
        "x",
        "Mozilla/5.0",
        "a" * 2048,
        "(((((((((((((((((((((((",
    ],
)
def test_device_type_always_in_closed_set(ua):
    record = parse_baseline(ua)
    apply_rules(ua, record)

    device_type = infer_device_type(ua, record)

    assert device_type
    assert device_type in device_types(DEFAULT_RULES)
