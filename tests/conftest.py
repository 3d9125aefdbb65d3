import pytest
from fastapi.testclient import TestClient

from ua_classifier.baseline import WorkingRecord
from ua_classifier.config import Settings
from ua_classifier.main import create_app
from ua_classifier.service import ClassificationService

CHROME_WINDOWS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
IPHONE_SAFARI = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
IPAD_SAFARI = (
    "Mozilla/5.0 (iPad; CPU OS 16_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/16.6 Mobile/15E148 Safari/604.1"
)
FIREFOX_BIG_SUR = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.16; rv:85.0) Gecko/20100101 Firefox/85.0"
)
NINTENDO_SWITCH = (
    "Mozilla/5.0 (Nintendo Switch; WifiWebAuthApplet) AppleWebKit/606.4 "
    "(KHTML, like Gecko) NF/6.0.1.15.4 NintendoBrowser/5.1.0.20393"
)
WECHAT_ANDROID = (
    "Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/116.0.0.0 Mobile Safari/537.36 MicroMessenger/8.0.40.2420"
)
GOOGLEBOT_ON_PLAYSTATION = "Mozilla/5.0 (PlayStation 5 1.00) Googlebot/2.1"


def make_record(**overrides) -> WorkingRecord:
    """Working record with selected fields set, e.g. os_name="Android" """
    record = WorkingRecord()
    for key, value in overrides.items():
        section, attr = key.split("_", 1)
        setattr(getattr(record, section), attr, value)
    return record


@pytest.fixture
def settings() -> Settings:
    return Settings(cache_size=3, parse_timeout_ms=1000, stats_interval_seconds=0)


@pytest.fixture
def service(settings) -> ClassificationService:
    return ClassificationService(settings)


@pytest.fixture
def client(settings, service) -> TestClient:
    return TestClient(create_app(settings, service))
