from ua_classifier.normalizer import normalize
from ua_classifier.scoring import confidence_score

from conftest import make_record


def test_browser_only_scores_40():
    result = normalize(make_record(browser_name="Firefox"))

    assert confidence_score(result) == 40


def test_browser_and_os_scores_70():
    result = normalize(make_record(browser_name="Firefox", os_name="Linux"))

    assert confidence_score(result) == 70


def test_all_fields_score_100():
    record = make_record(
        browser_name="Mobile Safari",
        os_name="iOS",
        device_model="iPhone",
        engine_name="WebKit",
    )

    assert confidence_score(normalize(record)) == 100


def test_unknown_sentinels_score_zero():
    result = normalize(make_record(browser_name="Unknown", device_model=""))

    assert confidence_score(result) == 0


def test_versions_do_not_add_credit():
    result = normalize(make_record(engine_name="Gecko", engine_version="109.0", os_version="10"))

    assert confidence_score(result) == 10
