# ua_classifier/scoring.py

from ua_classifier.schemas import ClassificationResult

UNKNOWN = "Unknown"

# Additive, no partial credit
BROWSER_WEIGHT = 40
OS_WEIGHT = 30
DEVICE_MODEL_WEIGHT = 20
ENGINE_WEIGHT = 10


def _identified(name) -> bool:
    return bool(name) and name != UNKNOWN


def confidence_score(result: ClassificationResult) -> int:
    """
    Completeness of a normalized record, 0-100.

    This is a coarse heuristic of how many fields were identified,
    not a statistical confidence.
    """
    score = 0
    if _identified(result.browser.name):
        score += BROWSER_WEIGHT
    if _identified(result.os.name):
        score += OS_WEIGHT
    if result.device.model:
        score += DEVICE_MODEL_WEIGHT
    if result.engine.name:
        score += ENGINE_WEIGHT
    return score
