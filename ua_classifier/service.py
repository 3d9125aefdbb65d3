# ua_classifier/service.py

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from ua_classifier.baseline import WorkingRecord, parse_baseline
from ua_classifier.cache import BoundedCache
from ua_classifier.classifier import apply_rules, infer_device_type
from ua_classifier.config import Settings
from ua_classifier.deadline import Deadline
from ua_classifier.errors import ClassificationError, ClassificationTimeout, InputError, InternalError
from ua_classifier.normalizer import normalize
from ua_classifier.rules import RuleSet, VersionMapping, DEFAULT_RULES, DEFAULT_VERSION_MAPPINGS
from ua_classifier.schemas import ClassificationResponse, ClassificationResult, Metadata
from ua_classifier.scoring import confidence_score
from ua_classifier.stats import ClassificationStats

logger = logging.getLogger(__name__)


class ClassificationService:
    """
    Parse-and-classify pipeline with its bounded cache.
    Constructed once at startup and shared by all requests.
    """

    def __init__(
        self,
        settings: Settings,
        cache: Optional[BoundedCache[ClassificationResponse]] = None,
        baseline_parser: Callable[[str], WorkingRecord] = parse_baseline,
        rules: RuleSet = DEFAULT_RULES,
        version_mappings: Sequence[VersionMapping] = DEFAULT_VERSION_MAPPINGS,
    ):
        self.settings = settings
        self.cache = cache if cache is not None else BoundedCache(settings.cache_size)
        self.baseline_parser = baseline_parser
        self.rules = rules
        self.version_mappings = version_mappings
        self.stats = ClassificationStats()

    def new_deadline(self) -> Deadline:
        return Deadline(self.settings.parse_timeout_seconds)

    def validate(self, ua_string) -> None:
        if not isinstance(ua_string, str) or not ua_string:
            raise InputError("Invalid or missing ua_string")
        if len(ua_string) > self.settings.max_ua_length:
            raise InputError(
                f"ua_string exceeds {self.settings.max_ua_length} characters"
            )

    def classify(self, ua_string: str, deadline: Optional[Deadline] = None) -> ClassificationResponse:
        """
        Classify a raw UA string.

        Cached records are served as a copy flagged cache_hit.
        Raises InputError, ClassificationTimeout or InternalError;
        failures are never cached.
        """
        try:
            self.validate(ua_string)
        except InputError as e:
            self.stats.record_failure(e.kind)
            raise

        cached = self.cache.get(ua_string)
        if cached is not None:
            self.stats.record_hit(cached.device.type)
            return cached.as_cache_hit()

        started = time.perf_counter()
        if deadline is None:
            deadline = self.new_deadline()

        try:
            result = self._run_pipeline(ua_string, deadline)
            response = self._build_response(result, started)
            # Work finished past the budget is discarded, checked under the cache lock
            evicted = self.cache.put(ua_string, response, guard=deadline.check)
        except ClassificationTimeout as e:
            logger.warning(f"UA parsing timed out: {ua_string[:100]!r}")
            self.stats.record_failure(e.kind)
            raise
        except ClassificationError as e:
            self.stats.record_failure(e.kind)
            raise
        except Exception as e:
            logger.error(f"UA parsing error for {ua_string[:100]!r}: {e}")
            self.stats.record_failure(InternalError.kind)
            raise InternalError(str(e)) from e

        if evicted is not None:
            logger.debug(f"Evicted oldest cache entry ({len(self.cache)}/{self.cache.capacity})")

        self.stats.record_miss(
            response.device.type,
            response.browser.name or "Unknown",
            evicted=evicted is not None,
        )
        return response

    def _build_response(self, result: ClassificationResult, started: float) -> ClassificationResponse:
        return ClassificationResponse(
            **result.model_dump(),
            metadata=Metadata(
                parsed_at=datetime.now(timezone.utc),
                parser_version=self.settings.parser_version,
                confidence_score=confidence_score(result),
                processing_time_ms=int((time.perf_counter() - started) * 1000),
                cache_hit=False,
            ),
        )

    def _run_pipeline(self, ua_string: str, deadline: Deadline) -> ClassificationResult:
        record = self.baseline_parser(ua_string)
        deadline.check()

        apply_rules(ua_string, record, self.rules, deadline)
        record.device.type = infer_device_type(ua_string, record)
        deadline.check()

        return normalize(record, self.version_mappings)
