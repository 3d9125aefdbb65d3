# ua_classifier/reporter.py

import logging

from ua_classifier.service import ClassificationService

logger = logging.getLogger(__name__)


def report_stats(service: ClassificationService) -> dict:
    """
    Called periodically by the scheduler.
    Logs counters for the elapsed interval and resets them.
    """
    try:
        stats = service.stats.get_and_reset_minute_stats()

        lookups = stats["cache_hits"] + stats["cache_misses"]
        hit_ratio = stats["cache_hits"] / lookups if lookups else 0.0
        failures = sum(stats["failures"].values())

        logger.info(
            f"Classification stats: {stats['requests']} requests, "
            f"{stats['cache_hits']} hits, {stats['cache_misses']} misses "
            f"({hit_ratio:.0%} hit ratio), {stats['evictions']} evictions, "
            f"{failures} failures, cache {len(service.cache)}/{service.cache.capacity}"
        )
        if stats["failures"]:
            logger.info(f"Failures by kind: {stats['failures']}")
        if stats["by_device_type"]:
            logger.info(f"Requests by device type: {stats['by_device_type']}")

        return stats

    except Exception as e:
        logger.error(f"Stats report error: {e}")
        return {}
