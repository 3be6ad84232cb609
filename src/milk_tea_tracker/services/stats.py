"""Statistics over logged drinks."""

from collections import Counter
from dataclasses import dataclass

from milk_tea_tracker.domain.records import TeaRecord
from milk_tea_tracker.domain.stats import RecordStats
from milk_tea_tracker.services.calories import round_half_up
from milk_tea_tracker.services.records import RecordService

UNKNOWN_BRAND = "unknown"


@dataclass
class StatsService:
    """Aggregates totals and favorites over a user's records."""

    record_service: RecordService

    def get_stats(self, user_id: str) -> RecordStats:
        """Return statistics for every record of a user."""
        return summarize(self.record_service.list_records(user_id))


def summarize(records: list[TeaRecord]) -> RecordStats:
    """Return totals, average calories and favorites."""
    total_records = len(records)
    total_calories = sum(record.calories for record in records)
    average = round_half_up(total_calories / total_records) if total_records else 0
    brands = Counter(record.brand for record in records if not record.is_custom)
    moods = Counter(record.mood for record in records if record.mood)
    return RecordStats(
        total_records=total_records,
        total_calories=total_calories,
        average_calories=average,
        favorite_brand=_most_common(brands),
        mood_counts=dict(moods),
    )


def _most_common(counts: Counter[str]) -> str:
    # Equal counts keep first-seen order.
    if not counts:
        return UNKNOWN_BRAND
    return counts.most_common(1)[0][0]
