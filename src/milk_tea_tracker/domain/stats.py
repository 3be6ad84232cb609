"""Domain models for record statistics."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecordStats:
    """Aggregated figures over a user's records."""

    total_records: int
    total_calories: int
    average_calories: int
    favorite_brand: str
    mood_counts: dict[str, int] = field(default_factory=dict)
