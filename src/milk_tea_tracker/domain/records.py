"""Domain models for logged drinks."""

from dataclasses import dataclass

CUSTOM_BRAND = "custom"
CUP_SIZES = ("small", "medium", "large")
MOODS = ("happy", "relaxed", "conflicted", "celebrating")
SUGAR_LEVELS = ("none", "light", "half", "full")

# Stable keys shared by the remote and local record representations.
RECORD_FIELDS = (
    "id",
    "drinkName",
    "brand",
    "calories",
    "cupSize",
    "sugarLevel",
    "mood",
    "notes",
    "date",
    "timestamp",
)


@dataclass(frozen=True)
class TeaRecord:
    """A single logged drink."""

    id: str
    drink_name: str
    brand: str
    calories: int
    cup_size: str
    sugar_level: str
    mood: str
    notes: str
    date: str
    timestamp: str

    @property
    def is_custom(self) -> bool:
        """Return True for free-text drinks without a catalog match."""
        return self.brand == CUSTOM_BRAND

    def to_payload(self) -> dict[str, object]:
        """Return the persisted shape of the record."""
        return {
            "id": self.id,
            "drinkName": self.drink_name,
            "brand": self.brand,
            "calories": self.calories,
            "cupSize": self.cup_size,
            "sugarLevel": self.sugar_level,
            "mood": self.mood,
            "notes": self.notes,
            "date": self.date,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_payload(cls, row: dict[str, object]) -> "TeaRecord":
        """Build a record from its persisted shape."""
        timestamp = str(row.get("timestamp") or "")
        return cls(
            id=str(row["id"]),
            drink_name=str(row.get("drinkName") or ""),
            brand=str(row.get("brand") or CUSTOM_BRAND),
            calories=int(float(row.get("calories") or 0)),
            cup_size=str(row.get("cupSize") or "medium"),
            sugar_level=str(row.get("sugarLevel") or ""),
            mood=str(row.get("mood") or ""),
            notes=str(row.get("notes") or ""),
            date=str(row.get("date") or timestamp[:10]),
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class RecordSaveResult:
    """Outcome of a save attempt across the remote and local stores."""

    ok: bool
    record: TeaRecord | None
    target: str | None
    message: str
