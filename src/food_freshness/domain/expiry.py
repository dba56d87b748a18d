"""Shelf-life estimate models."""

from dataclasses import dataclass
from enum import StrEnum


class Urgency(StrEnum):
    """Freshness band of an expiry estimate, most urgent first."""

    SPOILED = "spoiled"
    IMMEDIATE = "immediate"
    SOON = "soon"
    MODERATE = "moderate"
    LONG = "long"


@dataclass(frozen=True)
class ExpiryEstimate:
    """Projected shelf life; ``days`` is None only when already spoiled."""

    urgency: Urgency
    days: int | None = None

    def __post_init__(self) -> None:
        if self.urgency is Urgency.SPOILED:
            if self.days is not None:
                raise ValueError("Spoiled estimates carry no day count")
        elif self.days is None or self.days < 0:
            raise ValueError(f"{self.urgency.value} estimate needs days >= 0")

    @property
    def is_spoiled(self) -> bool:
        return self.urgency is Urgency.SPOILED

    def describe(self) -> str:
        """Render the estimate as a short human-readable phrase."""
        if self.days is None:
            return "Already spoiled or unsafe to consume"
        if self.urgency is Urgency.IMMEDIATE:
            if self.days == 0:
                return "Consume immediately"
            return f"Consume immediately or within {_days(self.days)}"
        if self.urgency is Urgency.SOON:
            return f"Use within {_days(self.days)}"
        if self.urgency is Urgency.MODERATE:
            return f"Good for about {_days(self.days)}"
        return f"Fresh for approximately {_days(self.days)}"


def _days(count: int) -> str:
    unit = "day" if count == 1 else "days"
    return f"{count} {unit}"
