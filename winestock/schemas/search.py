"""Filters for searching wine stock records."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from winestock.models.wine import WineRecord


class RangeFilter(BaseModel):
    """Inclusive numeric range. A missing bound is open-ended."""

    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None

    @model_validator(mode="after")
    def check_bounds(self) -> "RangeFilter":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    @classmethod
    def exact(cls, value: float) -> "RangeFilter":
        """Range matching a single value."""
        return cls(min=value, max=value)

    def contains(self, value: float) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True


class WineFilter(BaseModel, ABC):
    """Abstract predicate on a WineRecord.

    Subclasses declare their criteria as fields and implement matches().
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def matches(self, wine: WineRecord) -> bool:
        """Return True if the wine satisfies this filter."""


class NameFilter(WineFilter):
    """Case-insensitive substring match on the wine name."""

    query: str = Field(..., min_length=1)

    def matches(self, wine: WineRecord) -> bool:
        return self.query.casefold() in wine.name.casefold()


class CountryFilter(WineFilter):
    code: str = Field(..., min_length=2, max_length=2)

    def matches(self, wine: WineRecord) -> bool:
        return wine.country_code == self.code.upper()


class VintageFilter(WineFilter):
    range: RangeFilter

    def matches(self, wine: WineRecord) -> bool:
        return self.range.contains(wine.vintage)


class PriceFilter(WineFilter):
    range: RangeFilter

    def matches(self, wine: WineRecord) -> bool:
        return self.range.contains(wine.price)


class QuantityFilter(WineFilter):
    range: RangeFilter

    def matches(self, wine: WineRecord) -> bool:
        return self.range.contains(wine.quantity)


def find_wines_by_filter(wines: Iterable[WineRecord], *filters: WineFilter) -> list[WineRecord]:
    """Return the wines matching every filter, preserving input order."""
    return [wine for wine in wines if all(f.matches(wine) for f in filters)]
