"""Query filters for WineStock."""

from winestock.schemas.history import (
    EntryIdFilter,
    HistoryFilter,
    HistoryTypeFilter,
    ModifiedByFilter,
    QuantityChangedFilter,
    WineIdFilter,
)
from winestock.schemas.search import (
    CountryFilter,
    NameFilter,
    PriceFilter,
    QuantityFilter,
    RangeFilter,
    VintageFilter,
    WineFilter,
    find_wines_by_filter,
)

__all__ = [
    # History filters
    "EntryIdFilter",
    "HistoryFilter",
    "HistoryTypeFilter",
    "ModifiedByFilter",
    "QuantityChangedFilter",
    "WineIdFilter",
    # Wine search filters
    "CountryFilter",
    "NameFilter",
    "PriceFilter",
    "QuantityFilter",
    "RangeFilter",
    "VintageFilter",
    "WineFilter",
    "find_wines_by_filter",
]
