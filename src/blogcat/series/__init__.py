"""Series navigation and summaries.

Computes prev/next chains per (series, language) and aggregates per-series
summary records from the post catalog.
"""

from blogcat.series.aggregator import (
    Series,
    SeriesStatus,
    aggregate_series,
    find_series,
    sort_series,
)
from blogcat.series.navigation import (
    SeriesNavInfo,
    get_series_nav_info,
    group_by_series,
    link_series,
    series_sort_key,
)

__all__ = [
    "Series",
    "SeriesStatus",
    "aggregate_series",
    "find_series",
    "sort_series",
    "SeriesNavInfo",
    "get_series_nav_info",
    "group_by_series",
    "link_series",
    "series_sort_key",
]
