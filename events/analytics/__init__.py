"""Pure analytics over sale records.

Nothing in this package performs I/O; every function is a fold over the
records it is given.
"""

from events.analytics.overview import select_recent_sales, summarize_event
from events.analytics.projection import compute_projection
from events.analytics.revenue import compute_revenue_breakdown, summarize_sales
from events.analytics.velocity import classify_trend, compute_sales_velocity

__all__ = [
    "compute_revenue_breakdown",
    "summarize_sales",
    "compute_sales_velocity",
    "classify_trend",
    "compute_projection",
    "summarize_event",
    "select_recent_sales",
]
