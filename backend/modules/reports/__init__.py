# backend/modules/reports/__init__.py

"""
Reports Module - Filtered Sales Aggregation & Export

Turns an optional date range / user / product filter into consistent
results for every reporting surface.

Components:
- Filter builder: request values -> FilterSpec -> typed predicates
- Aggregation: grand total, per-user and per-product rankings
- Projection: flat sales listing joined with user and product labels
- Export: deterministic CSV of the uncapped listing
- Notifications: sales target check over the all-time total
"""

__version__ = "1.0.0"
