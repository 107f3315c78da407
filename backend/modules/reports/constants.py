# backend/modules/reports/constants.py

"""
Constants for the reports module.
"""

# Export Configuration
EXPORT_FILENAME = "sales_export.csv"
EXPORT_MEDIA_TYPE = "text/csv"
EXPORT_COLUMNS = [
    "id",
    "created_at",
    "username",
    "product",
    "quantity",
    "amount",
    "notes",
    "photo_path",
]

# Notifications
TARGET_REACHED_MESSAGE = "Target reached: {total} / {target}"

# Error Messages
ERROR_MESSAGES = {
    "invalid_date": "Invalid '{field}' date: expected YYYY-MM-DD, got {value!r}",
    "invalid_id": "Invalid '{field}': expected a positive integer, got {value!r}",
}
