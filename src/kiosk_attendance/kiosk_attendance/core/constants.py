"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_ADMIN_PASSWORD = "0824"
ADMIN_PASSWORD_HEADER = "X-Admin-Password"

# Snapshot used when a kiosk event arrives for an id missing from the roster.
UNKNOWN_EMPLOYEE_NAME = "Employee {employee_id}"

EXPORT_FILENAME = "attendance_{day}.xlsx"
EXPORT_SHEET_NAME = "Attendance"
EXPORT_COLUMNS = ["ID", "Employee ID", "Name", "Date", "Time", "Type", "Notes"]
