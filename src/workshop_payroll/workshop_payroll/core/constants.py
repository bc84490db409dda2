"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60

# Punching in/out inside the lunch window costs one extra minute on top of the
# elapsed minutes (rounding bias against the worker, kept for payroll parity).
LUNCH_VIOLATION_EXTRA_MINUTES = 1

DEFAULT_EXPORT_SHEET = "Salary"
