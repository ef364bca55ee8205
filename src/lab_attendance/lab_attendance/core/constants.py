"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ATTENDANCE_SETTINGS_KEY = "attendance"

DEFAULT_CLOCK_IN_TIME = "09:00"
DEFAULT_CLOCK_OUT_TIME = "18:00"

LATE_DEDUCTION_REASON = "Late deduction"
ABSENT_DEDUCTION_REASON = "Absent deduction"
MANAGED_DEDUCTION_REASONS = (LATE_DEDUCTION_REASON, ABSENT_DEDUCTION_REASON)

# Ledger totals within this distance of the settings-based figure are trusted.
AMOUNT_EPSILON = 0.01

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

SALARY_EXPENSE_CATEGORY = "Salaries"
EXPENSE_TYPE = "Expense"
DEFAULT_FINANCE_DEPARTMENT = "Lab"
