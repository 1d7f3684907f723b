"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CURRENCY = "zł"

DEFAULT_SESSION_DAYS = 7

# (start_month, end_month), 1-indexed and inclusive
QUARTER_MONTHS = {
    "Q1": (1, 3),
    "Q2": (4, 6),
    "Q3": (7, 9),
    "Q4": (10, 12),
}

DEFAULT_MEMBERS = (
    ("1", "John Smith", "Captain"),
    ("2", "Sarah Johnson", "Lieutenant"),
    ("3", "Mike Davis", "Firefighter"),
)

USERS_KEY = "users"

DEFAULT_MIN_PASSWORD_LENGTH = 6
