"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

AUTH_FAILURE_MESSAGE = "Invalid username or password"
STORAGE_FAILURE_MESSAGE = "Failed to save attendance"

DEFAULT_SESSION_DAYS = 7

CSV_HEADERS = ("Date", "School", "Section", "Boys Present", "Girls Present", "Total")

# Largest value the INT UNSIGNED count columns can store.
MAX_COUNT = 4294967295
