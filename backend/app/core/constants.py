"""Shared application constants.

Centralizes values used by the validation, storage and API layers so we can
document and adjust them in one place.
"""

# All versioned endpoints live under this prefix
API_V1_PREFIX = "/api/v1"

# Key of the single row in the settings table holding the goal weight
GOAL_WEIGHT_KEY = "goal_weight"

# Entry dates are exchanged as 'YYYY-MM-DD' and nothing else
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Name of the secondary index backing the date-descending listing
WEIGHTS_DATE_INDEX = "idx_weights_date"

# Largest id SQLite's signed 64-bit INTEGER can hold
MAX_ENTRY_ID = 2**63 - 1
