# Input Filter Configuration
# Domain bounds for raw calculator inputs

# Payout multiplier ceiling (decimal odds)
MAX_MULTIPLIER = 1000

# Total stake ceiling
MAX_STAKE = 1_000_000

# Value used when raw input cannot be parsed, is negative or non-finite
FALLBACK_VALUE = 0.0
