# Stake Engine Configuration
# Rounding policy for stake splitting and returns

# Fixed decimal places for every derived amount
DECIMAL_PLACES = 2

# Value returned when a division or product is not finite
FALLBACK_AMOUNT = 0.0
