# Outcome Engine Configuration
# Profit/loss classification thresholds

# Returns above this are flagged for bonus eligibility risk (advisory only)
RETURN_THRESHOLD = 2145

# Both multipliers above this guarantee a non-negative outcome
GUARANTEED_PROFIT_MULTIPLIER = 1.0
