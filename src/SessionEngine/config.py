# Session Engine Configuration
# In-memory session limits

# Live sessions kept at once; creating one more evicts the oldest
MAX_SESSIONS = 10_000
