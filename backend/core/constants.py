"""
Shared constants for the analytics services.

This module has no dependencies on models or services to avoid circular imports.
"""

# Remote pagination starts at page 1
FIRST_PAGE = 1

# Service-enforced page size maximums
TEMPLATES_PAGE_SIZE = 100
WORKOUTS_PAGE_SIZE = 10

# Workout summaries
DEFAULT_SUMMARY_COUNT = 10
MAX_SUMMARY_COUNT = 30
DEFAULT_DETAIL_CONCURRENCY = 10

# Lift progression
DEFAULT_LOOKBACK_DAYS = 90
MAX_LOOKBACK_DAYS = 365
PROGRESS_HISTORY_LIMIT = 100
RECENT_SESSION_COUNT = 5
TOP_SETS_PER_SESSION = 3

# Above this rep count the Brzycki estimate degrades; a linear estimate is used
BRZYCKI_MAX_REPS = 12

# Estimated-1RM change (kg) beyond which a trend counts as improving/declining
TREND_THRESHOLD_KG = 2.5
