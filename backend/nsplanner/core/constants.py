"""Training model constants.

Centralized numbers for the VDOT model, the pace rules and the
Norwegian Singles 6-week template.
"""

# Race distances in meters, keyed by Distance value
DISTANCE_METERS: dict[str, float] = {
    "5K": 5000,
    "10K": 10000,
    "21K": 21097.5,
    "42K": 42195,
}

KM_PER_MILE = 1.60934

# VDOT time inversion search space (seconds) and acceptance tolerance
VDOT_SEARCH_MIN_SECONDS = 1 * 60
VDOT_SEARCH_MAX_SECONDS = 6 * 3600
VDOT_SEARCH_TOLERANCE = 0.1

# Pace rules
THRESHOLD_VDOT_FACTOR = 0.88
THRESHOLD_VDOT_OFFSET = 5
THRESHOLD_DISTANCE_METERS = 15000
THRESHOLD_SLOWDOWN_FROM_10K = 1.05
EASY_SLOWDOWN_FROM_THRESHOLD = 1.38
EASY_VDOT_FACTOR = 0.65
EASY_VDOT_OFFSET = 15

# Block structure
WEEKS_PER_BLOCK = 6
TEST_WEEK = 6
MIN_TRAINING_DAYS = 3
MAX_TRAINING_DAYS = 7
INTERVAL_RECOVERY_SECONDS = 60

# Week volume estimate
WARMUP_MINUTES = 15
COOLDOWN_MINUTES = 10
ASSUMED_MINUTES_PER_KM = 5.5

# Taper
TAPER_DAYS_A = 7
TAPER_DAYS_B = 3
TAPER_EASY_MINUTES = 40
