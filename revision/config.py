DEFAULT_INTERVAL_DAYS = 1
DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3

MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3  # below this the recall counts as a lapse

# Graduation steps: (interval ceiling, interval to assign)
GRADUATION_STEPS = (
    (1, 1),   # first success stays at 1 day
    (6, 6),   # second step jumps to 6 days
)

UPCOMING_LIMIT = 5

SURAH_COUNT = 114

TEXT_CACHE_ALIAS = "quran-text"
TEXT_CACHE_KEY = "surah-text:{surah_id}"
