from enum import Enum, IntEnum


class Quality(IntEnum):
    BLACKOUT = 0
    WRONG = 1
    WRONG_BUT_FAMILIAR = 2
    DIFFICULT = 3
    HESITANT = 4
    PERFECT = 5


class QuickRating(IntEnum):
    HARD = 2
    GOOD = 4
    EASY = 5


class AyahStatus(str, Enum):
    OVERDUE = "overdue"
    DUE = "due"
    SAFE = "safe"
    NEW = "new"


QUALITY_LABELS = {
    Quality.BLACKOUT: "Forgot completely",
    Quality.WRONG: "Wrong",
    Quality.WRONG_BUT_FAMILIAR: "Wrong but familiar",
    Quality.DIFFICULT: "Recalled with difficulty",
    Quality.HESITANT: "Recalled after hesitation",
    Quality.PERFECT: "Perfect",
}

QUICK_RATING_LABELS = {
    QuickRating.HARD: "Hard",
    QuickRating.GOOD: "Good",
    QuickRating.EASY: "Easy",
}
