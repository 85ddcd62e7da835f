"""
Drill Constants and Parameters

All tunables for the daily drill scheduler in one place.
"""

from enum import Enum


# ---- Intents ----

class Intent(str, Enum):
    """Discrete user intents emitted by the presentation layer."""
    REVEAL = "reveal"                   # Show translation, no state change
    ANSWER_CORRECT = "answer_correct"   # Learner knew the word
    ANSWER_WRONG = "answer_wrong"       # Learner did not know the word
    RESET = "reset"                     # Throw away today's progress


ANSWER_INTENTS = (Intent.ANSWER_CORRECT, Intent.ANSWER_WRONG)


# ---- Daily Limits ----

TARGET_MASTERED = 50  # Words to master before the day is considered done


# ---- Package Phase ----

INITIAL_PACKAGE_SIZE = 3  # Size of the first batch after the first pass
PACKAGE_GROWTH = 3        # Added to the package size on every later batch
MASTERY_STREAK = 2        # Consecutive correct answers needed in a batch


# ---- Persistence ----

STORAGE_KEY = "hebrewTrainer.today.v1"


# ---- Phase Labels ----

PHASE_FIRST_PASS = "first-pass"
PHASE_PACKAGE = "package"

PHASE_DISPLAY = {
    PHASE_FIRST_PASS: "First Pass",
    PHASE_PACKAGE: "Packages",
}
