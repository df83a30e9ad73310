"""
Default values for the interview analysis structure.
"""

ANALYSIS_CATEGORIES = ("selfIntroduction", "projectExplanation", "englishCommunication")

DEFAULT_SCORE = 5
MIN_SCORE = 1
MAX_SCORE = 10

FEEDBACK_PLACEHOLDER = "Unable to generate detailed feedback"
# Used when the generation call itself failed rather than returned bad text.
ANALYSIS_UNAVAILABLE_PLACEHOLDER = "Unable to generate analysis"

DEFAULT_FOCUS_AREAS = (
    "Improve communication clarity and structure",
    "Enhance technical explanation skills",
    "Work on presentation of self-introduction",
)

ANALYSIS_UNAVAILABLE_FOCUS_AREAS = (
    "Improve oral communication skills",
    "Structure technical explanations more clearly",
    "Develop more comprehensive self-introduction",
)
