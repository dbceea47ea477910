TOP_K: int = 10
MAX_TOP_K: int = 100

# Loader unit: "file" (one document per file) or "line" (one per non-blank line)
TEXT_UNIT: str = "file"
FIRST_DOCUMENT_ID: int = 1

# /* ~~~ re-adding an id resets its length; True sums lengths like term counts ~~~ */
ACCUMULATE_LENGTH: bool = False

SCORE_FORMAT: str = "%g"
