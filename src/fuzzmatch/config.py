# Scoring contract: these values define every observable score.
SCORE_MATCH: int = 16
SCORE_GAP_START: int = -3
SCORE_GAP_EXTENSION: int = -1

# Context bonuses (see charclass.bonus_for)
BONUS_BOUNDARY: int = SCORE_MATCH // 2                          # 8
BONUS_CAMEL_CASE: int = BONUS_BOUNDARY + SCORE_GAP_EXTENSION    # 7
BONUS_BOUNDARY_ALT: int = BONUS_CAMEL_CASE - 1                  # 6, letter -> digit
BONUS_NON_WORD: int = 1

# Applied to the bonus of the first pattern character only
BONUS_FIRST_CHAR_MULTIPLIER: int = 2

# Per already-matched char in the current consecutive run
BONUS_CONSECUTIVE: int = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)  # 4

# "No match" sentinel
NO_MATCH_SCORE: int = -1
NO_MATCH_INDEX: int = -1

# Default flags for the public entry points
CASE_SENSITIVE: bool = False
NORMALIZE: bool = True

# /* ~~~ caller-side settings (frontend) ~~~ */
TOP_K: int = 5

# file types the candidate loader reads when given a folder
INCLUDE_EXTS = [".txt", ".md", ".csv", ".log", ".lst"]

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}
