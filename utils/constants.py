import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Scheduling ledger
TOTAL_WEEKLY_SLOTS = _constants["TOTAL_WEEKLY_SLOTS"]
DEFAULT_COURSE_TYPE = _constants["DEFAULT_COURSE_TYPE"]

# Registration ledger
HONOR_ROLL_MIN_AVERAGE = _constants["HONOR_ROLL_MIN_AVERAGE"]
AVERAGE_GRADE_DECIMALS = _constants["AVERAGE_GRADE_DECIMALS"]
DEFAULT_SEMESTER = _constants["DEFAULT_SEMESTER"]
