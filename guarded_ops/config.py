"""Configuration constants for guarded-ops."""

# Temperature table, one reading per day (days are 1-based)
TEMPERATURES = (20, 22, 19, 23, 21, 18, 25)

# Grade bounds (inclusive)
GRADE_MIN = 0
GRADE_MAX = 100

# CLI defaults
DEFAULT_READ_PATH = "Zainab"
DEFAULT_GRADE_SCORE = 105
READ_ENCODING = "utf-8"
OUTPUT_FORMATS = ("table", "json")

# Prompts
PROMPT_FIRST_NUMBER = "Enter the first number"
PROMPT_SECOND_NUMBER = "Enter the second number"
PROMPT_DAY = "Enter a day number (1-{max_day})"

# Messages
DIVISION_BY_ZERO_MESSAGE = "Cannot be divide by zero"
DAY_OUT_OF_RANGE_MESSAGE = "Invalid day number. Please enter a number between 1 and {max_day}"
ACCESS_FAILURE_MESSAGE = "IOException occurred: {reason}"
INVALID_GRADE_MESSAGE = "Grade is invalid."
VALID_GRADE_MESSAGE = "Grade is valid"
CALCULATION_COMPLETED_MESSAGE = "Calculation completed."
