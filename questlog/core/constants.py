"""Shared application constants.

Centralizes the values used by the ledger, the save-file format and the
activity summaries so we can document and adjust them in one place.
"""

# Points needed to climb one level
POINTS_PER_LEVEL = 1000

# Save-file section markers, in the order they must appear
PROFILE_MARKER = "#PROFILE"
GOALS_MARKER = "#GOALS"

# Profile line prefixes
SCORE_PREFIX = "SCORE:"
BADGES_PREFIX = "BADGES:"
BADGE_SEPARATOR = ","

# Field delimiter for goal records and its escape character
FIELD_DELIMITER = "|"
ESCAPE_CHAR = "\\"

# Badge labels awarded on completion transitions
SIMPLE_BADGE = "Completed: {name}"
CHECKLIST_BADGE = "Checklist completed: {name}"

# Swimming pool lap length (meters) and km -> mile factor used for laps
LAP_LENGTH_M = 50.0
KM_TO_MILES = 0.62

# Accepted log level names
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
