"""Default configuration constants for the Dorm Room Planner."""

# Every room is a two-person room
ROOM_CAPACITY = 2

# Sample seed size (rooms per gender group)
DEFAULT_ROOMS_PER_GROUP = 5

# Room id prefixes per group, e.g. "M-Room-3"
ROOM_ID_PREFIX = {
    "M": "M-Room-",
    "F": "F-Room-",
}

GROUP_LABELS = {
    "M": "Male",
    "F": "Female",
}

# Accepted spellings of the gender column (case-insensitive)
GENDER_ALIASES = {
    "m": "M",
    "male": "M",
    "남": "M",
    "f": "F",
    "female": "F",
    "여": "F",
}

# Uploaded file schemas
ROSTER_REQUIRED_COLUMNS = ["Student ID", "Name", "Gender"]
MATCHING_REQUIRED_COLUMNS = ["Room ID", "Score", "Member A", "Member B"]

# Export layout
EXPORT_COLUMNS = ["Room ID", "Group", "Member A", "Member B", "Score"]
EXPORT_FORMATS = ["csv", "xlsx"]
DEFAULT_EXPORT_FORMAT = "csv"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
