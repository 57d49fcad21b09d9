"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
DEFAULT_PER_PAGE = 2

STATUS_ACTIVE = "Active"
STATUS_OUT_OF_OFFICE = "Out of Office"
