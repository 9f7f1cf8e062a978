"""Assistant configuration constants.

Centralizes the fixed numbers the conversation core relies on.
"""

# Session defaults
DEFAULT_DISPLAY_NAME = "Friend"
DEFAULT_THINKING_DELAY = 1.5  # Seconds before the assistant reply appears

# Scroll synchronization
DEFAULT_SCROLL_THRESHOLD = 50  # Rows from bottom still treated as "at bottom"

# Suggestions
MAX_SUGGESTIONS = 5  # Upper bound on follow-ups attached to a reply
DISPLAYED_SUGGESTIONS = 3  # Chips rendered per assistant message

# Duration bands (inclusive upper bounds, in minutes)
QUICK_TIER_MAX_MINUTES = 20
STANDARD_TIER_MAX_MINUTES = 60
ADVANCED_TIER_MAX_MINUTES = 120

# Fixed durations for phrase rules
HALF_HOUR_MINUTES = 30
QUARTER_HOUR_MINUTES = 15
WHOLE_DAY_MINUTES = 480
BRIEF_SESSION_MINUTES = 15
AMPLE_SESSION_MINUTES = 120
