"""Constants for Claude Code Wrapped.

Centralizes thresholds used for titles and achievements, sampling limits
for project scanning, and display limits for the renderers.
"""

# Project scanning
SESSION_FILE_EXTENSION = ".jsonl"
PROJECT_SAMPLE_SIZE = 5  # Session files read per project to estimate messages

# Summary defaults
DEFAULT_PEAK_HOUR = 12
DEFAULT_PRIMARY_MODEL = "Claude"
UNKNOWN_PROJECT_NAME = "Unknown"
TOP_PROJECTS_LIMIT = 8

# Title/level tiers, checked top to bottom (minimum total messages)
TITLE_TIERS = [
    (50000, "neural_architect", "legendary"),
    (30000, "prolific_architect", "master"),
    (15000, "senior_collaborator", "expert"),
    (5000, "code_artisan", "advanced"),
    (1000, "digital_craftsman", "intermediate"),
]
DEFAULT_TITLE = "code_apprentice"
DEFAULT_LEVEL = "novice"

# Hour-of-day buckets for the activity chart (i18n key, hours)
HOUR_BUCKETS = [
    ("night", range(0, 9)),
    ("morning", range(9, 13)),
    ("afternoon", range(13, 19)),
    ("evening", range(19, 24)),
]

# Terminal display
BAR_WIDTH = 20
PROJECT_NAME_DISPLAY_LIMIT = 25
RULE_WIDTH = 60

# HTML display
HTML_TOP_PROJECTS = 4
HTML_TOP_MODELS = 3
HTML_FILE_PREFIX = "claude-code-wrapped"

# PNG export
EXPORT_VIEWPORT_WIDTH = 1200
EXPORT_VIEWPORT_HEIGHT = 1800
EXPORT_SCALE_FACTOR = 2
EXPORT_FONT_WAIT_MS = 1000
EXPORT_CONTENT_SELECTOR = "#wrapped-content"

# Colors
CORAL = "#ff7f50"

# Date format for display
DATE_FORMAT = "%Y-%m-%d"
