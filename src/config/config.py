"""Project-wide single-source configuration constants for the performance dashboard."""

# ------ Score bounds -------
SCORE_MIN: int = 0                   # Lowest storable percentage
SCORE_MAX: int = 100                 # Highest storable percentage

# ------ Category thresholds (lower bound inclusive) -------
EXCELLENT_MIN: int = 90              # >= 90 is Excellent
GOOD_MIN: int = 75                   # [75, 90) is Good
AVERAGE_MIN: int = 60                # [60, 75) is Average; below is Needs Improvement

# ------ Seed roster (id, name, percentage); display order -------
SEED_AGENTS: tuple[tuple[str, str, int], ...] = (
    ("1", "Sarah Johnson", 85),
    ("2", "Mike Chen", 72),
    ("3", "Emily Rodriguez", 94),
    ("4", "David Kim", 68),
    ("5", "Lisa Thompson", 91),
    ("6", "James Wilson", 76),
    ("7", "Maria Garcia", 88),
    ("8", "Robert Brown", 63),
)

# ------ Page text -------
PAGE_TITLE: str = "Performance Dashboard"
PAGE_SUBTITLE: str = "Monitor and track agent performance metrics"
PAGE_ICON: str = "📊"

# ------ Logging -------
LOG_LEVEL: str = "INFO"              # DEBUG shows coercion/clamp details
