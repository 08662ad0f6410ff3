"""Process-wide default values for context budget policies."""

# -- Proactive compaction -----------------------------------------------------

DEFAULT_PROACTIVE_THRESHOLD = 0.75

# Configured proactive thresholds outside this closed range fall back to the default
PROACTIVE_THRESHOLD_MIN = 0.5
PROACTIVE_THRESHOLD_MAX = 0.95

# -- Context pruning ----------------------------------------------------------

DEFAULT_KEEP_LAST_ASSISTANTS = 3
DEFAULT_SOFT_TRIM_RATIO = 0.3
DEFAULT_HARD_CLEAR_RATIO = 0.5
DEFAULT_MIN_PRUNABLE_TOOL_CHARS = 50_000

DEFAULT_SOFT_TRIM_MAX_CHARS = 4_000
DEFAULT_SOFT_TRIM_HEAD_CHARS = 1_500
DEFAULT_SOFT_TRIM_TAIL_CHARS = 1_500

DEFAULT_HARD_CLEAR_PLACEHOLDER = (
    "[Tool result cleared. Use memory_search to recall earlier findings or re-run the tool.]"
)

# -- Configuration ------------------------------------------------------------

CONFIG_PATH_ENV_VAR = "CONTEXT_BUDGET_CONFIG"
