# src/nzb_kit/observability/names.py

"""Standard metric names for nzb-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
NZB_PARSE_DURATION = "nzb_parse_duration"

# Counters
NZB_PARSE_TOTAL = "nzb_parse_total"
NZB_PARSE_ERRORS_TOTAL = "nzb_parse_errors_total"

# Counters (accumulate over time)
NZB_FILES_PARSED = "nzb_files_parsed"
NZB_SEGMENTS_PARSED = "nzb_segments_parsed"


# ============================================================================
# Charset Metrics
# ============================================================================

# Counters
CHARSET_FALLBACK_TOTAL = "charset_fallback_total"
