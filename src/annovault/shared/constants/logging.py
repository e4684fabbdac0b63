"""
Logging Configuration Constants
"""


class LoggingConfig:
    """Logger names and structured record fields."""

    ROOT_LOGGER = "annovault"
    DEFAULT_LEVEL = "INFO"

    # Record attributes copied into JSON log lines when present
    EXTRA_FIELDS = (
        "error_code",
        "context",
        "operation",
        "duration_ms",
        "result_info",
    )
