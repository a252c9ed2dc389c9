"""Default configuration values for render_math contract checking."""

# Checks follow the interpreter mode: on normally, off under ``python -O``.
DEFAULT_CHECK_CONTRACTS = __debug__
DEFAULT_LOG_LEVEL = "WARNING"

LOGGER_NAME = "render_math"
