"""Traversal and path-resolution constants.

Logical output paths are always expressed with forward slashes so backends
never need to know the platform they run on. The session converts them to
native paths when it resolves them under the output directory.
"""

# =============================================================================
# Logical Paths
# =============================================================================
# Only this character splits a logical path into components. Backslashes are
# ordinary characters in a logical path and are passed through unchanged.

LOGICAL_PATH_SEPARATOR = "/"

# =============================================================================
# Environment
# =============================================================================
# load_settings() reads the config file location and an optional log level
# override from these variables.

CONFIG_PATH_ENV = "DOCFRONT_CONFIG"
LOG_LEVEL_ENV = "DOCFRONT_LOG_LEVEL"
