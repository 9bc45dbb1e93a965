"""Output file naming.

These names are the defaults for the bulk files a backend writes once per
run. Each can be overridden in the [output] section of the config file.
"""

# =============================================================================
# Bulk Output Files
# =============================================================================
# The search index lists every indexed element; the category file lists only
# elements filed under at least one navigation category. Both are written at
# the root of the output directory after the traversal completes.

SEARCH_INDEX_FILE = "index.json"
CATEGORY_FILE = "categories.json"

# =============================================================================
# Static Pages
# =============================================================================
# Page served by static hosts when a link points at a page that was never
# generated (for example a filtered-out or non-canonical member).

NOT_FOUND_FILE = "__404error.md"

# =============================================================================
# Encoding
# =============================================================================
# Text content handed to the disk writer is encoded with this codec. Bytes
# content is always written verbatim.

DEFAULT_ENCODING = "utf-8"
