"""Generator constants.

Re-exports all constants for convenient importing:
    from docfront.constants import SEARCH_INDEX_FILE, LOGICAL_PATH_SEPARATOR
"""

from docfront.constants.files import *  # noqa: F403
from docfront.constants.generation import *  # noqa: F403
