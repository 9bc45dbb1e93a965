"""Utilities for building and parsing YAML frontmatter in generated pages.

Frontmatter records what a page documents:
- name: Simple name of the element
- kind: Element kind (class, method, library, ...)
- qualified_name: Dot-joined name from the library down
- library: Owning library (omitted for packages, categories and libraries)
- enclosed_by: Owning container (members only)
- categories: Navigation categories (only when the element has any)
"""

from typing import Any, Mapping

import yaml

FRONTMATTER_DELIMITER = "---"


def build_frontmatter(metadata: Mapping[str, Any]) -> str:
    """Build a YAML frontmatter block.

    Keys with None values are left out; key order is preserved.

    Args:
        metadata: Values to record.

    Returns:
        Frontmatter starting and ending with --- followed by a blank line.
    """
    values = {key: value for key, value in metadata.items() if value is not None}
    body = yaml.safe_dump(values, sort_keys=False, default_flow_style=False, allow_unicode=True)
    return f"{FRONTMATTER_DELIMITER}\n{body}{FRONTMATTER_DELIMITER}\n\n"


def parse_frontmatter(content: str) -> tuple[dict | None, str]:
    """Split page content into frontmatter metadata and body.

    Args:
        content: Full page content that may start with frontmatter.

    Returns:
        Tuple of (metadata, body). If there is no valid frontmatter,
        returns (None, content).
    """
    opening = f"{FRONTMATTER_DELIMITER}\n"
    if not content.startswith(opening):
        return None, content

    closing = f"\n{FRONTMATTER_DELIMITER}\n"
    end = content.find(closing, len(opening) - 1)
    if end == -1:
        return None, content

    try:
        metadata = yaml.safe_load(content[len(opening) : end])
    except yaml.YAMLError:
        return None, content
    if not isinstance(metadata, dict):
        return None, content

    body = content[end + len(closing) :]
    if body.startswith("\n"):
        body = body[1:]
    return metadata, body
