"""Package warnings raised while generating documentation.

Warnings never stop a run. They are logged as they happen and recorded on a
WarningCollector so callers can report or fail on them after generation.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from docfront.model.elements import ModelElement

logger = logging.getLogger(__name__)


class PackageWarning(Enum):
    """Kinds of non-fatal problems found during generation."""

    NO_LIBRARY_LEVEL_DOCS = "no-library-level-docs"
    DUPLICATE_FILE = "duplicate-file"


WARNING_MESSAGES: dict[PackageWarning, str] = {
    PackageWarning.NO_LIBRARY_LEVEL_DOCS: "{name} has no library level documentation comments",
    PackageWarning.DUPLICATE_FILE: "{name} was written to a file that already exists",
}


@dataclass
class RecordedWarning:
    """A warning that was reported and not ignored."""

    warning: PackageWarning
    element: "ModelElement | None"
    message: str


class WarningCollector:
    """Logs and records package warnings.

    Attributes:
        ignored: Warning kinds that are dropped without logging at WARNING level.
        records: Warnings reported so far, in report order.
    """

    def __init__(self, ignored: Iterable[PackageWarning] = ()):
        self.ignored = frozenset(ignored)
        self.records: list[RecordedWarning] = []

    def warn(
        self,
        element: "ModelElement | None",
        warning: PackageWarning,
        detail: str | None = None,
    ) -> None:
        """Report a warning about an element.

        Args:
            element: Element the warning is about, or None for run-level problems.
            warning: Kind of warning.
            detail: Extra context appended to the message (e.g. a file path).
        """
        name = element.fully_qualified_name if element is not None else "<unknown>"
        message = WARNING_MESSAGES[warning].format(name=name)
        if detail:
            message = f"{message}: {detail}"

        if warning in self.ignored:
            logger.debug(f"Ignoring {warning.value} warning: {message}")
            return

        logger.warning(f"warning: {message} [{warning.value}]")
        self.records.append(RecordedWarning(warning=warning, element=element, message=message))

    def count(self, warning: PackageWarning | None = None) -> int:
        """Number of recorded warnings, optionally of a single kind."""
        if warning is None:
            return len(self.records)
        return sum(1 for record in self.records if record.warning is warning)
