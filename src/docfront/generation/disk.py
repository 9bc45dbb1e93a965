"""Physical write primitive that writes generated files to disk."""

import logging
from pathlib import Path

from docfront.constants import DEFAULT_ENCODING
from docfront.diagnostics import PackageWarning, WarningCollector
from docfront.model import ModelElement

logger = logging.getLogger(__name__)


class DiskFileWriter:
    """Writes files and remembers which element produced each path.

    Writing the same path twice without allow_overwrite reports a
    duplicate-file warning on the element and then writes anyway. Only paths
    written since the last reset() count; the orchestrator resets an injected
    writer at the start of every run.

    Attributes:
        warnings: Collector for duplicate-file warnings.
        encoding: Codec used for non-bytes content.
        file_elements: Path -> element for every file this writer created.
    """

    def __init__(
        self,
        warnings: WarningCollector | None = None,
        encoding: str = DEFAULT_ENCODING,
    ):
        self.warnings = warnings if warnings is not None else WarningCollector()
        self.encoding = encoding
        self.file_elements: dict[Path, ModelElement | None] = {}

    def reset(self) -> None:
        """Forget every path written so far."""
        self.file_elements.clear()

    def __call__(
        self,
        file_path: str,
        content: object,
        *,
        allow_overwrite: bool = False,
        element: ModelElement | None = None,
    ) -> Path:
        path = Path(file_path)

        if not allow_overwrite and path in self.file_elements:
            self.warnings.warn(element, PackageWarning.DUPLICATE_FILE, detail=str(path))

        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (bytes, bytearray)):
            path.write_bytes(content)
        else:
            path.write_text(str(content), encoding=self.encoding)

        self.file_elements[path] = element
        logger.debug(f"Wrote {path}")
        return path
