"""Generation sessions: the scope in which writes are allowed.

A session is created for each generate() call. It owns the output root, the
record of written files and the write method handed to backends, so two
sessions never share mutable state. Once closed, a session refuses writes.
"""

import os
from collections import deque
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from docfront.constants import LOGICAL_PATH_SEPARATOR
from docfront.generation.backend import FileWriter
from docfront.model import ModelElement

FileCreatedListener = Callable[[Path], None]


class GenerationScopeError(RuntimeError):
    """Raised when a write happens outside an active generation session."""

    pass


class FileCreatedChannel:
    """Caller-owned buffer of file-created events.

    Register an instance as a file-created listener and drain() it whenever
    convenient. Events are kept in write order.
    """

    def __init__(self):
        self._pending: deque[Path] = deque()

    def __call__(self, path: Path) -> None:
        self._pending.append(path)

    def __len__(self) -> int:
        return len(self._pending)

    def drain(self) -> list[Path]:
        """Return all pending paths and forget them."""
        drained = list(self._pending)
        self._pending.clear()
        return drained


def resolve_output_path(output_directory: str, file_path: str) -> str:
    """Resolve a '/'-separated logical path beneath an output directory.

    Only forward slashes separate components; backslashes stay part of the
    component they appear in.

    Args:
        output_directory: Native path of the output root.
        file_path: Logical path using '/' separators.

    Returns:
        Native path of the file.
    """
    relative = os.path.join(*file_path.split(LOGICAL_PATH_SEPARATOR))
    return os.path.join(output_directory, relative)


class GenerationSession:
    """One generation run's write scope.

    Attributes:
        output_directory: Native path every logical path is resolved under.
        indexed_elements: Elements visited so far, in traversal order.
    """

    def __init__(
        self,
        output_directory: str | os.PathLike,
        file_writer: FileWriter,
        listeners: Sequence[FileCreatedListener] = (),
    ):
        """Open a session.

        Args:
            output_directory: Root for every file written in this session.
            file_writer: Physical write primitive.
            listeners: File-created listeners. The sequence is read on every
                write, so listeners appended to it mid-run see later writes.
        """
        self.output_directory = os.fspath(output_directory)
        self._file_writer = file_writer
        self._listeners = listeners
        self._written_files: dict[str, ModelElement | None] = {}
        self.indexed_elements: list[ModelElement] = []
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def written_files(self) -> Mapping[str, ModelElement | None]:
        """Read-only view of physical path -> originating element."""
        return MappingProxyType(self._written_files)

    def write(
        self,
        file_path: str,
        content: object,
        *,
        allow_overwrite: bool = False,
        element: ModelElement | None = None,
    ) -> Path:
        """Write a file beneath the output directory.

        Args:
            file_path: Logical path using '/' separators.
            content: Bytes or text to write.
            allow_overwrite: Passed through to the write primitive.
            element: Element the file documents, None for run-level files.

        Returns:
            Path returned by the write primitive.

        Raises:
            GenerationScopeError: If the session has been closed.
        """
        if not self._active:
            raise GenerationScopeError(
                f"Cannot write {file_path!r}: no generation session is active"
            )

        out_file = resolve_output_path(self.output_directory, file_path)
        written = self._file_writer(
            out_file, content, allow_overwrite=allow_overwrite, element=element
        )
        self._written_files[out_file] = element

        for listener in list(self._listeners):
            listener(written)

        return written

    def close(self) -> None:
        """End the session; later writes raise GenerationScopeError."""
        self._active = False
