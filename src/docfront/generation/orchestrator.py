# src/docfront/generation/orchestrator.py
"""Generation orchestrator for documentation output.

This module provides the GenerationOrchestrator class that walks a package
graph in a fixed order and hands every documented element to a backend:

1. Package - The default package page, always generated
2. Categories - Documented categories of each local package
3. Libraries - Each documented library, followed by its
   classes, extensions, mixins and enums (each with its members) and then
   its top-level constants, properties, functions and typedefs
4. Additional files - Files not tied to a single element
5. Category json - Elements filed under navigation categories
6. Search index - Every indexed element

Every element is appended to the index before its backend call is made, so
an element whose rendering fails is still part of the index of that run.
"""

import inspect
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from docfront.diagnostics import PackageWarning
from docfront.generation.backend import FileWriter, GeneratorBackend
from docfront.generation.disk import DiskFileWriter
from docfront.generation.filters import filter_canonical, filter_non_documented
from docfront.generation.policy import CONTAINER_POLICIES, LIBRARY_CONTAINERS, LIBRARY_TOP_LEVEL
from docfront.generation.session import FileCreatedListener, GenerationScopeError, GenerationSession
from docfront.model import Categorization, Container, Library, ModelElement, PackageGraph

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result from running the generator.

    Attributes:
        output_directory: Root every file was written under.
        indexed_elements: Every element visited, in traversal order.
        written_files: Physical path -> originating element (None for
            run-level files such as the search index).
    """

    output_directory: str
    indexed_elements: list[ModelElement] = field(default_factory=list)
    written_files: Mapping[str, ModelElement | None] = field(default_factory=dict)

    @property
    def categorized_elements(self) -> list[ModelElement]:
        return _categorized(self.indexed_elements)


def _categorized(elements: list[ModelElement]) -> list[ModelElement]:
    return [e for e in elements if isinstance(e, Categorization) and e.has_categorization]


class GenerationOrchestrator:
    """Walks a package graph and delegates rendering to a backend.

    One instance runs one generation at a time. Each generate() call opens a
    fresh GenerationSession; backends receive that session's write method.

    Attributes:
        backend: Renders each element.
        file_writer: Physical write primitive, or None to create a
            DiskFileWriter per run that reports through the graph's warnings.
    """

    def __init__(self, backend: GeneratorBackend, file_writer: FileWriter | None = None):
        """Initialize the orchestrator.

        Args:
            backend: Backend used to render elements.
            file_writer: Physical write primitive; defaults to writing to disk.
        """
        self.backend = backend
        self.file_writer = file_writer
        self._listeners: list[FileCreatedListener] = []
        self._session: GenerationSession | None = None
        self._last_session: GenerationSession | None = None

    def add_file_created_listener(self, listener: FileCreatedListener) -> None:
        """Call listener with each file's path after it is written."""
        self._listeners.append(listener)

    def remove_file_created_listener(self, listener: FileCreatedListener) -> None:
        self._listeners.remove(listener)

    @property
    def indexed_elements(self) -> list[ModelElement]:
        """Elements indexed by the active session, or by the last one to finish."""
        session = self._session or self._last_session
        if session is None:
            return []
        return list(session.indexed_elements)

    @property
    def written_files(self) -> Mapping[str, ModelElement | None]:
        """Files written by the active session, or by the last one to finish."""
        session = self._session or self._last_session
        if session is None:
            return MappingProxyType({})
        return session.written_files

    def write(
        self,
        file_path: str,
        content: object,
        *,
        allow_overwrite: bool = False,
        element: ModelElement | None = None,
    ) -> Path:
        """Write through the active session.

        Raises:
            GenerationScopeError: If no generate() call is in progress.
        """
        if self._session is None:
            raise GenerationScopeError(
                f"Cannot write {file_path!r}: no generation session is active"
            )
        return self._session.write(
            file_path, content, allow_overwrite=allow_overwrite, element=element
        )

    async def generate(
        self, graph: PackageGraph | None, output_directory: str | os.PathLike
    ) -> GenerationResult:
        """Generate documentation for a package graph.

        A None graph documents nothing but still runs the additional-files,
        category-json and search-index steps with empty inputs.

        Args:
            graph: Package graph to document.
            output_directory: Root for every generated file.

        Returns:
            GenerationResult with the index and the written files.

        Raises:
            GenerationScopeError: If a generation is already running on this
                instance.
        """
        if self._session is not None:
            raise GenerationScopeError("A generation session is already active on this instance")

        file_writer = self.file_writer
        if file_writer is None:
            file_writer = DiskFileWriter(warnings=graph.warnings if graph is not None else None)
        elif isinstance(file_writer, DiskFileWriter):
            file_writer.reset()

        session = GenerationSession(output_directory, file_writer, self._listeners)
        self._session = session
        try:
            indexed = session.indexed_elements
            self._generate_docs(session.write, graph, indexed)

            pending = self.backend.generate_additional_files(session.write, graph)
            if inspect.isawaitable(pending):
                await pending

            categories = _categorized(indexed)
            self.backend.generate_category_json(session.write, categories)
            self.backend.generate_search_index(session.write, indexed)
        finally:
            session.close()
            self._session = None
            self._last_session = session

        logger.info(
            f"Generated {len(session.written_files)} files for {len(indexed)} elements "
            f"in {session.output_directory}"
        )
        return GenerationResult(
            output_directory=session.output_directory,
            indexed_elements=list(indexed),
            written_files=session.written_files,
        )

    def _generate_docs(
        self,
        writer: FileWriter,
        graph: PackageGraph | None,
        indexed: list[ModelElement],
    ) -> None:
        """Traverse the graph, collecting elements for the search index."""
        if graph is None:
            return

        logger.info(f"Documenting {graph.default_package.name}")
        self.backend.generate_package(writer, graph, graph.default_package)

        for package in graph.local_packages:
            for category in filter_non_documented(package.categories):
                owner = category.package.fully_qualified_name if category.package else "?"
                logger.info(f"Generating docs for category {category.name} from {owner}...")
                indexed.append(category)
                self.backend.generate_category(writer, graph, category)

            for library in filter_non_documented(package.libraries):
                self._generate_library(writer, graph, library, indexed)

    def _generate_library(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        indexed: list[ModelElement],
    ) -> None:
        logger.info(f"Generating docs for library {library.name} from {library.source_uri}...")
        if not library.is_anonymous and not library.has_documentation:
            graph.warn_on_element(library, PackageWarning.NO_LIBRARY_LEVEL_DOCS)

        indexed.append(library)
        self.backend.generate_library(writer, graph, library)

        for attribute, handler_name in LIBRARY_CONTAINERS:
            generate_container = getattr(self.backend, handler_name)
            for container in filter_non_documented(getattr(library, attribute)):
                indexed.append(container)
                generate_container(writer, graph, library, container)
                self._generate_members(writer, graph, library, container, indexed)

        for attribute, handler_name in LIBRARY_TOP_LEVEL:
            generate_element = getattr(self.backend, handler_name)
            for element in filter_non_documented(getattr(library, attribute)):
                indexed.append(element)
                generate_element(writer, graph, library, element)

    def _generate_members(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        indexed: list[ModelElement],
    ) -> None:
        policy = CONTAINER_POLICIES[container.kind]
        for group, handler_name in policy.member_groups():
            generate_member = getattr(self.backend, handler_name)
            members = filter_non_documented(container.members(group))
            if policy.canonical_only:
                members = filter_canonical(members)
            for member in members:
                indexed.append(member)
                generate_member(writer, graph, library, container, member)
