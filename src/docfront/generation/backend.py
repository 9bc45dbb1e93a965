"""Backend contract for rendering documentation.

A backend turns one element into one or more files. It never touches the
file system directly: every file goes through the ``writer`` it is handed,
so the generator can resolve paths, track written files and notify
listeners in one place. Backends must not mutate the graph.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Awaitable, Protocol, Sequence

from docfront.model import (
    Categorization,
    Category,
    Class,
    Constructor,
    Container,
    Enum,
    Extension,
    Field,
    Library,
    Method,
    Mixin,
    ModelElement,
    ModelFunction,
    Package,
    PackageGraph,
    TopLevelVariable,
    Typedef,
)


class FileWriter(Protocol):
    """Creates a file and returns its path.

    Used both for the writer handed to backends (logical '/'-separated paths)
    and for the physical write primitive the generator delegates to.
    """

    def __call__(
        self,
        file_path: str,
        content: object,
        *,
        allow_overwrite: bool = False,
        element: ModelElement | None = None,
    ) -> Path: ...


class GeneratorBackend(ABC):
    """Renders elements into files, one method per element kind."""

    @abstractmethod
    def generate_category_json(
        self, writer: FileWriter, categories: Sequence[Categorization]
    ) -> None:
        """Emit json describing the categorized elements of the package."""

    @abstractmethod
    def generate_search_index(
        self, writer: FileWriter, indexed_elements: Sequence[ModelElement]
    ) -> None:
        """Emit a json catalog of indexed elements for use with a search index."""

    @abstractmethod
    def generate_package(self, writer: FileWriter, graph: PackageGraph, package: Package) -> None:
        """Emit documentation content for the package."""

    @abstractmethod
    def generate_category(
        self, writer: FileWriter, graph: PackageGraph, category: Category
    ) -> None:
        """Emit documentation content for the category."""

    @abstractmethod
    def generate_library(self, writer: FileWriter, graph: PackageGraph, library: Library) -> None:
        """Emit documentation content for the library."""

    @abstractmethod
    def generate_class(
        self, writer: FileWriter, graph: PackageGraph, library: Library, clazz: Class
    ) -> None:
        """Emit documentation content for the class."""

    @abstractmethod
    def generate_enum(
        self, writer: FileWriter, graph: PackageGraph, library: Library, enum: Enum
    ) -> None:
        """Emit documentation content for the enum."""

    @abstractmethod
    def generate_mixin(
        self, writer: FileWriter, graph: PackageGraph, library: Library, mixin: Mixin
    ) -> None:
        """Emit documentation content for the mixin."""

    @abstractmethod
    def generate_constructor(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        clazz: Class,
        constructor: Constructor,
    ) -> None:
        """Emit documentation content for the constructor."""

    @abstractmethod
    def generate_constant(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        field: Field,
    ) -> None:
        """Emit documentation content for a constant field."""

    @abstractmethod
    def generate_property(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        field: Field,
    ) -> None:
        """Emit documentation content for a property."""

    @abstractmethod
    def generate_method(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        method: Method,
    ) -> None:
        """Emit documentation content for a method or operator."""

    @abstractmethod
    def generate_extension(
        self, writer: FileWriter, graph: PackageGraph, library: Library, extension: Extension
    ) -> None:
        """Emit documentation content for the extension."""

    @abstractmethod
    def generate_function(
        self, writer: FileWriter, graph: PackageGraph, library: Library, function: ModelFunction
    ) -> None:
        """Emit documentation content for the function."""

    @abstractmethod
    def generate_top_level_constant(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        constant: TopLevelVariable,
    ) -> None:
        """Emit documentation content for the top-level constant."""

    @abstractmethod
    def generate_top_level_property(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        property: TopLevelVariable,
    ) -> None:
        """Emit documentation content for the top-level property."""

    @abstractmethod
    def generate_typedef(
        self, writer: FileWriter, graph: PackageGraph, library: Library, typedef: Typedef
    ) -> None:
        """Emit documentation content for the typedef."""

    @abstractmethod
    def generate_additional_files(
        self, writer: FileWriter, graph: PackageGraph | None
    ) -> Awaitable[None] | None:
        """Emit files not specific to a single element.

        May be a coroutine function; the generator awaits the result when it
        is awaitable.
        """
