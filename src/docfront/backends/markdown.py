"""Markdown backend.

Writes one Markdown page per element, each starting with YAML frontmatter,
plus a 404 page, a category listing and a search index as JSON.

Page layout (logical paths):

    index.md                            package
    topics/<category>-topic.md          category
    <lib>/<lib>-library.md              library
    <lib>/<Name>-<kind>.md              class, mixin, enum, extension
    <lib>/<Container>/<member>.md       constructor, property, method
    <lib>/<Container>/<name>-constant.md
    <lib>/<Container>/operator_<op>.md
    <lib>/<name>-constant.md            top-level constant
    <lib>/<name>-property.md            top-level property
    <lib>/<name>.md                     function
    <lib>/<name>-typedef.md             typedef
"""

import json
import logging
import posixpath
import re
from typing import Sequence

from docfront.config import Config, OutputConfig
from docfront.generation.backend import FileWriter, GeneratorBackend
from docfront.generation.filters import filter_canonical, filter_non_documented
from docfront.generation.frontmatter import build_frontmatter
from docfront.generation.policy import CONTAINER_POLICIES, LIBRARY_CONTAINERS, LIBRARY_TOP_LEVEL
from docfront.model import (
    Categorization,
    Category,
    Class,
    Constructor,
    Container,
    ElementKind,
    Enum,
    Extension,
    Field,
    Library,
    Member,
    Method,
    Mixin,
    ModelElement,
    ModelFunction,
    Package,
    PackageGraph,
    TopLevelVariable,
    Typedef,
)

logger = logging.getLogger(__name__)

_CONTAINER_KINDS = frozenset(
    {ElementKind.CLASS, ElementKind.MIXIN, ElementKind.ENUM, ElementKind.EXTENSION}
)

OPERATOR_FILE_NAMES: dict[str, str] = {
    "==": "equals",
    "+": "plus",
    "-": "minus",
    "*": "multiply",
    "/": "divide",
    "~/": "truncate_divide",
    "%": "modulo",
    "<": "less",
    ">": "greater",
    "<=": "less_equal",
    ">=": "greater_equal",
    "[]": "get",
    "[]=": "put",
    "~": "bitwise_negate",
    "&": "bitwise_and",
    "|": "bitwise_or",
    "^": "bitwise_exclusive_or",
    "<<": "shift_left",
    ">>": "shift_right",
    ">>>": "triple_shift",
    "unary-": "unary_minus",
}

_UNSAFE_CHARS = re.compile(r"[^\w.$-]")


def _safe(name: str) -> str:
    """Make a name usable as a single path component."""
    return _UNSAFE_CHARS.sub("_", name)


def _library_of(element: ModelElement) -> Library:
    current: ModelElement | None = element
    while current is not None:
        if isinstance(current, Library):
            return current
        current = current.enclosing
    raise ValueError(f"{element.name} ({element.kind.value}) is not attached to a library")


def page_path(element: ModelElement) -> str:
    """Logical path of the page documenting an element."""
    kind = element.kind
    if kind is ElementKind.PACKAGE:
        return "index.md"
    if kind is ElementKind.CATEGORY:
        return f"topics/{_safe(element.name)}-topic.md"

    lib_dir = _safe(_library_of(element).name)
    if kind is ElementKind.LIBRARY:
        return f"{lib_dir}/{lib_dir}-library.md"
    if kind in _CONTAINER_KINDS:
        return f"{lib_dir}/{_safe(element.name)}-{kind.value}.md"
    if isinstance(element, TopLevelVariable):
        suffix = "constant" if element.is_const else "property"
        return f"{lib_dir}/{_safe(element.name)}-{suffix}.md"
    if kind is ElementKind.FUNCTION:
        return f"{lib_dir}/{_safe(element.name)}.md"
    if kind is ElementKind.TYPEDEF:
        return f"{lib_dir}/{_safe(element.name)}-typedef.md"

    container = element.enclosing
    if container is None:
        raise ValueError(f"Member {element.name} has no enclosing container")
    member_dir = f"{lib_dir}/{_safe(container.name)}"
    if kind is ElementKind.OPERATOR:
        file_name = OPERATOR_FILE_NAMES.get(element.name, _safe(element.name))
        return f"{member_dir}/operator_{file_name}.md"
    if isinstance(element, Field) and element.is_const:
        return f"{member_dir}/{_safe(element.name)}-constant.md"
    return f"{member_dir}/{_safe(element.name)}.md"


def _link(from_path: str, element: ModelElement) -> str:
    start = posixpath.dirname(from_path) or "."
    return f"[{element.name}]({posixpath.relpath(page_path(element), start)})"


def _heading(text: str) -> str:
    return text.replace("_", " ").capitalize()


class MarkdownBackend(GeneratorBackend):
    """Renders elements as Markdown pages with YAML frontmatter."""

    def __init__(self, output: OutputConfig | None = None):
        self.output = output or Config().output

    # -------------------------------------------------------------------------
    # Page rendering
    # -------------------------------------------------------------------------

    def _metadata(self, element: ModelElement) -> dict:
        library = None
        if element.kind not in (ElementKind.PACKAGE, ElementKind.CATEGORY, ElementKind.LIBRARY):
            library = _library_of(element).name
        enclosed_by = None
        if isinstance(element, Member) and element.enclosing is not None:
            enclosed_by = element.enclosing.name
        categories = None
        if isinstance(element, Categorization) and element.has_categorization:
            categories = list(element.category_names)
        return {
            "name": element.name,
            "kind": element.kind.value,
            "qualified_name": element.fully_qualified_name,
            "library": library,
            "enclosed_by": enclosed_by,
            "categories": categories,
        }

    def render_page(self, element: ModelElement, sections: Sequence[str] = ()) -> str:
        """Full page content for an element."""
        if element.has_documentation:
            body = element.documentation.strip()
        else:
            body = "_No documentation._"
        title = f"# {element.name} {element.kind.value}"
        text = "\n\n".join([title, body, *sections])
        return build_frontmatter(self._metadata(element)) + text + "\n"

    def _write_page(
        self, writer: FileWriter, element: ModelElement, sections: Sequence[str] = ()
    ) -> None:
        writer(page_path(element), self.render_page(element, sections), element=element)

    def _list_section(self, title: str, from_path: str, elements: Sequence[ModelElement]) -> str:
        lines = [f"## {title}", ""]
        lines.extend(f"- {_link(from_path, element)}" for element in elements)
        return "\n".join(lines)

    def _library_sections(self, library: Library) -> list[str]:
        from_path = page_path(library)
        sections = []
        for attribute, _ in (*LIBRARY_CONTAINERS, *LIBRARY_TOP_LEVEL):
            elements = list(filter_non_documented(getattr(library, attribute)))
            if elements:
                sections.append(self._list_section(_heading(attribute), from_path, elements))
        return sections

    def _container_sections(self, container: Container) -> list[str]:
        from_path = page_path(container)
        policy = CONTAINER_POLICIES[container.kind]
        sections = []
        for group, _ in policy.member_groups():
            members = list(filter_non_documented(container.members(group)))
            if not members:
                continue
            linked = set(filter_canonical(members)) if policy.canonical_only else set(members)
            lines = [f"## {_heading(group.value)}", ""]
            for member in members:
                if member in linked:
                    lines.append(f"- {_link(from_path, member)}")
                else:
                    lines.append(f"- {member.name} (inherited)")
            sections.append("\n".join(lines))
        return sections

    # -------------------------------------------------------------------------
    # Element pages
    # -------------------------------------------------------------------------

    def generate_package(self, writer: FileWriter, graph: PackageGraph, package: Package) -> None:
        sections = []
        libraries = list(filter_non_documented(package.libraries))
        if libraries:
            sections.append(self._list_section("Libraries", page_path(package), libraries))
        categories = list(filter_non_documented(package.categories))
        if categories:
            sections.append(self._list_section("Topics", page_path(package), categories))
        self._write_page(writer, package, sections)

    def generate_category(
        self, writer: FileWriter, graph: PackageGraph, category: Category
    ) -> None:
        sections = []
        if category.package is not None:
            members = [
                library
                for library in filter_non_documented(category.package.libraries)
                if category.name in library.category_names
            ]
            if members:
                sections.append(self._list_section("Libraries", page_path(category), members))
        self._write_page(writer, category, sections)

    def generate_library(self, writer: FileWriter, graph: PackageGraph, library: Library) -> None:
        self._write_page(writer, library, self._library_sections(library))

    def generate_class(
        self, writer: FileWriter, graph: PackageGraph, library: Library, clazz: Class
    ) -> None:
        self._write_page(writer, clazz, self._container_sections(clazz))

    def generate_enum(
        self, writer: FileWriter, graph: PackageGraph, library: Library, enum: Enum
    ) -> None:
        self._write_page(writer, enum, self._container_sections(enum))

    def generate_mixin(
        self, writer: FileWriter, graph: PackageGraph, library: Library, mixin: Mixin
    ) -> None:
        sections = self._container_sections(mixin)
        if mixin.superclass_constraints:
            constraints = ", ".join(f"`{c}`" for c in mixin.superclass_constraints)
            sections.insert(0, f"Superclass constraints: {constraints}")
        self._write_page(writer, mixin, sections)

    def generate_extension(
        self, writer: FileWriter, graph: PackageGraph, library: Library, extension: Extension
    ) -> None:
        sections = self._container_sections(extension)
        if extension.extended_type:
            sections.insert(0, f"Extends `{extension.extended_type}`.")
        self._write_page(writer, extension, sections)

    def generate_constructor(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        clazz: Class,
        constructor: Constructor,
    ) -> None:
        self._write_page(writer, constructor)

    def generate_constant(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        field: Field,
    ) -> None:
        self._write_page(writer, field)

    def generate_property(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        field: Field,
    ) -> None:
        self._write_page(writer, field)

    def generate_method(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        container: Container,
        method: Method,
    ) -> None:
        self._write_page(writer, method)

    def generate_function(
        self, writer: FileWriter, graph: PackageGraph, library: Library, function: ModelFunction
    ) -> None:
        self._write_page(writer, function)

    def generate_top_level_constant(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        constant: TopLevelVariable,
    ) -> None:
        self._write_page(writer, constant)

    def generate_top_level_property(
        self,
        writer: FileWriter,
        graph: PackageGraph,
        library: Library,
        property: TopLevelVariable,
    ) -> None:
        self._write_page(writer, property)

    def generate_typedef(
        self, writer: FileWriter, graph: PackageGraph, library: Library, typedef: Typedef
    ) -> None:
        sections = [f"Alias for `{typedef.aliased_type}`."] if typedef.aliased_type else []
        self._write_page(writer, typedef, sections)

    # -------------------------------------------------------------------------
    # Run-level files
    # -------------------------------------------------------------------------

    async def generate_additional_files(
        self, writer: FileWriter, graph: PackageGraph | None
    ) -> None:
        home = "index.md" if graph is not None else None
        metadata = build_frontmatter({"name": "404", "kind": "page"})
        lines = ["# Page not found", "", "The page you are looking for does not exist."]
        if home:
            lines.append(f"Return to the [package overview]({home}).")
        writer(
            self.output.not_found_file,
            metadata + "\n".join(lines) + "\n",
            allow_overwrite=True,
        )

    def _dump_json(self, entries: list[dict]) -> str:
        return json.dumps(entries, indent=self.output.indent or None) + "\n"

    def index_entry(self, element: ModelElement) -> dict:
        """Search index entry for one element."""
        entry = {
            "name": element.name,
            "qualifiedName": element.fully_qualified_name,
            "href": page_path(element),
            "type": element.kind.value,
            "packageName": element.package_name,
        }
        enclosing = element.enclosing
        if enclosing is not None and enclosing.kind is not ElementKind.PACKAGE:
            entry["enclosedBy"] = {
                "name": enclosing.name,
                "type": enclosing.kind.value,
                "href": page_path(enclosing),
            }
        return entry

    def generate_category_json(
        self, writer: FileWriter, categories: Sequence[Categorization]
    ) -> None:
        entries = []
        for element in categories:
            entries.append(
                {
                    "name": element.name,
                    "qualifiedName": element.fully_qualified_name,
                    "href": page_path(element),
                    "type": element.kind.value,
                    "categories": list(element.category_names),
                }
            )
        writer(self.output.category_file, self._dump_json(entries), allow_overwrite=True)

    def generate_search_index(
        self, writer: FileWriter, indexed_elements: Sequence[ModelElement]
    ) -> None:
        entries = [self.index_entry(element) for element in indexed_elements]
        logger.debug(f"Writing {len(entries)} search index entries")
        writer(self.output.search_index_file, self._dump_json(entries), allow_overwrite=True)
