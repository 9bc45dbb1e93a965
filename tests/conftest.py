"""Shared pytest fixtures for all tests.

Provides a recording backend, an in-memory write primitive and two sample
package graphs:

- foo_graph: library ``mylib`` with class ``Foo``, a canonical method ``bar``
  and a non-canonical override ``baz``.
- rich_graph: every element kind, with hidden and non-canonical members
  sprinkled in so filtering and ordering can be checked in one walk.
"""

import asyncio
from pathlib import Path

import pytest

from docfront.diagnostics import WarningCollector
from docfront.generation.backend import GeneratorBackend
from docfront.model import (
    Category,
    Class,
    Constructor,
    Enum,
    Extension,
    Field,
    Library,
    Method,
    Mixin,
    ModelFunction,
    Operator,
    Package,
    PackageGraph,
    TopLevelVariable,
    Typedef,
)


class RecordingBackend(GeneratorBackend):
    """Backend that records every call and writes one small file per element.

    Args:
        write_pages: Write a text file for each element through the writer.
        fail_on: (method name, element name) pair whose call raises RuntimeError.
        async_additional: Return a coroutine from generate_additional_files.
    """

    def __init__(self, write_pages=True, fail_on=None, async_additional=False):
        self.write_pages = write_pages
        self.fail_on = fail_on
        self.async_additional = async_additional
        self.calls = []
        self.category_json_input = None
        self.search_index_input = None

    @property
    def call_names(self):
        return [(method, getattr(element, "name", None)) for method, element in self.calls]

    def _record(self, method, writer, element):
        self.calls.append((method, element))
        if self.fail_on == (method, element.name):
            raise RuntimeError(f"{method} failed for {element.name}")
        if self.write_pages:
            writer(
                f"{element.kind.value}/{element.fully_qualified_name}.txt",
                element.name,
                element=element,
            )

    def generate_package(self, writer, graph, package):
        self._record("generate_package", writer, package)

    def generate_category(self, writer, graph, category):
        self._record("generate_category", writer, category)

    def generate_library(self, writer, graph, library):
        self._record("generate_library", writer, library)

    def generate_class(self, writer, graph, library, clazz):
        self._record("generate_class", writer, clazz)

    def generate_enum(self, writer, graph, library, enum):
        self._record("generate_enum", writer, enum)

    def generate_mixin(self, writer, graph, library, mixin):
        self._record("generate_mixin", writer, mixin)

    def generate_extension(self, writer, graph, library, extension):
        self._record("generate_extension", writer, extension)

    def generate_constructor(self, writer, graph, library, clazz, constructor):
        self._record("generate_constructor", writer, constructor)

    def generate_constant(self, writer, graph, library, container, field):
        self._record("generate_constant", writer, field)

    def generate_property(self, writer, graph, library, container, field):
        self._record("generate_property", writer, field)

    def generate_method(self, writer, graph, library, container, method):
        self._record("generate_method", writer, method)

    def generate_function(self, writer, graph, library, function):
        self._record("generate_function", writer, function)

    def generate_top_level_constant(self, writer, graph, library, constant):
        self._record("generate_top_level_constant", writer, constant)

    def generate_top_level_property(self, writer, graph, library, property):
        self._record("generate_top_level_property", writer, property)

    def generate_typedef(self, writer, graph, library, typedef):
        self._record("generate_typedef", writer, typedef)

    def generate_additional_files(self, writer, graph):
        self.calls.append(("generate_additional_files", graph))
        if self.async_additional:
            return self._write_additional_files(writer)
        writer("static/styles.css", "body {}", allow_overwrite=True)
        return None

    async def _write_additional_files(self, writer):
        await asyncio.sleep(0)
        writer("static/styles.css", "body {}", allow_overwrite=True)

    def generate_category_json(self, writer, categories):
        self.calls.append(("generate_category_json", None))
        self.category_json_input = list(categories)
        writer("categories.json", "[]", allow_overwrite=True)

    def generate_search_index(self, writer, indexed_elements):
        self.calls.append(("generate_search_index", None))
        self.search_index_input = list(indexed_elements)
        writer("index.json", "[]", allow_overwrite=True)


class MemoryFileWriter:
    """Write primitive that keeps every write in memory."""

    def __init__(self):
        self.writes = []

    def __call__(self, file_path, content, *, allow_overwrite=False, element=None):
        self.writes.append(
            {
                "path": file_path,
                "content": content,
                "allow_overwrite": allow_overwrite,
                "element": element,
            }
        )
        return Path(file_path)

    @property
    def paths(self):
        return [write["path"] for write in self.writes]


def build_foo_graph(with_category=False):
    foo = Class(
        name="Foo",
        documentation="A foo.",
        instance_methods=[
            Method(name="bar", documentation="Bars."),
            Method(name="baz", documentation="Inherited baz.", is_canonical=False),
        ],
    )
    library = Library(
        name="mylib",
        documentation="My library.",
        source_uri="package:mypkg/mylib.dart",
        classes=[foo],
        category_names=["Core"] if with_category else [],
    )
    package = Package(name="mypkg", libraries=[library])
    return PackageGraph(default_package=package, local_packages=[package])


def build_rich_graph():
    alpha = Class(
        name="Alpha",
        documentation="The first class.",
        category_names=["Cat1"],
        constructors=[
            Constructor(name="Alpha"),
            Constructor(name="Alpha.hidden", documented=False),
        ],
        constants=[Field(name="MAX", is_const=True)],
        static_properties=[Field(name="instances")],
        instance_fields=[
            Field(name="size"),
            Field(name="inheritedField", is_canonical=False),
        ],
        instance_methods=[
            Method(name="run"),
            Method(name="toString", is_canonical=False),
            Method(name="secret", documented=False),
        ],
        operators=[Operator(name="==")],
        static_methods=[Method(name="create")],
    )
    private = Class(
        name="_Private",
        documented=False,
        instance_methods=[Method(name="leak")],
    )
    extension = Extension(
        name="AlphaExt",
        extended_type="Alpha",
        constants=[Field(name="EXT_C", is_const=True)],
        static_properties=[Field(name="extStatic")],
        instance_fields=[
            Field(name="extField"),
            Field(name="extNonCanonical", is_canonical=False),
        ],
        instance_methods=[Method(name="extMethod")],
        operators=[Operator(name="+")],
        static_methods=[Method(name="extStaticMethod")],
    )
    mover = Mixin(
        name="Mover",
        constructors=[Constructor(name="Mover.inherited", is_canonical=False)],
        constants=[Field(name="INHERITED_LIMIT", is_const=True, is_canonical=False)],
        static_properties=[Field(name="inheritedRegistry", is_canonical=False)],
        instance_fields=[Field(name="speed")],
        instance_methods=[
            Method(name="move"),
            Method(name="inheritedMove", is_canonical=False),
        ],
        operators=[Operator(name="-", is_canonical=False)],
        static_methods=[Method(name="inheritedFactory", is_canonical=False)],
    )
    color = Enum(
        name="Color",
        instance_fields=[
            Field(name="red", is_const=True),
            Field(name="green", is_const=True, documented=False),
            Field(name="index", is_canonical=False),
        ],
        instance_methods=[Method(name="describe")],
        operators=[Operator(name="<")],
    )
    lib_a = Library(
        name="lib_a",
        documentation="Library A.",
        source_uri="package:pkg/lib_a.dart",
        category_names=["Cat1"],
        classes=[alpha, private],
        extensions=[extension],
        mixins=[mover],
        enums=[color],
        constants=[TopLevelVariable(name="PI", is_const=True)],
        properties=[TopLevelVariable(name="counter")],
        functions=[ModelFunction(name="main")],
        typedefs=[Typedef(name="Callback", aliased_type="void Function()")],
    )
    lib_hidden = Library(
        name="lib_hidden",
        documented=False,
        classes=[Class(name="Invisible")],
    )
    lib_b = Library(name="lib_b", source_uri="package:pkg/lib_b.dart")
    anon = Library(name="anon_lib", is_anonymous=True)
    package = Package(
        name="pkg",
        categories=[Category(name="Cat1"), Category(name="Hidden", documented=False)],
        libraries=[lib_a, lib_hidden, lib_b, anon],
    )
    return PackageGraph(
        default_package=package,
        local_packages=[package],
        warnings=WarningCollector(),
    )


RICH_GRAPH_CALLS = [
    ("generate_package", "pkg"),
    ("generate_category", "Cat1"),
    ("generate_library", "lib_a"),
    ("generate_class", "Alpha"),
    ("generate_constructor", "Alpha"),
    ("generate_constant", "MAX"),
    ("generate_property", "instances"),
    ("generate_property", "size"),
    ("generate_method", "run"),
    ("generate_method", "=="),
    ("generate_method", "create"),
    ("generate_extension", "AlphaExt"),
    ("generate_constant", "EXT_C"),
    ("generate_property", "extStatic"),
    ("generate_property", "extField"),
    ("generate_property", "extNonCanonical"),
    ("generate_method", "extMethod"),
    ("generate_method", "+"),
    ("generate_method", "extStaticMethod"),
    ("generate_mixin", "Mover"),
    ("generate_property", "speed"),
    ("generate_method", "move"),
    ("generate_enum", "Color"),
    ("generate_constant", "red"),
    ("generate_constant", "index"),
    ("generate_method", "<"),
    ("generate_method", "describe"),
    ("generate_top_level_constant", "PI"),
    ("generate_top_level_property", "counter"),
    ("generate_function", "main"),
    ("generate_typedef", "Callback"),
    ("generate_library", "lib_b"),
    ("generate_library", "anon_lib"),
    ("generate_additional_files", None),
    ("generate_category_json", None),
    ("generate_search_index", None),
]


@pytest.fixture
def backend():
    """A recording backend that writes one file per element."""
    return RecordingBackend()


@pytest.fixture
def make_backend():
    """Factory for recording backends with custom options."""
    return RecordingBackend


@pytest.fixture
def memory_writer():
    """An in-memory write primitive."""
    return MemoryFileWriter()


@pytest.fixture
def foo_graph():
    """Graph with mylib.Foo, canonical bar and non-canonical baz."""
    return build_foo_graph()


@pytest.fixture
def make_foo_graph():
    """Factory for the Foo graph, optionally with a categorized library."""
    return build_foo_graph


@pytest.fixture
def rich_graph():
    """Graph covering every element kind and filter case."""
    return build_rich_graph()


@pytest.fixture
def rich_graph_calls():
    """Backend calls expected when generating rich_graph, in order."""
    return list(RICH_GRAPH_CALLS)
