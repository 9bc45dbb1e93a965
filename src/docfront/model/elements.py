"""Data models for documentable elements.

The package graph handed to the generator is a tree of these dataclasses.
Every element carries a class-level ``kind`` tag so the generator can
dispatch on the variant instead of on isinstance chains. Owners set the
``enclosing`` back-reference of their children when they are constructed.

Elements compare by identity: two distinct Method objects with the same name
are two different declarations (for example an override and the method it
overrides).
"""

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Iterable


class ElementKind(enum.Enum):
    """Closed set of element variants."""

    PACKAGE = "package"
    CATEGORY = "category"
    LIBRARY = "library"
    CLASS = "class"
    MIXIN = "mixin"
    ENUM = "enum"
    EXTENSION = "extension"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    METHOD = "method"
    OPERATOR = "operator"
    TOP_LEVEL_VARIABLE = "top-level variable"
    FUNCTION = "function"
    TYPEDEF = "typedef"


class MemberGroup(enum.Enum):
    """Groups of members owned by a documentable container."""

    CONSTRUCTORS = "constructors"
    CONSTANTS = "constants"
    STATIC_PROPERTIES = "static_properties"
    INSTANCE_FIELDS = "instance_fields"
    INSTANCE_METHODS = "instance_methods"
    OPERATORS = "operators"
    STATIC_METHODS = "static_methods"


# Default visiting order of member groups. It fixes the order of the search
# index and of backend calls, independent of how a container stores its
# members.
MEMBER_GROUP_ORDER: tuple[MemberGroup, ...] = (
    MemberGroup.CONSTRUCTORS,
    MemberGroup.CONSTANTS,
    MemberGroup.STATIC_PROPERTIES,
    MemberGroup.INSTANCE_FIELDS,
    MemberGroup.INSTANCE_METHODS,
    MemberGroup.OPERATORS,
    MemberGroup.STATIC_METHODS,
)


@dataclass(eq=False)
class ModelElement:
    """Base class for everything the generator can document.

    Attributes:
        name: Simple name of the element.
        documentation: Documentation comment text, if any.
        documented: Whether the element should appear in the docs at all
            (public and not explicitly hidden).
        enclosing: Owning element, set by the owner.
    """

    kind: ClassVar[ElementKind]

    name: str
    documentation: str | None = None
    documented: bool = True
    enclosing: "ModelElement | None" = field(default=None, repr=False)

    @property
    def has_documentation(self) -> bool:
        """True if the element has a non-blank documentation comment."""
        return bool(self.documentation and self.documentation.strip())

    @property
    def fully_qualified_name(self) -> str:
        """Dot-joined names from the library down to this element."""
        parts = []
        element: ModelElement | None = self
        while element is not None and element.kind is not ElementKind.PACKAGE:
            parts.append(element.name)
            element = element.enclosing
        return ".".join(reversed(parts))

    @property
    def package_name(self) -> str | None:
        """Name of the package that owns this element, if it is attached to one."""
        element: ModelElement | None = self
        while element is not None:
            if element.kind is ElementKind.PACKAGE:
                return element.name
            element = element.enclosing
        return None

    def _adopt(self, children: Iterable["ModelElement"]) -> None:
        for child in children:
            child.enclosing = self


@dataclass(eq=False)
class Categorization:
    """Mixin for elements that can be filed under navigation categories."""

    category_names: list[str] = field(default_factory=list, kw_only=True)

    @property
    def has_categorization(self) -> bool:
        """True if the element names at least one category."""
        return bool(self.category_names)


# =============================================================================
# Members
# =============================================================================


@dataclass(eq=False)
class Member(ModelElement):
    """A member of a container.

    ``is_canonical`` is False for duplicates introduced by inheritance,
    re-export or override; those are skipped for page generation in classes
    and mixins.
    """

    is_canonical: bool = True


@dataclass(eq=False)
class Constructor(Member):
    kind = ElementKind.CONSTRUCTOR


@dataclass(eq=False)
class Field(Member):
    """A constant or property of a container."""

    kind = ElementKind.FIELD

    is_const: bool = False


@dataclass(eq=False)
class Method(Member):
    kind = ElementKind.METHOD


@dataclass(eq=False)
class Operator(Method):
    kind = ElementKind.OPERATOR


# =============================================================================
# Containers
# =============================================================================


@dataclass(eq=False)
class Container(ModelElement, Categorization):
    """A documentable container: class, mixin, enum or extension.

    Subclasses map each member group they support to the attribute holding
    it. Groups a variant does not support yield no members.
    """

    member_attributes: ClassVar[dict[MemberGroup, str]] = {}

    def __post_init__(self):
        for group in self.member_attributes:
            self._adopt(self.members(group))

    def members(self, group: MemberGroup) -> list[Member]:
        """Members of one group, in declaration order."""
        attribute = self.member_attributes.get(group)
        if attribute is None:
            return []
        return getattr(self, attribute)


_CLASS_MEMBER_ATTRIBUTES = {group: group.value for group in MEMBER_GROUP_ORDER}


@dataclass(eq=False)
class Class(Container):
    kind = ElementKind.CLASS
    member_attributes = _CLASS_MEMBER_ATTRIBUTES

    constructors: list[Constructor] = field(default_factory=list)
    constants: list[Field] = field(default_factory=list)
    static_properties: list[Field] = field(default_factory=list)
    instance_fields: list[Field] = field(default_factory=list)
    instance_methods: list[Method] = field(default_factory=list)
    operators: list[Operator] = field(default_factory=list)
    static_methods: list[Method] = field(default_factory=list)


@dataclass(eq=False)
class Mixin(Class):
    kind = ElementKind.MIXIN

    superclass_constraints: list[str] = field(default_factory=list)


@dataclass(eq=False)
class Extension(Container):
    kind = ElementKind.EXTENSION
    member_attributes = {
        group: group.value for group in MEMBER_GROUP_ORDER if group is not MemberGroup.CONSTRUCTORS
    }

    extended_type: str | None = None
    constants: list[Field] = field(default_factory=list)
    static_properties: list[Field] = field(default_factory=list)
    instance_fields: list[Field] = field(default_factory=list)
    instance_methods: list[Method] = field(default_factory=list)
    operators: list[Operator] = field(default_factory=list)
    static_methods: list[Method] = field(default_factory=list)


@dataclass(eq=False)
class Enum(Container):
    """An enumeration. Its values are instance fields."""

    kind = ElementKind.ENUM
    member_attributes = {
        MemberGroup.INSTANCE_FIELDS: "instance_fields",
        MemberGroup.INSTANCE_METHODS: "instance_methods",
        MemberGroup.OPERATORS: "operators",
    }

    instance_fields: list[Field] = field(default_factory=list)
    instance_methods: list[Method] = field(default_factory=list)
    operators: list[Operator] = field(default_factory=list)


# =============================================================================
# Top-level elements
# =============================================================================


@dataclass(eq=False)
class TopLevelVariable(ModelElement, Categorization):
    kind = ElementKind.TOP_LEVEL_VARIABLE

    is_const: bool = False


@dataclass(eq=False)
class ModelFunction(ModelElement, Categorization):
    kind = ElementKind.FUNCTION


@dataclass(eq=False)
class Typedef(ModelElement, Categorization):
    kind = ElementKind.TYPEDEF

    aliased_type: str | None = None


@dataclass(eq=False)
class Library(ModelElement, Categorization):
    """A library and everything declared at its top level.

    Attributes:
        source_uri: Where the library was loaded from, used in log messages.
        is_anonymous: True for libraries without a declared name; these are
            not expected to carry library-level documentation.
    """

    kind = ElementKind.LIBRARY

    source_uri: str = ""
    is_anonymous: bool = False
    classes: list[Class] = field(default_factory=list)
    mixins: list[Mixin] = field(default_factory=list)
    enums: list[Enum] = field(default_factory=list)
    extensions: list[Extension] = field(default_factory=list)
    constants: list[TopLevelVariable] = field(default_factory=list)
    properties: list[TopLevelVariable] = field(default_factory=list)
    functions: list[ModelFunction] = field(default_factory=list)
    typedefs: list[Typedef] = field(default_factory=list)

    def __post_init__(self):
        for children in (
            self.classes,
            self.mixins,
            self.enums,
            self.extensions,
            self.constants,
            self.properties,
            self.functions,
            self.typedefs,
        ):
            self._adopt(children)
