"""Traversal policy tables.

These tables are the single source of truth for which backend handler renders
each kind of element and in what order a library's contents are visited.

Classes and mixins only render canonical members. Extensions and enums render
every documented member; no canonical gate is applied to them.
"""

from dataclasses import dataclass
from typing import Iterator, Mapping

from docfront.model import MEMBER_GROUP_ORDER, ElementKind, MemberGroup


@dataclass(frozen=True)
class ContainerPolicy:
    """How the members of one container variant are generated.

    Attributes:
        handlers: Backend method name for each member group the variant has.
        canonical_only: Skip non-canonical members when True.
        order: Order the member groups are visited in.
    """

    handlers: Mapping[MemberGroup, str]
    canonical_only: bool
    order: tuple[MemberGroup, ...] = MEMBER_GROUP_ORDER

    def member_groups(self) -> Iterator[tuple[MemberGroup, str]]:
        """(group, handler name) pairs in visiting order."""
        for group in self.order:
            handler = self.handlers.get(group)
            if handler is not None:
                yield group, handler


_CLASS_HANDLERS: dict[MemberGroup, str] = {
    MemberGroup.CONSTRUCTORS: "generate_constructor",
    MemberGroup.CONSTANTS: "generate_constant",
    MemberGroup.STATIC_PROPERTIES: "generate_property",
    MemberGroup.INSTANCE_FIELDS: "generate_property",
    MemberGroup.INSTANCE_METHODS: "generate_method",
    MemberGroup.OPERATORS: "generate_method",
    MemberGroup.STATIC_METHODS: "generate_method",
}

_EXTENSION_HANDLERS: dict[MemberGroup, str] = {
    group: handler
    for group, handler in _CLASS_HANDLERS.items()
    if group is not MemberGroup.CONSTRUCTORS
}

# Enum values are instance fields and render as constants. Enums visit their
# operators before their instance methods.
_ENUM_HANDLERS: dict[MemberGroup, str] = {
    MemberGroup.INSTANCE_FIELDS: "generate_constant",
    MemberGroup.INSTANCE_METHODS: "generate_method",
    MemberGroup.OPERATORS: "generate_method",
}

CONTAINER_POLICIES: dict[ElementKind, ContainerPolicy] = {
    ElementKind.CLASS: ContainerPolicy(_CLASS_HANDLERS, canonical_only=True),
    ElementKind.MIXIN: ContainerPolicy(_CLASS_HANDLERS, canonical_only=True),
    ElementKind.EXTENSION: ContainerPolicy(_EXTENSION_HANDLERS, canonical_only=False),
    ElementKind.ENUM: ContainerPolicy(
        _ENUM_HANDLERS,
        canonical_only=False,
        order=(MemberGroup.INSTANCE_FIELDS, MemberGroup.OPERATORS, MemberGroup.INSTANCE_METHODS),
    ),
}

# Library attribute holding each container variant, in visiting order,
# with the backend method that renders the container page.
LIBRARY_CONTAINERS: tuple[tuple[str, str], ...] = (
    ("classes", "generate_class"),
    ("extensions", "generate_extension"),
    ("mixins", "generate_mixin"),
    ("enums", "generate_enum"),
)

# Top-level declarations, visited after all containers.
LIBRARY_TOP_LEVEL: tuple[tuple[str, str], ...] = (
    ("constants", "generate_top_level_constant"),
    ("properties", "generate_top_level_property"),
    ("functions", "generate_function"),
    ("typedefs", "generate_typedef"),
)
