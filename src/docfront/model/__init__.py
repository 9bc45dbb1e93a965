"""Package graph model consumed by the generator."""

from docfront.model.elements import (
    MEMBER_GROUP_ORDER,
    Categorization,
    Class,
    Constructor,
    Container,
    ElementKind,
    Enum,
    Extension,
    Field,
    Library,
    Member,
    MemberGroup,
    Method,
    Mixin,
    ModelElement,
    ModelFunction,
    Operator,
    TopLevelVariable,
    Typedef,
)
from docfront.model.package import Category, Package, PackageGraph

__all__ = [
    # Kinds and ordering
    "ElementKind",
    "MemberGroup",
    "MEMBER_GROUP_ORDER",
    # Base classes
    "ModelElement",
    "Categorization",
    "Member",
    "Container",
    # Members
    "Constructor",
    "Field",
    "Method",
    "Operator",
    # Containers
    "Class",
    "Mixin",
    "Extension",
    "Enum",
    # Top-level elements
    "TopLevelVariable",
    "ModelFunction",
    "Typedef",
    "Library",
    # Packages
    "Category",
    "Package",
    "PackageGraph",
]
