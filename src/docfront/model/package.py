"""Packages, categories and the package graph.

The graph is produced by an external resolver and is read-only for the
generator. It also carries the warning collector that the generator reports
problems through.
"""

from dataclasses import dataclass, field

from docfront.diagnostics import PackageWarning, WarningCollector
from docfront.model.elements import ElementKind, Library, ModelElement


@dataclass(eq=False)
class Category(ModelElement):
    """A named grouping of libraries used for navigation."""

    kind = ElementKind.CATEGORY

    package: "Package | None" = field(default=None, repr=False)


@dataclass(eq=False)
class Package(ModelElement):
    """A package with its categories and libraries, in declaration order."""

    kind = ElementKind.PACKAGE

    categories: list[Category] = field(default_factory=list)
    libraries: list[Library] = field(default_factory=list)

    def __post_init__(self):
        self._adopt(self.categories)
        self._adopt(self.libraries)
        for category in self.categories:
            if category.package is None:
                category.package = self

    @property
    def fully_qualified_name(self) -> str:
        return self.name


@dataclass(eq=False)
class PackageGraph:
    """Root of the model handed to the generator.

    Attributes:
        default_package: The package documentation is generated for.
        local_packages: Packages whose contents are documented, in order.
        warnings: Collector that receives package warnings.
    """

    default_package: Package
    local_packages: list[Package] = field(default_factory=list)
    warnings: WarningCollector = field(default_factory=WarningCollector)

    def warn_on_element(self, element: ModelElement | None, warning: PackageWarning) -> None:
        """Report a non-fatal warning about an element."""
        self.warnings.warn(element, warning)
