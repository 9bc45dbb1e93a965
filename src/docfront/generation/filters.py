"""Element filters applied during traversal.

Two independent stages:

1. filter_non_documented decides whether an element is part of the docs at
   all. Elements it drops are never indexed and never rendered.
2. filter_canonical drops non-canonical duplicates (inherited copies,
   re-exports, overrides) so each declaration gets exactly one page. It is
   only applied where the container policy asks for it.
"""

from typing import Iterable, Iterator, TypeVar

from docfront.model import Member, ModelElement

E = TypeVar("E", bound=ModelElement)
M = TypeVar("M", bound=Member)


def filter_non_documented(elements: Iterable[E]) -> Iterator[E]:
    """Yield the elements that should be documented, preserving order."""
    for element in elements:
        if element.documented:
            yield element


def filter_canonical(members: Iterable[M]) -> Iterator[M]:
    """Yield only canonical members, preserving order."""
    for member in members:
        if member.is_canonical:
            yield member
