"""Group flat argument sequences into right-nested cells."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import InvalidNounError
from .values import Cell, Noun, validate_noun


def _is_group(value: object) -> bool:
    return isinstance(value, (list, tuple))


def assoc(items: Noun | Sequence[object]) -> Noun | Sequence[object]:
    """Associate ``[x1, x2, ..., xn]`` to the right as ``[x1 [x2 [... xn]]]``.

    Nested lists and tuples in any position are associated too. A single
    element is returned as itself (associated if it is a group), and an empty
    sequence comes back unchanged. Anything else must already be a noun.
    """
    if not _is_group(items):
        validate_noun(items, where="assoc item")
        return items
    if not items:
        return items
    if len(items) == 1:
        return assoc(items[0])

    # Fold the right spine from the end so long lists do not recurse.
    product = _assoc_element(items[-1], index=len(items) - 1)
    for index in range(len(items) - 2, -1, -1):
        product = Cell(_assoc_element(items[index], index=index), product)
    return product


def _assoc_element(item: object, *, index: int) -> Noun:
    if _is_group(item):
        if not item:
            raise InvalidNounError(item, where=f"assoc item [{index}]")
        return assoc(item)
    validate_noun(item, where=f"assoc item [{index}]")
    return item
