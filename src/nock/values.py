"""Noun model, predicates, and validators for the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Final, Union

from .errors import InvalidNounError, NotACellError, NotAnAtomError


Noun = Union[int, "Cell"]

_DECIMAL_MAX_BITS: Final[int] = 4096


@dataclass(frozen=True, eq=False)
class Cell:
    """Ordered pair of nouns.

    Children are validated on construction, so any existing cell is a
    well-formed noun tree. The hash is derived from the children's cached
    hashes and stored once.
    """

    head: Noun
    tail: Noun
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        validate_noun(self.head, where="cell head")
        validate_noun(self.tail, where="cell tail")
        object.__setattr__(self, "_hash", hash((Cell, hash(self.head), hash(self.tail))))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return noun_equal(self, other)

    def __repr__(self) -> str:
        return format_noun(self)


class NounKind(IntEnum):
    """Cell-test tags. Values follow the calculus: 0 is a cell, 1 is an atom."""

    CELL = 0
    ATOM = 1


@dataclass(frozen=True)
class NounInfo:
    kind: NounKind
    depth: int
    atoms: int
    cells: int


def is_atom(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def is_cell(value: object) -> bool:
    return isinstance(value, Cell)


def is_noun(value: object) -> bool:
    return isinstance(value, Cell) or is_atom(value)


def validate_noun(value: object, *, where: str = "noun") -> None:
    if isinstance(value, Cell):
        return
    if is_atom(value):
        return
    raise InvalidNounError(value, where=where)


def classify(noun: Noun) -> NounKind:
    if isinstance(noun, Cell):
        return NounKind.CELL
    return NounKind.ATOM


def increment(noun: Noun) -> int:
    if isinstance(noun, Cell):
        raise NotAnAtomError(noun)
    return noun + 1


def equals(noun: Noun) -> int:
    """Compare the two halves of a cell: 0 when equal, 1 when not."""
    if not isinstance(noun, Cell):
        raise NotACellError(noun)
    return 0 if noun_equal(noun.head, noun.tail) else 1


def noun_equal(left: Noun, right: Noun) -> bool:
    """Deep structural equality, walked with an explicit stack."""
    pending = [(left, right)]
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        a_cell = isinstance(a, Cell)
        if a_cell != isinstance(b, Cell):
            return False
        if not a_cell:
            if a != b:
                return False
            continue
        if a._hash != b._hash:
            return False
        pending.append((a.tail, b.tail))
        pending.append((a.head, b.head))
    return True


def _format_atom(atom: int) -> str:
    # Decimal conversion of huge ints is capped by the interpreter; print those in hex.
    if atom.bit_length() > _DECIMAL_MAX_BITS:
        return f"0x{atom:x}"
    return str(int(atom))


def format_noun(noun: Noun, *, limit: int | None = None) -> str:
    """Render a noun in bracket notation, walked with an explicit stack.

    Right-nested cells print flat: ``[1 [2 3]]`` is ``[1 2 3]``. With
    ``limit``, output stops after that many characters and ends in ``...``.
    """
    parts: list[str] = []
    size = 0
    # 1-tuples hold the rest of a right spine whose head is being printed.
    pending: list[Noun | tuple[Noun]] = [noun]
    while pending:
        item = pending.pop()
        if isinstance(item, Cell):
            pending.append((item.tail,))
            pending.append(item.head)
            text = "["
        elif isinstance(item, tuple):
            rest = item[0]
            if isinstance(rest, Cell):
                pending.append((rest.tail,))
                pending.append(rest.head)
                text = " "
            else:
                text = " " + _format_atom(rest) + "]"
        else:
            text = _format_atom(item)
        parts.append(text)
        size += len(text)
        if limit is not None and size > limit:
            return "".join(parts)[:limit] + "..."
    return "".join(parts)


def noun_info(noun: Noun) -> NounInfo:
    atoms = 0
    cells = 0
    depth = 0
    pending: list[tuple[Noun, int]] = [(noun, 0)]
    while pending:
        node, level = pending.pop()
        if isinstance(node, Cell):
            cells += 1
            pending.append((node.head, level + 1))
            pending.append((node.tail, level + 1))
            continue
        atoms += 1
        depth = max(depth, level)
    return NounInfo(kind=classify(noun), depth=depth, atoms=atoms, cells=cells)
