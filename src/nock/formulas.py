"""Opcode handlers for the twelve reduction rules.

A handler is called as ``handler(subject, operand, reduction)`` and returns
one of three things:

- a product noun;
- a ``TailCall`` naming the next ``(subject, formula)`` to reduce in place of
  the current one;
- a generator that yields ``(subject, formula)`` requests, is sent each
  request's product, and finally returns a product or a ``TailCall``.

Handlers never call the evaluator themselves. The dispatch loop in
``nock.evaluator`` drives them, which keeps reduction depth off the Python
call stack.
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Final, Union

from .address import resolve
from .errors import MESSAGE_LIMIT, BadConditionError, MalformedFormulaError
from .values import Cell, Noun, classify as noun_classify, equals as noun_equals, format_noun, increment as atom_increment

if TYPE_CHECKING:
    from .evaluator import Reduction


class Opcode(IntEnum):
    SLOT = 0
    CONSTANT = 1
    EVALUATE = 2
    CELL = 3
    INCREMENT = 4
    EQUAL = 5
    IF_THEN_ELSE = 6
    COMPOSE = 7
    EXTEND = 8
    INVOKE = 9
    HINT = 10


@dataclass(frozen=True)
class TailCall:
    subject: Noun
    formula: Noun


Request = tuple[Noun, Noun]
Outcome = Union[Noun, TailCall, Generator[Request, Noun, Union[Noun, TailCall]]]
Handler = Callable[[Noun, Noun, "Reduction"], Outcome]


def _split(operand: Noun, opcode: Opcode, part: str = "operand") -> tuple[Noun, Noun]:
    if not isinstance(operand, Cell):
        raise MalformedFormulaError(
            f"opcode {int(opcode)} ({opcode.name.lower()}) needs a cell {part}, got atom {format_noun(operand, limit=MESSAGE_LIMIT)}",
            noun=operand,
        )
    return operand.head, operand.tail


def slot(subject: Noun, operand: Noun, reduction: Reduction) -> Noun:
    return resolve(operand, subject)


def constant(subject: Noun, operand: Noun, reduction: Reduction) -> Noun:
    return operand


def evaluate(subject: Noun, operand: Noun, reduction: Reduction):
    """*[a 2 b c] -> *[*[a b] *[a c]]"""
    b, c = _split(operand, Opcode.EVALUATE)
    new_subject = yield subject, b
    new_formula = yield subject, c
    return TailCall(new_subject, new_formula)


def cell(subject: Noun, operand: Noun, reduction: Reduction):
    product = yield subject, operand
    return int(noun_classify(product))


def increment(subject: Noun, operand: Noun, reduction: Reduction):
    product = yield subject, operand
    return atom_increment(product)


def equal(subject: Noun, operand: Noun, reduction: Reduction):
    product = yield subject, operand
    return noun_equals(product)


def if_then_else(subject: Noun, operand: Noun, reduction: Reduction):
    """*[a 6 b c d]: reduce ``c`` when the test is 0, ``d`` for any other atom.

    Non-zero atoms other than 1 also select ``d``; a cell test is an error.
    """
    test, branches = _split(operand, Opcode.IF_THEN_ELSE)
    then, otherwise = _split(branches, Opcode.IF_THEN_ELSE, "branch pair")
    product = yield subject, test
    if isinstance(product, Cell):
        raise BadConditionError(product)
    return TailCall(subject, then if product == 0 else otherwise)


def compose(subject: Noun, operand: Noun, reduction: Reduction):
    """*[a 7 b c] -> *[*[a b] c]"""
    b, c = _split(operand, Opcode.COMPOSE)
    intermediate = yield subject, b
    return TailCall(intermediate, c)


def extend(subject: Noun, operand: Noun, reduction: Reduction):
    """*[a 8 b c] -> *[[*[a b] a] c]"""
    b, c = _split(operand, Opcode.EXTEND)
    pinned = yield subject, b
    return TailCall(Cell(pinned, subject), c)


def invoke(subject: Noun, operand: Noun, reduction: Reduction):
    """*[a 9 b c]: build a core with ``c``, then run its arm at address ``b`` against it."""
    b, c = _split(operand, Opcode.INVOKE)
    core = yield subject, c
    return TailCall(core, resolve(b, core))


def hint(subject: Noun, operand: Noun, reduction: Reduction):
    """*[a 10 b c]: ``b`` is a bare tag or a ``[tag clue]`` pair.

    The clue is reduced against the subject and handed to the hint hook.
    Its product is discarded, so a hint can never change the result.
    """
    b, c = _split(operand, Opcode.HINT)
    if isinstance(b, Cell):
        clue = yield subject, b.tail
        reduction.observe_hint(b.head, clue)
    return TailCall(subject, c)


FORMULAS: Final[dict[Opcode, Handler]] = {
    Opcode.SLOT: slot,
    Opcode.CONSTANT: constant,
    Opcode.EVALUATE: evaluate,
    Opcode.CELL: cell,
    Opcode.INCREMENT: increment,
    Opcode.EQUAL: equal,
    Opcode.IF_THEN_ELSE: if_then_else,
    Opcode.COMPOSE: compose,
    Opcode.EXTEND: extend,
    Opcode.INVOKE: invoke,
    Opcode.HINT: hint,
}
