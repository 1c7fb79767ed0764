"""Top-level dispatch loop for nock formulas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import GeneratorType
from typing import Callable, Final

from .builder import assoc
from .errors import MESSAGE_LIMIT, InvalidOpcodeError, MalformedFormulaError, NockError, StepLimitExceededError
from .formulas import FORMULAS, Opcode, Outcome, TailCall
from .values import Cell, Noun, format_noun, validate_noun


HintHook = Callable[[Noun, Noun], None]


def _max_steps_from_env(raw: str) -> int | None:
    # Negative budgets clamp to 0 (unbounded); values that are not integers are ignored.
    try:
        steps = max(0, int(raw))
    except ValueError:
        return None
    return steps or None


_UNSET: Final = object()
_DEFAULT_MAX_STEPS: Final[int | None] = _max_steps_from_env(os.environ.get("NOCK_MAX_STEPS", "0"))

_EVALUATION_STATS: dict[str, int] = {
    "evaluations": 0,
    "faults": 0,
    "steps": 0,
    "max_stack_depth": 0,
}


@dataclass
class Reduction:
    """Per-call bookkeeping shared by the dispatch loop and the handlers."""

    max_steps: int | None = None
    on_hint: HintHook | None = None
    steps: int = 0
    max_stack_depth: int = 0

    def charge(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise StepLimitExceededError(self.max_steps)

    def observe_hint(self, tag: Noun, clue: Noun) -> None:
        if self.on_hint is not None:
            self.on_hint(tag, clue)


def _autocons(subject: Noun, formula: Cell):
    head = yield subject, formula.head
    tail = yield subject, formula.tail
    return Cell(head, tail)


def _dispatch(subject: Noun, formula: Noun, reduction: Reduction) -> Outcome:
    reduction.charge()
    if not isinstance(formula, Cell):
        raise MalformedFormulaError(
            f"formula must be a cell, got atom {format_noun(formula, limit=MESSAGE_LIMIT)}",
            noun=formula,
        )
    op = formula.head
    if isinstance(op, Cell):
        return _autocons(subject, formula)
    handler = FORMULAS.get(op)
    if handler is None:
        raise InvalidOpcodeError(op)
    return handler(subject, formula.tail, reduction)


def _reduce(subject: Noun, formula: Noun, reduction: Reduction) -> Noun:
    # Suspended handlers waiting on a sub-product. Tail calls never push here.
    pending: list[GeneratorType] = []
    while True:
        outcome = _dispatch(subject, formula, reduction)
        while True:
            if isinstance(outcome, TailCall):
                subject, formula = outcome.subject, outcome.formula
                break
            if isinstance(outcome, GeneratorType):
                frame, sent = outcome, None
            elif pending:
                frame, sent = pending.pop(), outcome
            else:
                return outcome
            try:
                subject, formula = frame.send(sent)
            except StopIteration as stop:
                outcome = stop.value
                continue
            pending.append(frame)
            if len(pending) > reduction.max_stack_depth:
                reduction.max_stack_depth = len(pending)
            break


def evaluate(
    subject: Noun,
    formula: Noun,
    *,
    max_steps: int | None | object = _UNSET,
    on_hint: HintHook | None = None,
) -> Noun:
    """Reduce ``formula`` against ``subject`` and return the product.

    ``max_steps`` bounds the number of dispatches (``None`` for no bound; the
    default comes from ``NOCK_MAX_STEPS``). ``on_hint`` is called with
    ``(tag, clue_product)`` for every ``[tag clue]`` hint; its return value is
    ignored.
    """
    validate_noun(subject, where="subject")
    validate_noun(formula, where="formula")
    if max_steps is _UNSET:
        max_steps = _DEFAULT_MAX_STEPS
    if max_steps is not None and (
        not isinstance(max_steps, int) or isinstance(max_steps, bool) or max_steps < 0
    ):
        raise ValueError(f"max_steps must be a non-negative integer or None, got {max_steps!r}")

    reduction = Reduction(max_steps=max_steps, on_hint=on_hint)
    _EVALUATION_STATS["evaluations"] += 1
    try:
        return _reduce(subject, formula, reduction)
    except NockError:
        _EVALUATION_STATS["faults"] += 1
        raise
    finally:
        _EVALUATION_STATS["steps"] += reduction.steps
        if reduction.max_stack_depth > _EVALUATION_STATS["max_stack_depth"]:
            _EVALUATION_STATS["max_stack_depth"] = reduction.max_stack_depth


def nock(*args: object, max_steps: int | None | object = _UNSET, on_hint: HintHook | None = None) -> Noun:
    """Associate ``args`` into ``[subject formula]`` and evaluate it.

    ``nock([132, 19], [4, 0, 3])`` and ``nock([132, 19], 4, 0, 3)`` are the
    same call.
    """
    pair = assoc(list(args))
    if not isinstance(pair, Cell):
        raise MalformedFormulaError("nock() needs a subject and a formula")
    return evaluate(pair.head, pair.tail, max_steps=max_steps, on_hint=on_hint)


def apply_formula(
    opcode: Opcode | int,
    subject: Noun,
    operand: Noun,
    *,
    max_steps: int | None | object = _UNSET,
    on_hint: HintHook | None = None,
) -> Noun:
    """Run a single opcode against ``subject`` with ``operand`` as its argument."""
    return evaluate(subject, Cell(int(opcode), operand), max_steps=max_steps, on_hint=on_hint)


def evaluation_stats(*, reset: bool = False) -> dict[str, int]:
    stats = dict(_EVALUATION_STATS)
    if reset:
        for key in _EVALUATION_STATS:
            _EVALUATION_STATS[key] = 0
    return stats
