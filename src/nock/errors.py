"""Structured error types for noun validation and evaluation faults."""

from __future__ import annotations

from typing import Final


# Longest rendering of an offending value carried in an error message.
MESSAGE_LIMIT: Final[int] = 256


class NockError(Exception):
    """Base class for structured nock errors."""


class InvalidNounError(NockError, TypeError):
    """A host value handed to the evaluator is not a noun."""

    def __init__(self, value: object, *, where: str = "noun") -> None:
        self.value = value
        self.where = where
        super().__init__(f"{where} has unsupported noun type {type(value).__name__}: {_render(value)}")


class NockRuntimeError(NockError):
    """Generic evaluation fault. Every fault aborts the whole evaluation."""


class InvalidOpcodeError(NockRuntimeError):
    """Formula head is an atom outside the opcode range [0, 10]."""

    def __init__(self, opcode: int) -> None:
        self.opcode = opcode
        super().__init__(f"invalid opcode {_render(opcode)}")


class InvalidAddressError(NockRuntimeError):
    """Tree address is 0, is not an atom, or names a child that does not exist."""

    def __init__(self, address: object, message: str | None = None) -> None:
        self.address = address
        if message is None:
            message = f"invalid tree address {_render(address)}"
        super().__init__(message)


class MissingChildError(InvalidAddressError):
    """A head or tail was taken on an atom while walking a tree address."""

    def __init__(self, address: int, axis: int, atom: int) -> None:
        self.axis = axis
        self.atom = atom
        super().__init__(
            address,
            f"tree address {_render(address)} has no child at axis {_render(axis)}: "
            f"reached atom {_render(atom)}",
        )


class MalformedFormulaError(NockRuntimeError):
    """Formula or opcode operand does not have the required shape."""

    def __init__(self, message: str, *, noun: object = None) -> None:
        self.noun = noun
        super().__init__(message)


class StepLimitExceededError(NockRuntimeError):
    """Evaluation ran past its step budget."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"evaluation exceeded step budget of {limit}")


class NockTypeError(NockRuntimeError):
    """An operation received an atom where a cell is required, or the reverse."""

    def __init__(self, message: str, *, noun: object) -> None:
        self.noun = noun
        super().__init__(message)


class NotAnAtomError(NockTypeError):
    """Increment applied to a cell."""

    def __init__(self, noun: object) -> None:
        super().__init__(f"cannot increment a cell: {_render(noun)}", noun=noun)


class NotACellError(NockTypeError):
    """Equality test applied to an atom."""

    def __init__(self, noun: object) -> None:
        super().__init__(f"equality test requires a cell, got atom {_render(noun)}", noun=noun)


class BadConditionError(NockTypeError):
    """If-then-else condition reduced to a cell instead of an atom."""

    def __init__(self, noun: object) -> None:
        super().__init__(f"condition must reduce to an atom, got cell {_render(noun)}", noun=noun)


def _render(value: object) -> str:
    from .values import format_noun, is_noun

    if is_noun(value):
        return format_noun(value, limit=MESSAGE_LIMIT)
    if isinstance(value, int) and not isinstance(value, bool):
        # Negative ints are not nouns but still hit the decimal conversion cap.
        return "-" + format_noun(-value, limit=MESSAGE_LIMIT)
    text = repr(value)
    if len(text) > MESSAGE_LIMIT:
        return text[:MESSAGE_LIMIT] + "..."
    return text
