"""nock public API."""

from .address import resolve
from .builder import assoc
from .errors import (
    BadConditionError,
    InvalidAddressError,
    InvalidNounError,
    InvalidOpcodeError,
    MalformedFormulaError,
    MissingChildError,
    NockError,
    NockRuntimeError,
    NockTypeError,
    NotACellError,
    NotAnAtomError,
    StepLimitExceededError,
)
from .evaluator import apply_formula, evaluate, evaluation_stats, nock
from .formulas import FORMULAS, Opcode
from .values import (
    Cell,
    Noun,
    NounInfo,
    NounKind,
    classify,
    equals,
    format_noun,
    increment,
    is_atom,
    is_cell,
    is_noun,
    noun_equal,
    noun_info,
    validate_noun,
)

__all__ = [
    "nock",
    "evaluate",
    "apply_formula",
    "evaluation_stats",
    "assoc",
    "resolve",
    "Opcode",
    "FORMULAS",
    "Cell",
    "Noun",
    "NounKind",
    "NounInfo",
    "classify",
    "increment",
    "equals",
    "noun_equal",
    "is_atom",
    "is_cell",
    "is_noun",
    "validate_noun",
    "format_noun",
    "noun_info",
    "NockError",
    "NockRuntimeError",
    "NockTypeError",
    "InvalidNounError",
    "InvalidOpcodeError",
    "InvalidAddressError",
    "MissingChildError",
    "MalformedFormulaError",
    "StepLimitExceededError",
    "NotAnAtomError",
    "NotACellError",
    "BadConditionError",
]
