from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum

from core.exceptions import CalculatorError, ParseError, create_unknown_operation_error


class Operation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def symbol(self) -> str:
        return _OPERATION_SYMBOLS[self]

    @property
    def label(self) -> str:
        return _OPERATION_LABELS[self]

    @classmethod
    def from_value(cls, raw) -> "Operation":
        """
        Resolves an Operation from its name, value or symbol ("Add", "add", "+").

        Raises:
            EvaluationError: UNKNOWN_OPERATION if nothing matches.
        """
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip()
        if text.lower() in _OPERATION_ALIASES:
            return _OPERATION_ALIASES[text.lower()]
        for op in cls:
            if text.lower() == op.value or text == op.symbol:
                return op
        raise create_unknown_operation_error(raw)


_OPERATION_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "−",
    Operation.MULTIPLY: "×",
    Operation.DIVIDE: "÷",
}

_OPERATION_LABELS = {
    Operation.ADD: "Addition",
    Operation.SUBTRACT: "Subtraction",
    Operation.MULTIPLY: "Multiplication",
    Operation.DIVIDE: "Division",
}

# Keyboard-friendly spellings accepted on the command line
_OPERATION_ALIASES = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
}


class Operand(Enum):
    FIRST = "first"
    SECOND = "second"


@dataclass
class ConversionResult:
    """Outcome of parsing one numeral: either a value or a ParseError."""
    numeral: str
    value: Optional[int] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numeral": self.numeral,
            "value": self.value,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class EvaluationResult:
    """Outcome of evaluating two numerals with an operation."""
    first: str
    second: str
    operation: Optional[Operation] = None
    value: Optional[int] = None
    numeral: Optional[str] = None
    error: Optional[CalculatorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialization helper."""
        d = self.__dict__.copy()
        if isinstance(d['operation'], Operation):
            d['operation'] = d['operation'].value
        d['error'] = self.error.to_dict() if self.error else None
        return d


@dataclass
class CalculatorState:
    """
    Form state of the calculator window.

    Owned by the presentation layer and passed to CalculatorService.calculate
    on each user action; the service keeps nothing between calls.
    """
    input1: str = ""
    input2: str = ""
    operation: Operation = Operation.ADD
    result: str = ""
    error_message: str = ""

    def clear(self):
        self.input1 = ""
        self.input2 = ""
        self.operation = Operation.ADD
        self.result = ""
        self.error_message = ""
