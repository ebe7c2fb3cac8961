"""Tests for core/models.py and core/exceptions.py."""

import pytest

from core.exceptions import (
    CalculatorError,
    ErrorCode,
    EvaluationError,
    ParseError,
    create_invalid_symbol_error,
    create_unknown_error,
)
from core.models import Operation


class TestOperation:

    @pytest.mark.parametrize("raw,expected", [
        ("add", Operation.ADD),
        ("Add", Operation.ADD),
        ("SUBTRACT", Operation.SUBTRACT),
        ("+", Operation.ADD),
        ("-", Operation.SUBTRACT),
        ("−", Operation.SUBTRACT),
        ("x", Operation.MULTIPLY),
        ("×", Operation.MULTIPLY),
        ("/", Operation.DIVIDE),
        ("÷", Operation.DIVIDE),
        (Operation.DIVIDE, Operation.DIVIDE),
    ])
    def test_from_value(self, raw, expected):
        assert Operation.from_value(raw) is expected

    @pytest.mark.parametrize("raw", ["", "mod", "%"])
    def test_from_value_unknown(self, raw):
        with pytest.raises(EvaluationError) as exc:
            Operation.from_value(raw)
        assert exc.value.error_code == ErrorCode.UNKNOWN_OPERATION

    def test_labels(self):
        assert Operation.ADD.label == "Addition"
        assert Operation.DIVIDE.symbol == "÷"


class TestCalculatorError:

    def test_str_includes_code_and_operand(self):
        err = create_invalid_symbol_error("Q").tagged("second")
        assert str(err) == "[INVALID_SYMBOL] Invalid symbol: Q (Operand: second)"

    def test_tagged_returns_copy(self):
        err = create_invalid_symbol_error("Q")
        tagged = err.tagged("first")
        assert isinstance(tagged, ParseError)
        assert err.operand == ""
        assert tagged.context == err.context

    def test_to_dict(self):
        err = create_invalid_symbol_error("Q", "XQ")
        assert err.to_dict() == {
            "error_code": "INVALID_SYMBOL",
            "message": "Invalid symbol: Q",
            "operand": "",
            "context": {"symbol": "Q", "numeral": "XQ"},
        }

    def test_unknown_error_wraps_exception(self):
        err = create_unknown_error(PermissionError("denied"), "chart")
        assert isinstance(err, CalculatorError)
        assert err.error_code == ErrorCode.UNKNOWN_ERROR
        assert err.message == "chart: denied"
        assert err.context["exception_type"] == "PermissionError"
