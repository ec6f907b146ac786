"""Evaluator unit tests."""

from __future__ import annotations

import math

import pytest

from loxide.ast import Binary, Grouping, Literal, Unary
from loxide.errors import EvalError
from loxide.eval import evaluate
from loxide.tokens import Token, TokenType
from loxide.values import FALSE, NIL, TRUE, Boolean, Number, Text


def _op(tt: TokenType, lexeme: str) -> Token:
    return Token(tt, lexeme, None, 1)


def _num(n: float) -> Literal:
    return Literal(Number(n))


class TestLiterals:
    def test_number(self, run) -> None:
        assert run("12.5") == Number(12.5)

    def test_string(self, run) -> None:
        assert run('"hello"') == Text("hello")

    def test_nil(self, run) -> None:
        assert run("nil") is NIL

    def test_grouping_is_transparent(self, run) -> None:
        assert run("((7))") == Number(7.0)


class TestArithmetic:
    def test_negate_times(self, run) -> None:
        result = run("-123 * 45.67")
        assert isinstance(result, Number)
        assert result.value == pytest.approx(-5617.41)

    def test_precedence(self, run) -> None:
        assert run("1 + 2 * 3") == Number(7.0)
        assert run("(1 + 2) * 3") == Number(9.0)

    def test_left_associative_subtraction(self, run) -> None:
        assert run("10 - 4 - 3") == Number(3.0)

    def test_division(self, run) -> None:
        assert run("7 / 2") == Number(3.5)

    def test_negative_zero(self, run) -> None:
        result = run("-0")
        assert result.value == 0.0
        assert math.copysign(1.0, result.value) == -1.0

    def test_double_negation(self, run) -> None:
        assert run("--4") == Number(4.0)


class TestDivisionByZero:
    def test_positive_over_zero(self, run) -> None:
        assert run("1 / 0") == Number(math.inf)

    def test_negative_over_zero(self, run) -> None:
        assert run("-1 / 0") == Number(-math.inf)

    def test_over_negative_zero(self, run) -> None:
        assert run("1 / -0") == Number(-math.inf)

    def test_zero_over_zero(self, run) -> None:
        assert math.isnan(run("0 / 0").value)


class TestConcatenation:
    def test_strings(self, run) -> None:
        assert run('"foo" + "bar"') == Text("foobar")

    def test_empty_strings(self, run) -> None:
        assert run('"" + ""') == Text("")

    @pytest.mark.parametrize("source", ['1 + "bar"', '"foo" + 1', "true + 1", "nil + nil"])
    def test_mixed_operands(self, run, source: str) -> None:
        with pytest.raises(EvalError, match="Operands must be two numbers or two strings."):
            run(source)

    def test_error_token_is_operator(self, run) -> None:
        with pytest.raises(EvalError) as exc_info:
            run('1 +\n"bar"')
        assert exc_info.value.token.type == TokenType.PLUS
        assert exc_info.value.line == 1


class TestComparison:
    def test_ordering(self, run) -> None:
        assert run("1 < 2") == TRUE
        assert run("2 <= 2") == TRUE
        assert run("1 > 2") == FALSE
        assert run("3 >= 4") == FALSE

    @pytest.mark.parametrize("source", ['"a" < "b"', "true > false", "1 >= nil"])
    def test_requires_numbers(self, run, source: str) -> None:
        with pytest.raises(EvalError, match="Operands must be numbers."):
            run(source)

    @pytest.mark.parametrize("source", ['"a" - "b"', '2 * "3"', "nil / 1"])
    def test_arithmetic_requires_numbers(self, run, source: str) -> None:
        with pytest.raises(EvalError, match="Operands must be numbers."):
            run(source)


class TestEquality:
    def test_numbers(self, run) -> None:
        assert run("1 == 1") == TRUE
        assert run("1 == 2") == FALSE
        assert run("1 != 2") == TRUE

    def test_no_coercion(self, run) -> None:
        assert run('1 == "1"') == FALSE
        assert run('1 != "1"') == TRUE

    def test_nil(self, run) -> None:
        assert run("nil == nil") == TRUE
        assert run("nil == false") == FALSE
        assert run("0 == nil") == FALSE

    def test_strings_and_booleans(self, run) -> None:
        assert run('"a" == "a"') == TRUE
        assert run("true == true") == TRUE
        assert run("true == 1") == FALSE

    def test_nan_not_equal_to_itself(self, run) -> None:
        assert run("0/0 == 0/0") == FALSE


class TestTruthiness:
    def test_not_nil(self, run) -> None:
        assert run("!nil") == TRUE

    def test_not_false(self, run) -> None:
        assert run("!false") == TRUE

    def test_zero_is_truthy(self, run) -> None:
        assert run("!0") == FALSE

    def test_empty_string_is_truthy(self, run) -> None:
        assert run('!""') == FALSE

    def test_negation_result_is_boolean(self, run) -> None:
        assert isinstance(run("!!1"), Boolean)

    def test_minus_requires_number(self, run) -> None:
        with pytest.raises(EvalError, match="Operand must be a number."):
            run('-"x"')


class TestInvalidOperators:
    def test_invalid_unary(self) -> None:
        node = Unary(_op(TokenType.PLUS, "+"), _num(1))
        with pytest.raises(EvalError, match="Invalid unary operator."):
            evaluate(node)

    def test_invalid_binary(self) -> None:
        node = Binary(_num(1), _op(TokenType.COMMA, ","), _num(2))
        with pytest.raises(EvalError, match="Invalid binary operator."):
            evaluate(node)

    def test_not_a_node(self) -> None:
        with pytest.raises(TypeError):
            evaluate("1 + 2")  # type: ignore[arg-type]


class TestHandBuiltTrees:
    def test_tree_from_parts(self) -> None:
        tree = Binary(
            Unary(_op(TokenType.MINUS, "-"), _num(123)),
            _op(TokenType.STAR, "*"),
            Grouping(_num(45.67)),
        )
        assert evaluate(tree).value == pytest.approx(-5617.41)

    def test_reevaluation_is_stable(self, parse_source) -> None:
        expr = parse_source('("a" + "b") == "ab"')
        first = evaluate(expr)
        assert evaluate(expr) == first == TRUE
