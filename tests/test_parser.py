import pytest
from lark import UnexpectedInput

from exprcalc.frontend.ast_expressions import Binary, Call, Number, Unary
from exprcalc.frontend.parser import (
    ParseError,
    expression_depth,
    parse_expression,
    parse_tree,
)


# ===== Literals =====
def test_parse_integer_literal() -> None:
    assert parse_expression("10") == Number(10.0)


@pytest.mark.parametrize(
    "source, expected",
    [("1.5", 1.5), (".5", 0.5), ("2.", 2.0), ("1.5e3", 1500.0), ("25E-2", 0.25)],
)
def test_parse_real_literals(source: str, expected: float) -> None:
    assert parse_expression(source) == Number(expected)


def test_parentheses_do_not_add_nodes() -> None:
    assert parse_expression("((1))") == Number(1.0)


# ===== Unary Operators =====
def test_unary_chain_nests_right_to_left() -> None:
    expected = Unary("neg", Unary("neg", Unary("neg", Number(1.0))))
    assert parse_expression("---1") == expected


def test_sign_is_not_part_of_number_literal() -> None:
    assert parse_expression("-1") == Unary("neg", Number(1.0))


def test_binary_plus_followed_by_unary_plus() -> None:
    expected = Binary(Number(1.0), (("add", Unary("pos", Number(2.0))),))
    assert parse_expression("1++2") == expected


def test_unary_binds_tighter_than_power() -> None:
    expected = Binary(Unary("neg", Number(2.0)), (("pow", Number(2.0)),))
    assert parse_expression("-2**2") == expected


# ===== Binary Operators =====
def test_precedence_mul_before_add() -> None:
    expr = parse_expression("2+3*4")

    assert isinstance(expr, Binary)
    assert expr.first == Number(2.0)
    [(op, operand)] = expr.ops
    assert op == "add"
    assert operand == Binary(Number(3.0), (("mul", Number(4.0)),))


def test_same_level_operators_fold_into_one_node() -> None:
    expected = Binary(Number(10.0), (("sub", Number(3.0)), ("sub", Number(2.0))))
    assert parse_expression("10-3-2") == expected


def test_power_folds_left_to_right() -> None:
    expected = Binary(Number(2.0), (("pow", Number(3.0)), ("pow", Number(2.0))))
    assert parse_expression("2**3**2") == expected


def test_parse_mod_keyword_operator() -> None:
    expected = Binary(Number(7.0), (("mod", Number(2.0)),))
    assert parse_expression("7 mod 2") == expected


def test_mod_needs_no_surrounding_whitespace() -> None:
    assert parse_expression("7mod2") == parse_expression("7 mod 2")


def test_power_is_one_token() -> None:
    with pytest.raises(ParseError):
        parse_expression("2* *3")


# ===== Function Calls =====
def test_parse_call_with_several_arguments() -> None:
    expected = Call("pow", (Number(2.0), Binary(Number(1.0), (("add", Number(2.0)),))))
    assert parse_expression("pow(2, 1 + 2)") == expected


def test_unknown_function_names_still_parse() -> None:
    assert parse_expression("foo_bar(1)") == Call("foo_bar", (Number(1.0),))


def test_call_requires_an_argument() -> None:
    with pytest.raises(ParseError):
        parse_expression("abs()")


# ===== Whitespace =====
def test_whitespace_between_tokens_is_ignored() -> None:
    assert parse_expression("  1 +\n\t20 ") == parse_expression("1+20")


def test_whitespace_inside_number_is_rejected() -> None:
    with pytest.raises(ParseError):
        parse_expression("1 0")


# ===== Parse Tree =====
def test_parse_tree_names_precedence_levels() -> None:
    tree = parse_tree("1+2*3")
    [binary] = tree.children
    assert getattr(binary, "data") == "binary_1"


def test_parse_tree_raises_lark_errors() -> None:
    with pytest.raises(UnexpectedInput):
        parse_tree("1+")


# ===== Errors =====
def test_incomplete_expression_reports_dangling_operator() -> None:
    with pytest.raises(ParseError, match="Failed at: `\\+`") as error:
        parse_expression("1+")
    assert error.value.remainder == "+"
    assert error.value.position == 1


def test_trailing_garbage_reports_remainder() -> None:
    with pytest.raises(ParseError) as error:
        parse_expression("1 2")
    assert error.value.remainder == "2"


def test_unterminated_parenthesis_is_rejected() -> None:
    with pytest.raises(ParseError) as error:
        parse_expression("(1")
    assert error.value.remainder != ""


def test_unknown_character_is_rejected() -> None:
    with pytest.raises(ParseError) as error:
        parse_expression("1 $ 2")
    assert error.value.remainder == "$ 2"


def test_empty_source_is_rejected() -> None:
    with pytest.raises(ParseError):
        parse_expression("")


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_expression("(")


# ===== Nesting Depth =====
def test_depth_counts_nodes_on_longest_path() -> None:
    assert expression_depth(Number(1.0)) == 1
    assert expression_depth(parse_expression("1+2*-3")) == 4


def test_deep_unary_chain_is_rejected() -> None:
    with pytest.raises(ParseError, match="depth"):
        parse_expression("-" * 300 + "1")


def test_deep_parentheses_collapse_below_the_limit() -> None:
    assert parse_expression("(" * 500 + "1" + ")" * 500) == Number(1.0)


def test_max_depth_is_configurable() -> None:
    parse_expression("-1", max_depth=2)
    with pytest.raises(ParseError):
        parse_expression("-1", max_depth=1)
