import dataclasses

import pytest
from sexpr.nodes import Bool, FunctionCall, List, Number, StringLiteral, format_number, render


def test_render_nested_calls():
    ast = FunctionCall("+", (
        FunctionCall("*", (Number(2.0), Number(3.0))),
        FunctionCall("/", (Number(10.0), Number(5.0))),
    ))
    assert render(ast) == "(+ (* 2 3) (/ 10 5))"


def test_render_floats():
    ast = FunctionCall("+", (
        FunctionCall("*", (Number(2.5), Number(3.5))),
        FunctionCall("/", (Number(7.5), Number(2.5))),
    ))
    assert render(ast) == "(+ (* 2.5 3.5) (/ 7.5 2.5))"


def test_render_strings():
    ast = FunctionCall("println", (
        FunctionCall("concat", (StringLiteral("hello "), StringLiteral("world"))),
    ))
    assert render(ast) == '(println (concat "hello " "world"))'


def test_render_string_raw():
    assert render(StringLiteral('say "hi"')) == '"say "hi""'


def test_render_empty_list():
    assert render(List(())) == "()"


def test_render_list():
    ast = List((
        FunctionCall("if", (
            FunctionCall(">", (Number(5.0), Number(3.0))),
            FunctionCall("println", (StringLiteral("greater"),)),
            FunctionCall("println", (StringLiteral("less"),)),
        )),
    ))
    assert render(ast) == '((if (> 5 3) (println "greater") (println "less")))'


def test_render_boolean():
    assert render(FunctionCall("and", (Bool(True), Bool(False)))) == "(and true false)"


def test_render_zero_arg_call():
    assert render(FunctionCall("now")) == "(now)"


def test_str_is_render():
    ast = FunctionCall("add", (Number(1.0), Number(2.5)))
    assert str(ast) == "(add 1 2.5)"


class TestFormatNumber:
    def test_integral(self):
        assert format_number(2.0) == "2"
        assert format_number(0.0) == "0"
        assert format_number(10.0) == "10"

    def test_fractional(self):
        assert format_number(2.5) == "2.5"
        assert format_number(5.3) == "5.3"
        assert format_number(0.1) == "0.1"

    def test_never_scientific(self):
        assert format_number(1e16) == "10000000000000000"
        assert format_number(0.00001) == "0.00001"

    def test_overflow_stays_digits(self):
        text = format_number(float("inf"))
        assert text.isdigit()
        assert float(text) == float("inf")


def test_nodes_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Number(1.0).value = 2.0


def test_nodes_compare_by_kind():
    assert Bool(True) != Number(1.0)
    assert FunctionCall("f") != List(())


def test_render_rejects_non_nodes():
    with pytest.raises(TypeError, match="not an AST node"):
        render("(add 1 2)")
