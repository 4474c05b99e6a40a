import pytest

from passerine.common.data import (
    Boolean,
    Closure,
    Float,
    Function,
    Integer,
    Kind,
    Label,
    Lit,
    LitLabel,
    String,
    Tuple,
    Unit,
)


def test_unit_display_and_debug():
    assert str(Unit()) == "()"
    assert repr(Unit()) == "Unit"


def test_boolean_display():
    assert str(Boolean(True)) == "true"
    assert str(Boolean(False)) == "false"


def test_integer_display_matches_value():
    assert str(Integer(42)) == "42"
    assert str(Integer(-7)) == "-7"


def test_integer_out_of_range():
    with pytest.raises(OverflowError):
        Integer(2**63)
    with pytest.raises(OverflowError):
        Integer(-(2**63) - 1)


def test_integer_rejects_bool():
    with pytest.raises(TypeError):
        Integer(True)


def test_whole_float_display_has_no_point():
    assert str(Float(1.0)) == "1"


def test_fractional_float_display_round_trips():
    assert float(str(Float(2.5))) == 2.5
    assert "e" not in str(Float(1e-7))
    assert float(str(Float(1e-7))) == 1e-7


def test_float_and_integer_are_distinct():
    assert Float(1.0) != Integer(1)
    assert Boolean(True) != Integer(1)


def test_string_display_is_raw():
    assert str(String("a \"b\"")) == "a \"b\""
    assert repr(String("x")).startswith("String(")


def test_tuple_display():
    assert str(Tuple((Integer(1), Integer(2)))) == "(1, 2)"


def test_tuple_accepts_any_iterable():
    items = [Integer(1), Boolean(False)]
    assert Tuple(items) == Tuple(tuple(items))
    assert Tuple(items).items == tuple(items)


def test_label_display():
    assert str(Label(3, Integer(7))) == "3 7"


def test_naked_values_cannot_be_displayed():
    with pytest.raises(TypeError):
        str(Kind(1))
    with pytest.raises(TypeError):
        str(Function(object()))


def test_function_and_closure_debug():
    assert repr(Function(object())) == "Function(...)"
    assert repr(Closure.wrap(object())) == "Closure(...)"
    assert str(Closure.wrap(object())) == "Function"


def test_closure_wrap_has_no_captures():
    body = object()
    closure = Closure.wrap(body)
    assert closure.lambda_ is body
    assert closure.captures == []


def test_closure_wraps_are_independent():
    body = object()
    a = Closure.wrap(body)
    b = Closure.wrap(body)
    a.captures.append(Integer(1))
    assert b.captures == []


def test_data_is_hashable():
    values = {Integer(1), Integer(1), Tuple((Unit(),))}
    assert len(values) == 2


def test_lit_to_data():
    assert Lit(True).to_data() == Boolean(True)
    assert Lit(5).to_data() == Integer(5)
    assert Lit(1.5).to_data() == Float(1.5)
    assert Lit("hi").to_data() == String("hi")
    assert Lit(()).to_data() == Unit()


def test_lit_equality_respects_type():
    assert Lit(1) != Lit(1.0)
    assert Lit(1) != Lit(True)
    assert Lit(2) == Lit(2)


def test_lit_display():
    assert str(Lit(True)) == "True"
    assert str(Lit(False)) == "False"
    assert str(Lit(())) == "()"
    assert str(Lit("word")) == "word"


def test_lit_rejects_unsupported_values():
    with pytest.raises(TypeError):
        Lit([1])
    with pytest.raises(TypeError):
        Lit((1,))


def test_lit_label_to_data():
    assert LitLabel(2, Lit(5)).to_data() == Label(2, Integer(5))
    assert str(LitLabel(2, Lit(5))).startswith("#2(")