import pytest
from tinyts.core import (
    TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs,
    TrueLit, NumberLit, If, Var, Lambda, Call, Const, ObjectNew, ObjectGet,
    TypeAbstraction, TypeApplication,
    Mode, TypeChecker, typecheck,
    ScopeError, CompatibilityError
)

BOOL = TyBoolean()
NUM = TyNumber()
FOO = TyObject([("foo", NUM)])
FOO_BAR = TyObject([("foo", NUM), ("bar", BOOL)])


def sub_check(term, env=None):
    return typecheck(term, env, mode=Mode.SUBTYPING)


def test_object_construction_keeps_field_order():
    term = ObjectNew([("x", NumberLit(1)), ("y", TrueLit())])
    result = sub_check(term)
    assert result == TyObject([("x", NUM), ("y", BOOL)])
    assert [name for name, _ in result.props] == ["x", "y"]

def test_fields_cannot_see_each_other():
    term = ObjectNew([("a", NumberLit(1)), ("b", Var("a"))])
    with pytest.raises(ScopeError, match="unknown variable"):
        sub_check(term)

def test_projection():
    assert sub_check(ObjectGet(ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())]), "bar")) == BOOL

def test_width_subtyping_scenario():
    # const f = (x: { foo: number }) => x.foo;
    # const x = { foo: 1, bar: true };
    # f(x);
    term = Const(
        "f", Lambda([("x", FOO)], ObjectGet(Var("x"), "foo")),
        Const(
            "x", ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())]),
            Call(Var("f"), [Var("x")]),
        ),
    )
    assert sub_check(term) == NUM

def test_width_subtyping_needs_subtyping_mode():
    term = Call(Lambda([("x", FOO)], ObjectGet(Var("x"), "foo")),
                [ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())])])
    assert typecheck(term, mode=Mode.SUBTYPING) == NUM
    with pytest.raises(CompatibilityError, match="parameter type mismatch"):
        typecheck(term, mode=Mode.POLYMORPHIC)

def test_result_is_declared_return_type():
    f = Lambda([("x", FOO_BAR)], Var("x"))
    arg = ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit()), ("baz", NumberLit(2))])
    assert sub_check(Call(f, [arg])) == FOO_BAR

def test_missing_property_rejected():
    f = Lambda([("x", FOO_BAR)], ObjectGet(Var("x"), "foo"))
    arg = ObjectNew([("foo", NumberLit(1))])
    with pytest.raises(CompatibilityError, match="parameter type mismatch") as exc:
        sub_check(Call(f, [arg]))
    assert exc.value.term is arg

def test_incompatible_property_rejected():
    f = Lambda([("x", FOO)], ObjectGet(Var("x"), "foo"))
    with pytest.raises(CompatibilityError, match="parameter type mismatch"):
        sub_check(Call(f, [ObjectNew([("foo", TrueLit())])]))

def _expects_callback(callback_param_ty):
    # (callback: (x: <callback_param_ty>) => number) => callback({ foo: 1, bar: true })
    return Lambda(
        [("callback", TyFunc([("x", callback_param_ty)], NUM))],
        Call(Var("callback"), [ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())])]),
    )

def test_callback_with_wider_parameter_accepted():
    # the callback only needs foo, and it will be given foo and bar
    g = Lambda([("x", FOO)], ObjectGet(Var("x"), "foo"))
    assert sub_check(Call(_expects_callback(FOO_BAR), [g])) == NUM

def test_callback_with_narrower_parameter_rejected():
    # the callback needs baz, which it would never be given
    needs_baz = TyObject([("foo", NUM), ("bar", BOOL), ("baz", NUM)])
    g = Lambda([("x", needs_baz)], ObjectGet(Var("x"), "baz"))
    with pytest.raises(CompatibilityError, match="parameter type mismatch") as exc:
        sub_check(Call(_expects_callback(FOO_BAR), [g]))
    assert exc.value.term is g

def test_callback_return_type_is_covariant():
    # type F = () => { foo: number; bar: boolean };
    # const f = (x: F) => x().bar;
    # const g = () => ({ foo: 1 });
    # f(g);
    term = Const(
        "f", Lambda([("x", TyFunc([], FOO_BAR))], ObjectGet(Call(Var("x"), []), "bar")),
        Const(
            "g", Lambda([], ObjectNew([("foo", NumberLit(1))])),
            Call(Var("f"), [Var("g")]),
        ),
    )
    with pytest.raises(CompatibilityError, match="parameter type mismatch") as exc:
        sub_check(term)
    assert exc.value.term == Var("g")

def test_callback_returning_wider_object_accepted():
    f = Lambda([("x", TyFunc([], FOO))], ObjectGet(Call(Var("x"), []), "foo"))
    g = Lambda([], ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())]))
    assert sub_check(Call(f, [g])) == NUM

def test_if_branches_must_be_equal_not_related():
    term = If(TrueLit(),
              ObjectNew([("foo", NumberLit(1))]),
              ObjectNew([("foo", NumberLit(2)), ("bar", TrueLit())]))
    with pytest.raises(CompatibilityError, match="then and else have different types"):
        sub_check(term)

def test_if_branches_equal_in_any_property_order():
    term = If(TrueLit(),
              ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())]),
              ObjectNew([("bar", TrueLit()), ("foo", NumberLit(2))]))
    assert sub_check(term) == FOO_BAR

def test_generic_arguments_still_accepted_when_equal():
    # <T>(f: (x: T) => T, a: T) => f(a)
    T = TypeVar("T")
    term = TypeAbstraction(["T"], Lambda([("f", TyFunc([("x", T)], T)), ("a", T)],
                                         Call(Var("f"), [Var("a")])))
    assert sub_check(term) == TypeAbs(["T"], TyFunc([("f", TyFunc([("x", T)], T)), ("a", T)], T))
    assert sub_check(Call(TypeApplication(term, [FOO]),
                          [Lambda([("x", FOO)], Var("x")), ObjectNew([("foo", NumberLit(1))])])) == FOO

def test_checker_object_reused():
    checker = TypeChecker(Mode.SUBTYPING)
    assert checker.mode is Mode.SUBTYPING
    assert checker.check(ObjectGet(Var("o"), "foo"), {"o": FOO_BAR}) == NUM
    assert checker.check(TrueLit()) == BOOL
