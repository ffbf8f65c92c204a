import pytest
from tinyts.core import (
    TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs,
    TrueLit, NumberLit, If, Add, Var, Lambda, Call, Const, RecFunc, ObjectNew, ObjectGet,
    TypeAbstraction, Mode, typecheck,
    ScopeError, CompatibilityError
)

BOOL = TyBoolean()
NUM = TyNumber()

# function f(n: number): number { return f(n) + n; }
LOOP_BODY = Add(Call(Var("f"), [Var("n")]), Var("n"))


def rec_f(body, rest, ret_type=NUM):
    return RecFunc("f", [("n", NUM)], ret_type, body, rest)


@pytest.mark.parametrize("mode", [Mode.SUBTYPING, Mode.POLYMORPHIC])
def test_self_call(mode):
    term = rec_f(LOOP_BODY, Call(Var("f"), [NumberLit(10)]))
    assert typecheck(term, mode=mode) == NUM

def test_function_visible_in_rest():
    term = rec_f(LOOP_BODY, Var("f"))
    assert typecheck(term, mode=Mode.SUBTYPING) == TyFunc([("n", NUM)], NUM)

def test_params_not_visible_in_rest():
    term = rec_f(LOOP_BODY, Var("n"))
    with pytest.raises(ScopeError, match="unknown variable"):
        typecheck(term, mode=Mode.SUBTYPING)

def test_const_cannot_recurse():
    term = Const("f", Lambda([("n", NUM)], LOOP_BODY), Call(Var("f"), [NumberLit(10)]))
    with pytest.raises(ScopeError, match="unknown variable"):
        typecheck(term, mode=Mode.SUBTYPING)

def test_wrong_return_type():
    term = rec_f(LOOP_BODY, Var("f"), ret_type=BOOL)
    with pytest.raises(CompatibilityError, match="wrong return type") as exc:
        typecheck(term, mode=Mode.SUBTYPING)
    assert exc.value.term is term

def test_return_type_must_be_equal_not_a_subtype():
    # function f(n: number): { foo: number } { return { foo: n, bar: true }; }
    body = ObjectNew([("foo", Var("n")), ("bar", TrueLit())])
    term = rec_f(body, Var("f"), ret_type=TyObject([("foo", NUM)]))
    with pytest.raises(CompatibilityError, match="wrong return type"):
        typecheck(term, mode=Mode.SUBTYPING)

def test_self_call_before_declared_type_is_checked():
    # the self-call in the body sees the declared type even though the body
    # has not been checked yet
    body = If(TrueLit(), NumberLit(0), Call(Var("f"), [Var("n")]))
    term = rec_f(body, Call(Var("f"), [NumberLit(3)]))
    assert typecheck(term, mode=Mode.SUBTYPING) == NUM

def test_self_call_with_wrong_argument():
    body = Call(Var("f"), [TrueLit()])
    with pytest.raises(CompatibilityError, match="parameter type mismatch"):
        typecheck(rec_f(body, Var("f")), mode=Mode.SUBTYPING)

def test_recursive_object_accessor():
    # function get(o: { foo: number, bar: boolean }): number { return o.foo; } get({ foo: 1, bar: true, baz: 2 })
    term = RecFunc(
        "get", [("o", TyObject([("foo", NUM), ("bar", BOOL)]))], NUM,
        ObjectGet(Var("o"), "foo"),
        Call(Var("get"), [ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit()), ("baz", NumberLit(2))])]),
    )
    assert typecheck(term, mode=Mode.SUBTYPING) == NUM

def test_generic_recursive_function():
    # <T>() => { function id(x: T): T { return x; }; id }
    T = TypeVar("T")
    term = TypeAbstraction(["T"], RecFunc("id", [("x", T)], T, Var("x"), Var("id")))
    assert typecheck(term) == TypeAbs(["T"], TyFunc([("x", T)], T))

def test_return_annotation_out_of_scope():
    term = RecFunc("f", [("n", NUM)], TypeVar("T"), Var("n"), Var("f"))
    with pytest.raises(ScopeError, match="unknown type variable"):
        typecheck(term)
