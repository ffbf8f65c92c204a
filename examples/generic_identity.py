from tinyts.core import TyBoolean, TyNumber, TyFunc, TypeVar, TypeAbs, Var, Lambda, Const, TrueLit
from tinyts.core import TypeAbstraction, TypeApplication, typecheck

T = TypeVar("T")
U = TypeVar("U")

# const f = <T>(x: T) => x; f<number>
identity = TypeAbstraction(["T"], Lambda([("x", T)], Var("x")))
print(typecheck(Const("f", identity, TypeApplication(Var("f"), [TyNumber()]))))

# const foo = <T>(arg1: T, arg2: <U>(x: T, y: U) => boolean) => true;
# const bar = <U>() => foo<U>;
# bar
foo = TypeAbstraction(["T"], Lambda(
    [("arg1", T), ("arg2", TypeAbs(["U"], TyFunc([("x", T), ("y", U)], TyBoolean())))],
    TrueLit(),
))
bar = TypeAbstraction(["U"], Lambda([], TypeApplication(Var("foo"), [U])))
print(typecheck(Const("foo", foo, Const("bar", bar, Var("bar")))))
