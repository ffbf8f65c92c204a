from tinyts.core import TyNumber, TyObject, Var, Lambda, Call, Const, ObjectNew, ObjectGet
from tinyts.core import NumberLit, TrueLit, Mode, check

# const f = (x: { foo: number }) => x.foo;
# const x = { foo: 1, bar: true };
# f(x);
program = Const(
    "f", Lambda([("x", TyObject([("foo", TyNumber())]))], ObjectGet(Var("x"), "foo")),
    Const("x", ObjectNew([("foo", NumberLit(1)), ("bar", TrueLit())]), Call(Var("f"), [Var("x")])),
)

print(check(program, mode=Mode.SUBTYPING))
print(check(program, mode=Mode.POLYMORPHIC))
