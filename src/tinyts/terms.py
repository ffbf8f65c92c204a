# Term classes for the checked expression language

class Term:
    """Base class for all terms. Subclasses list their attributes in `fields`."""
    fields = ()

    def __repr__(self):
        args = ", ".join(repr(getattr(self, f)) for f in self.fields)
        return f"{self.__class__.__name__}({args})"

    def __eq__(self, other):
        return (isinstance(other, self.__class__) and
                all(getattr(self, f) == getattr(other, f) for f in self.fields))

    def __hash__(self):
        return hash((self.__class__.__name__,) + tuple(getattr(self, f) for f in self.fields))


class TrueLit(Term):
    """true"""

class FalseLit(Term):
    """false"""

class NumberLit(Term):
    """Numeric literal."""
    fields = ('n',)
    def __init__(self, n):
        self.n = n


class If(Term):
    """cond ? thn : els"""
    fields = ('cond', 'thn', 'els')
    def __init__(self, cond, thn, els):
        self.cond = cond
        self.thn = thn
        self.els = els

class Add(Term):
    """left + right"""
    fields = ('left', 'right')
    def __init__(self, left, right):
        self.left = left
        self.right = right

class Var(Term):
    """Reference to a variable."""
    fields = ('name',)
    def __init__(self, name):
        self.name = name


class Lambda(Term):
    """
    Function literal (x: T1, y: T2) => body.

    Args:
        params: Sequence of (name, Type) pairs
        body: Term
    """
    fields = ('params', 'body')
    def __init__(self, params, body):
        self.params = tuple((name, ty) for name, ty in params)
        self.body = body

class Call(Term):
    """func(arg1, ..., argN)"""
    fields = ('func', 'args')
    def __init__(self, func, args):
        self.func = func
        self.args = tuple(args)

class Seq(Term):
    """body; rest"""
    fields = ('body', 'rest')
    def __init__(self, body, rest):
        self.body = body
        self.rest = rest

class Const(Term):
    """const name = init; rest"""
    fields = ('name', 'init', 'rest')
    def __init__(self, name, init, rest):
        self.name = name
        self.init = init
        self.rest = rest

class RecFunc(Term):
    """
    function func_name(params): ret_type { body }; rest

    The function's own name is visible inside body, so it may call itself.
    """
    fields = ('func_name', 'params', 'ret_type', 'body', 'rest')
    def __init__(self, func_name, params, ret_type, body, rest):
        self.func_name = func_name
        self.params = tuple((name, ty) for name, ty in params)
        self.ret_type = ret_type
        self.body = body
        self.rest = rest


class ObjectNew(Term):
    """{ name1: term1, ... } -- props is a sequence of (name, Term) pairs."""
    fields = ('props',)
    def __init__(self, props):
        self.props = tuple((name, term) for name, term in props)

class ObjectGet(Term):
    """obj.prop_name"""
    fields = ('obj', 'prop_name')
    def __init__(self, obj, prop_name):
        self.obj = obj
        self.prop_name = prop_name


class TypeAbstraction(Term):
    """<T1, ..., Tn>body"""
    fields = ('type_params', 'body')
    def __init__(self, type_params, body):
        self.type_params = tuple(type_params)
        self.body = body

class TypeApplication(Term):
    """target<A1, ..., An>"""
    fields = ('target', 'type_args')
    def __init__(self, target, type_args):
        self.target = target
        self.type_args = tuple(type_args)
