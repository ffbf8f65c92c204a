class TypeCheckError(Exception):
    """Raised when a term violates a typing rule. Carries the offending term."""
    def __init__(self, message, term=None):
        self.message = message
        self.term = term
        super().__init__(message)

    def __repr__(self):
        if self.term is None:
            return f"{self.__class__.__name__}({self.message!r})"
        return f"{self.__class__.__name__}({self.message!r}, {self.term!r})"

class ScopeError(TypeCheckError):
    """Reference to a variable or type variable that is not in scope."""

class ShapeError(TypeCheckError):
    """A subterm has the wrong kind of type (e.g. number where a function is needed)."""

class ArityError(TypeCheckError):
    """Wrong number of arguments or type arguments."""

class CompatibilityError(TypeCheckError):
    """Two types that must agree do not."""

class UnknownTypeVariableError(ScopeError):
    """Raised by the equivalence checker on a type variable bound nowhere in the comparison."""
    def __init__(self, name):
        self.name = name
        super().__init__(f"unknown type variable: {name}")


def _fields_str(fields):
    return ", ".join(f"{name}: {ty}" for name, ty in fields)


class Type:
    def __str__(self):
        return self.__class__.__name__

    def __repr__(self):
        return str(self)


class NullaryType(Type):
    """Base class for nullary type constructors without parameters."""

    def __eq__(self, other):
        return isinstance(other, self.__class__)

    def __hash__(self):
        return hash(self.__class__.__name__)


class TyBoolean(NullaryType):
    def __str__(self):
        return "boolean"


class TyNumber(NullaryType):
    def __str__(self):
        return "number"


class TyFunc(Type):
    """Function type. Parameter names are kept for display only."""

    def __init__(self, params, ret_type):
        self.params = tuple((name, ty) for name, ty in params)
        self.ret_type = ret_type

    @property
    def param_types(self):
        return tuple(ty for _, ty in self.params)

    def __str__(self):
        return f"({_fields_str(self.params)}) => {self.ret_type}"

    def __eq__(self, other):
        return (isinstance(other, TyFunc) and
                self.params == other.params and
                self.ret_type == other.ret_type)

    def __hash__(self):
        return hash(("TyFunc", self.params, self.ret_type))


class TyObject(Type):
    """Record type. Property order is insertion order, kept for display."""

    def __init__(self, props):
        self.props = tuple((name, ty) for name, ty in props)

    def prop(self, name):
        """Type of the property called `name`, or None if there is none."""
        for prop_name, ty in self.props:
            if prop_name == name:
                return ty
        return None

    def __str__(self):
        if not self.props:
            return "{}"
        return f"{{ {_fields_str(self.props)} }}"

    def __eq__(self, other):
        return isinstance(other, TyObject) and self.props == other.props

    def __hash__(self):
        return hash(("TyObject", self.props))


class TypeVar(Type):
    """Reference to a type parameter bound by an enclosing TypeAbs."""

    def __init__(self, name):
        self.name = name

    def __str__(self):
        return self.name

    def __eq__(self, other):
        return isinstance(other, TypeVar) and self.name == other.name

    def __hash__(self):
        return hash(("TypeVar", self.name))


class TypeAbs(Type):
    """
    Universal quantifier <T1, ..., Tn>body.

    Equality is alpha-equivalence: two quantifiers that differ only in the
    names of their parameters are equal. Variables free in either side are
    compared by name.
    """

    def __init__(self, type_params, body):
        self.type_params = tuple(type_params)
        self.body = body

    def __str__(self):
        return f"<{', '.join(self.type_params)}>{self.body}"

    def __eq__(self, other):
        if not isinstance(other, TypeAbs):
            return False
        from tinyts.typecheck.equivalence import types_equal
        from tinyts.typecheck.substitution import free_type_vars
        return types_equal(self, other, free_type_vars(self) | free_type_vars(other))

    def __hash__(self):
        # Names of bound variables must not influence the hash.
        return hash(("TypeAbs", len(self.type_params)))
