"""
Alpha-equivalence of types.

Two types are equal when they have the same structure after consistently
renaming the variables bound by their quantifiers:

    <A>(x: A) => A  ==  <B>(x: B) => B

The comparison is driven by the shape of the second type and carries a
renaming between the names bound on the left and on the right.
"""

from tinyts.typecheck.types import (
    TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs, UnknownTypeVariableError
)


class Renaming:
    """
    Pairing of left-hand names to right-hand names, kept in both directions.

    Extending returns a new Renaming; the receiver is left as it was so that
    sibling comparisons do not see each other's binders.
    """

    def __init__(self, forward=None, backward=None):
        self.forward = forward if forward is not None else {}
        self.backward = backward if backward is not None else {}

    @classmethod
    def identity(cls, names):
        names = list(names)
        return cls({n: n for n in names}, {n: n for n in names})

    def extend(self, left_names, right_names):
        forward = dict(self.forward)
        backward = dict(self.backward)
        for left, right in zip(left_names, right_names):
            forward[left] = right
            backward[right] = left
        return Renaming(forward, backward)

    def relates(self, left, right):
        """
        Do `left` and `right` name the same variable?

        Raises:
            UnknownTypeVariableError: If `left` was never bound
        """
        if left not in self.forward:
            raise UnknownTypeVariableError(left)
        return self.forward[left] == right and self.backward.get(right) == left


def types_equal(ty1, ty2, type_vars=()):
    """
    Decide whether ty1 and ty2 are the same type up to renaming of bound variables.

    Args:
        ty1, ty2: Types to compare
        type_vars: Names of the type variables in scope; each is related to itself

    Returns:
        bool

    Raises:
        UnknownTypeVariableError: If ty1 mentions a type variable that is
            neither in `type_vars` nor bound inside ty1
    """
    return _types_equal(ty1, ty2, Renaming.identity(type_vars))


def _types_equal(ty1, ty2, renaming):
    if isinstance(ty2, TyBoolean):
        return isinstance(ty1, TyBoolean)

    elif isinstance(ty2, TyNumber):
        return isinstance(ty1, TyNumber)

    elif isinstance(ty2, TyFunc):
        if not isinstance(ty1, TyFunc):
            return False
        if len(ty1.params) != len(ty2.params):
            return False
        for (_, param1), (_, param2) in zip(ty1.params, ty2.params):
            if not _types_equal(param1, param2, renaming):
                return False
        return _types_equal(ty1.ret_type, ty2.ret_type, renaming)

    elif isinstance(ty2, TyObject):
        if not isinstance(ty1, TyObject):
            return False
        if len(ty1.props) != len(ty2.props):
            return False
        for name, prop2 in ty2.props:
            prop1 = ty1.prop(name)
            if prop1 is None:
                return False
            if not _types_equal(prop1, prop2, renaming):
                return False
        return True

    elif isinstance(ty2, TypeAbs):
        if not isinstance(ty1, TypeAbs):
            return False
        if len(ty1.type_params) != len(ty2.type_params):
            return False
        # Parameters pair up by position, unlike object properties.
        inner = renaming.extend(ty1.type_params, ty2.type_params)
        return _types_equal(ty1.body, ty2.body, inner)

    elif isinstance(ty2, TypeVar):
        if not isinstance(ty1, TypeVar):
            return False
        return renaming.relates(ty1.name, ty2.name)

    else:
        raise TypeError(f"Cannot compare {ty2.__class__.__name__}")
