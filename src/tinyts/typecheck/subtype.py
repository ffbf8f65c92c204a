"""
Structural subtyping.

- Objects: width subtyping. A subtype may carry extra properties; order is irrelevant.
- Functions: parameters are contravariant, the return type is covariant.

Type variables and quantifiers are not part of this relation: any pairing
involving them is simply not a subtype.
"""

from tinyts.typecheck.types import TyBoolean, TyNumber, TyFunc, TyObject


def is_subtype(sub, sup):
    """
    Is `sub` a subtype of `sup`?

    Args:
        sub: The candidate (more specific) type
        sup: The required (more general) type

    Returns:
        bool
    """
    if isinstance(sup, TyBoolean):
        return isinstance(sub, TyBoolean)

    elif isinstance(sup, TyNumber):
        return isinstance(sub, TyNumber)

    elif isinstance(sup, TyFunc):
        if not isinstance(sub, TyFunc):
            return False
        if len(sub.params) != len(sup.params):
            return False
        for (_, sub_param), (_, sup_param) in zip(sub.params, sup.params):
            # contravariant
            if not is_subtype(sup_param, sub_param):
                return False
        # covariant
        return is_subtype(sub.ret_type, sup.ret_type)

    elif isinstance(sup, TyObject):
        if not isinstance(sub, TyObject):
            return False
        for name, sup_prop in sup.props:
            sub_prop = sub.prop(name)
            if sub_prop is None:
                return False
            if not is_subtype(sub_prop, sup_prop):
                return False
        return True

    else:
        return False
