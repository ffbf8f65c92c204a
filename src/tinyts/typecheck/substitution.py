"""
Capture-avoiding substitution of type variables.

substitute(ty, name, replacement) replaces every free occurrence of the type
variable `name` in `ty` by `replacement`. Quantifiers crossed on the way are
alpha-renamed to fresh names first, so no free variable of `replacement` can
end up bound by them. Fresh names also avoid every variable free in
`replacement` or in the quantifier body, including names minted by an
earlier session.
"""

import logging

from tinyts.typecheck.context import CheckContext
from tinyts.typecheck.types import TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs

logger = logging.getLogger(__name__)


def substitute(ty, name, replacement, ctx=None):
    """
    Substitute `replacement` for the type variable `name` throughout `ty`.

    Args:
        ty: The Type to traverse
        name: Name of the type variable to replace
        replacement: The Type to put in its place
        ctx: CheckContext providing fresh names (a new one if omitted)

    Returns:
        Type: A new type; `ty` itself is never modified
    """
    if ctx is None:
        ctx = CheckContext()

    if isinstance(ty, (TyBoolean, TyNumber)):
        return ty

    elif isinstance(ty, TyFunc):
        params = [(param_name, substitute(param_ty, name, replacement, ctx))
                  for param_name, param_ty in ty.params]
        return TyFunc(params, substitute(ty.ret_type, name, replacement, ctx))

    elif isinstance(ty, TyObject):
        return TyObject([(prop_name, substitute(prop_ty, name, replacement, ctx))
                         for prop_name, prop_ty in ty.props])

    elif isinstance(ty, TypeVar):
        return replacement if ty.name == name else ty

    elif isinstance(ty, TypeAbs):
        # The quantifier rebinds `name`: nothing below refers to the outer one.
        if name in ty.type_params:
            return ty

        in_use = free_type_vars(replacement) | free_type_vars(ty.body)
        new_type_params, new_body = freshen(ty, ctx, in_use)
        return TypeAbs(new_type_params, substitute(new_body, name, replacement, ctx))

    else:
        raise TypeError(f"Cannot substitute into {ty.__class__.__name__}")


def freshen(type_abs, ctx, avoid=frozenset()):
    """
    Rename every parameter of `type_abs` to a fresh name.

    A fresh name is never one of `avoid`, one of the original parameters, or
    one picked for an earlier parameter.

    Returns:
        (new_type_params, new_body)
    """
    taken = set(avoid) | set(type_abs.type_params)
    new_body = type_abs.body
    new_type_params = []
    for type_param in type_abs.type_params:
        fresh = ctx.fresh_name(type_param, taken)
        taken.add(fresh)
        new_body = substitute(new_body, type_param, TypeVar(fresh), ctx)
        new_type_params.append(fresh)
    logger.debug("renamed %s to %s", list(type_abs.type_params), new_type_params)
    return new_type_params, new_body


def instantiate(type_abs, type_args, ctx=None):
    """
    Instantiate a quantifier with concrete type arguments.

    Each parameter is substituted in declaration order, every substitution
    applied to the result of the previous one.

    Raises:
        ValueError: If the number of arguments differs from the arity
    """
    if len(type_args) != len(type_abs.type_params):
        raise ValueError(
            f"expected {len(type_abs.type_params)} type arguments, got {len(type_args)}")
    if ctx is None:
        ctx = CheckContext()

    result = type_abs.body
    for type_param, type_arg in zip(type_abs.type_params, type_args):
        result = substitute(result, type_param, type_arg, ctx)
    return result


def free_type_vars(ty):
    """Names of the type variables in `ty` that no enclosing quantifier inside `ty` binds."""
    if isinstance(ty, (TyBoolean, TyNumber)):
        return frozenset()
    elif isinstance(ty, TyFunc):
        result = free_type_vars(ty.ret_type)
        for _, param_ty in ty.params:
            result |= free_type_vars(param_ty)
        return result
    elif isinstance(ty, TyObject):
        result = frozenset()
        for _, prop_ty in ty.props:
            result |= free_type_vars(prop_ty)
        return result
    elif isinstance(ty, TypeVar):
        return frozenset([ty.name])
    elif isinstance(ty, TypeAbs):
        return free_type_vars(ty.body) - frozenset(ty.type_params)
    else:
        raise TypeError(f"Cannot compute free variables of {ty.__class__.__name__}")
