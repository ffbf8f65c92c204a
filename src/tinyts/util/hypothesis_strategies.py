"""
Hypothesis strategies for generating random types.
"""

from hypothesis import strategies as st
from tinyts.typecheck.types import TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs

FIELD_NAMES = ['foo', 'bar', 'baz', 'x', 'y']
TYPE_PARAM_NAMES = ['T', 'U', 'V']


def types(max_depth=3, type_vars=()):
    """
    Generate a hypothesis strategy for well-scoped types.

    Every TypeVar produced is either one of `type_vars` or bound by an
    enclosing TypeAbs in the generated type.

    Args:
        max_depth: Maximum nesting depth of type constructors
        type_vars: Names of type variables that may occur free

    Returns:
        A hypothesis strategy that generates Type instances
    """
    type_vars = tuple(type_vars)
    leaves = [st.just(TyBoolean()), st.just(TyNumber())]
    if type_vars:
        leaves.append(st.sampled_from(type_vars).map(TypeVar))
    leaf = st.one_of(leaves)

    if max_depth <= 0:
        return leaf

    inner = types(max_depth - 1, type_vars)

    def build_type_abs(type_params):
        # Body may mention the new parameters as well as the outer ones
        body = types(max_depth - 1, type_vars + tuple(type_params))
        return body.map(lambda b: TypeAbs(type_params, b))

    type_abs = st.lists(
        st.sampled_from(TYPE_PARAM_NAMES), min_size=1, max_size=2, unique=True
    ).flatmap(build_type_abs)

    return st.one_of(leaf, _funcs(inner), _objects(inner), type_abs)


def monotypes(max_depth=3):
    """
    Generate types without type variables or quantifiers, i.e. the types the
    subtype checker relates.
    """
    leaf = st.sampled_from([TyBoolean(), TyNumber()])
    if max_depth <= 0:
        return leaf
    inner = monotypes(max_depth - 1)
    return st.one_of(leaf, _funcs(inner), _objects(inner))


def objects_with_extra_props(ty_object, extra=None, max_extra=3):
    """
    Generate width subtypes of `ty_object`: the same properties in any order,
    plus up to `max_extra` properties it does not have.
    """
    if extra is None:
        extra = monotypes(max_depth=1)
    taken = {name for name, _ in ty_object.props}
    free_names = [n for n in FIELD_NAMES + ['qux', 'quux', 'corge'] if n not in taken]

    extra_props = st.lists(
        st.tuples(st.sampled_from(free_names), extra),
        max_size=max_extra,
        unique_by=lambda p: p[0],
    )
    return st.tuples(st.permutations(list(ty_object.props)), extra_props).map(
        lambda ps: TyObject(list(ps[0]) + ps[1])
    )


def _funcs(inner):
    params = st.lists(st.tuples(st.sampled_from(FIELD_NAMES), inner), max_size=3)
    return st.builds(TyFunc, params, inner)


def _objects(inner):
    props = st.lists(
        st.tuples(st.sampled_from(FIELD_NAMES), inner),
        max_size=3,
        unique_by=lambda p: p[0],
    )
    return props.map(TyObject)
