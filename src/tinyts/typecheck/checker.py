"""
The type-checking driver.

TypeChecker maps (term, type environment, in-scope type variables) to a Type,
or raises a TypeCheckError at the first violated rule. Dispatch follows the
visitor convention: a term of class `If` is handled by `visit_If`.

Two modes select how "compatible" is decided:

- POLYMORPHIC: argument types must be alpha-equivalent to parameter types.
- SUBTYPING: argument types may be structural subtypes of parameter types.

In both modes the branches of an `if` and the body of a recursive function
must have exactly the required type; no joins of subtypes are computed.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Optional

from tinyts.terms import Term
from tinyts.typecheck.context import CheckContext
from tinyts.typecheck.env import TypeEnv
from tinyts.typecheck.equivalence import types_equal
from tinyts.typecheck.subtype import is_subtype
from tinyts.typecheck.substitution import free_type_vars, instantiate
from tinyts.typecheck.types import (
    Type, TyBoolean, TyNumber, TyFunc, TyObject, TypeAbs,
    TypeCheckError, ScopeError, ShapeError, ArityError, CompatibilityError,
    UnknownTypeVariableError,
)

logger = logging.getLogger(__name__)


class Mode(Enum):
    POLYMORPHIC = auto()
    SUBTYPING = auto()


class TypeChecker:
    def __init__(self, mode: Mode = Mode.POLYMORPHIC, ctx: Optional[CheckContext] = None):
        self.mode = mode
        self.ctx = ctx if ctx is not None else CheckContext()

    def check(self, term: Term, env=None, type_vars: Iterable[str] = ()) -> Type:
        """
        Type of `term`.

        Args:
            term: The term to check
            env: Initial environment (TypeEnv, dict of name -> Type, or None)
            type_vars: Names of type variables already in scope

        Raises:
            TypeCheckError: At the first violated typing rule
        """
        return self.visit(term, TypeEnv.of(env), frozenset(type_vars))

    def visit(self, term: Term, env: TypeEnv, type_vars: frozenset) -> Type:
        """Dispatch to the appropriate visit method based on term class."""
        method_name = f'visit_{term.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(term, env, type_vars)

    def generic_visit(self, term, env, type_vars):
        raise NotImplementedError(
            f"{self.__class__.__name__} has no visit method for {term.__class__.__name__}"
        )

    # --- helpers ---------------------------------------------------------

    def fail(self, error_class, message, term):
        logger.debug("%s at %r", message, term)
        raise error_class(message, term)

    def equal(self, ty1, ty2, type_vars, term):
        try:
            return types_equal(ty1, ty2, type_vars)
        except UnknownTypeVariableError as e:
            if e.term is None:
                e.term = term
            raise

    def compatible(self, actual, expected, type_vars, term):
        """May a value of type `actual` be used where `expected` is required?"""
        if self.mode is Mode.SUBTYPING and is_subtype(actual, expected):
            return True
        return self.equal(actual, expected, type_vars, term)

    def check_scoped(self, ty, type_vars, term):
        """Reject an annotation mentioning a type variable that is not in scope."""
        if free_type_vars(ty) - type_vars:
            self.fail(ScopeError, "unknown type variable", term)

    # --- literals and arithmetic -----------------------------------------

    def visit_TrueLit(self, term, env, type_vars):
        return TyBoolean()

    def visit_FalseLit(self, term, env, type_vars):
        return TyBoolean()

    def visit_NumberLit(self, term, env, type_vars):
        return TyNumber()

    def visit_If(self, term, env, type_vars):
        cond_ty = self.visit(term.cond, env, type_vars)
        if not isinstance(cond_ty, TyBoolean):
            self.fail(ShapeError, "boolean expected", term.cond)

        thn_ty = self.visit(term.thn, env, type_vars)
        els_ty = self.visit(term.els, env, type_vars)
        # TODO: compute the join of the branch types in SUBTYPING mode
        if not self.equal(thn_ty, els_ty, type_vars, term):
            self.fail(CompatibilityError, "then and else have different types", term)
        return thn_ty

    def visit_Add(self, term, env, type_vars):
        for operand in (term.left, term.right):
            if not isinstance(self.visit(operand, env, type_vars), TyNumber):
                self.fail(ShapeError, "number expected", operand)
        return TyNumber()

    # --- variables and functions -----------------------------------------

    def visit_Var(self, term, env, type_vars):
        ty = env.lookup(term.name)
        if ty is None:
            self.fail(ScopeError, "unknown variable", term)
        return ty

    def visit_Lambda(self, term, env, type_vars):
        for _, param_ty in term.params:
            self.check_scoped(param_ty, type_vars, term)
        ret_type = self.visit(term.body, env.extend(term.params), type_vars)
        return TyFunc(term.params, ret_type)

    def visit_Call(self, term, env, type_vars):
        func_ty = self.visit(term.func, env, type_vars)
        if not isinstance(func_ty, TyFunc):
            self.fail(ShapeError, "function type expected", term.func)

        if len(func_ty.params) != len(term.args):
            self.fail(ArityError, "wrong number of arguments", term)

        for arg, (_, param_ty) in zip(term.args, func_ty.params):
            arg_ty = self.visit(arg, env, type_vars)
            if not self.compatible(arg_ty, param_ty, type_vars, arg):
                self.fail(CompatibilityError, "parameter type mismatch", arg)

        return func_ty.ret_type

    # --- binding forms ---------------------------------------------------

    def visit_Seq(self, term, env, type_vars):
        self.visit(term.body, env, type_vars)
        return self.visit(term.rest, env, type_vars)

    def visit_Const(self, term, env, type_vars):
        ty = self.visit(term.init, env, type_vars)
        return self.visit(term.rest, env.extend([(term.name, ty)]), type_vars)

    def visit_RecFunc(self, term, env, type_vars):
        for _, param_ty in term.params:
            self.check_scoped(param_ty, type_vars, term)
        self.check_scoped(term.ret_type, type_vars, term)

        func_ty = TyFunc(term.params, term.ret_type)
        body_env = env.extend(list(term.params) + [(term.func_name, func_ty)])
        ret_ty = self.visit(term.body, body_env, type_vars)
        if not self.equal(term.ret_type, ret_ty, type_vars, term):
            self.fail(CompatibilityError, "wrong return type", term)

        return self.visit(term.rest, env.extend([(term.func_name, func_ty)]), type_vars)

    # --- objects ---------------------------------------------------------

    def visit_ObjectNew(self, term, env, type_vars):
        return TyObject([(name, self.visit(prop, env, type_vars)) for name, prop in term.props])

    def visit_ObjectGet(self, term, env, type_vars):
        obj_ty = self.visit(term.obj, env, type_vars)
        if not isinstance(obj_ty, TyObject):
            self.fail(ShapeError, "object type expected", term.obj)

        prop_ty = obj_ty.prop(term.prop_name)
        if prop_ty is None:
            self.fail(CompatibilityError, "unknown property name", term)
        return prop_ty

    # --- generics --------------------------------------------------------

    def visit_TypeAbstraction(self, term, env, type_vars):
        body_ty = self.visit(term.body, env, type_vars | frozenset(term.type_params))
        return TypeAbs(term.type_params, body_ty)

    def visit_TypeApplication(self, term, env, type_vars):
        target_ty = self.visit(term.target, env, type_vars)
        if not isinstance(target_ty, TypeAbs):
            self.fail(ShapeError, "type abstraction expected", term.target)

        if len(target_ty.type_params) != len(term.type_args):
            self.fail(ArityError, "wrong number of type arguments", term)

        for type_arg in term.type_args:
            self.check_scoped(type_arg, type_vars, term)

        logger.debug("instantiating %s with %s", target_ty, list(term.type_args))
        return instantiate(target_ty, term.type_args, self.ctx)


class CheckResult:
    """Outcome of `check`: either a type or the error that stopped checking."""

    def __init__(self, ty=None, error=None):
        self.ty = ty
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"CheckResult(ty={self.ty})"
        return f"CheckResult(error={self.error!r})"


def typecheck(term, env=None, type_vars=(), mode=Mode.POLYMORPHIC, ctx=None):
    """Check `term` in a new session. Raises TypeCheckError on failure."""
    return TypeChecker(mode, ctx).check(term, env, type_vars)


def check(term, env=None, type_vars=(), mode=Mode.POLYMORPHIC, ctx=None):
    """Like `typecheck`, but reports a typing failure in the returned CheckResult."""
    try:
        return CheckResult(ty=typecheck(term, env, type_vars, mode, ctx))
    except TypeCheckError as e:
        return CheckResult(error=e)
