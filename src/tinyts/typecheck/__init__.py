"""
Type model and checking algorithms for tinyts.
"""

from tinyts.typecheck.types import (
    Type, TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs,
    TypeCheckError, ScopeError, ShapeError, ArityError, CompatibilityError,
    UnknownTypeVariableError
)
from tinyts.typecheck.context import CheckContext
from tinyts.typecheck.env import TypeEnv
from tinyts.typecheck.substitution import substitute, instantiate, free_type_vars
from tinyts.typecheck.equivalence import types_equal
from tinyts.typecheck.subtype import is_subtype
from tinyts.typecheck.checker import TypeChecker, Mode, CheckResult, typecheck, check

__all__ = [
    'Type', 'TyBoolean', 'TyNumber', 'TyFunc', 'TyObject', 'TypeVar', 'TypeAbs',
    'TypeCheckError', 'ScopeError', 'ShapeError', 'ArityError', 'CompatibilityError',
    'UnknownTypeVariableError',
    'CheckContext',
    'TypeEnv',
    'substitute', 'instantiate', 'free_type_vars',
    'types_equal',
    'is_subtype',
    'TypeChecker', 'Mode', 'CheckResult', 'typecheck', 'check'
]
