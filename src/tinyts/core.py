# Re-export all public APIs
from tinyts.typecheck.types import (
    Type, TyBoolean, TyNumber, TyFunc, TyObject, TypeVar, TypeAbs,
    TypeCheckError, ScopeError, ShapeError, ArityError, CompatibilityError,
    UnknownTypeVariableError
)
from tinyts.terms import (
    Term, TrueLit, FalseLit, NumberLit, If, Add, Var, Lambda, Call, Seq, Const, RecFunc,
    ObjectNew, ObjectGet, TypeAbstraction, TypeApplication
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
    'Term', 'TrueLit', 'FalseLit', 'NumberLit', 'If', 'Add', 'Var', 'Lambda', 'Call',
    'Seq', 'Const', 'RecFunc', 'ObjectNew', 'ObjectGet', 'TypeAbstraction', 'TypeApplication',
    'CheckContext', 'TypeEnv',
    'substitute', 'instantiate', 'free_type_vars',
    'types_equal', 'is_subtype',
    'TypeChecker', 'Mode', 'CheckResult', 'typecheck', 'check'
]
