"""Type environments: persistent scope chains mapping variable names to types."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple


class TypeEnv:
    """
    One link of a scope chain.

    Each binder creates a child environment holding only its own bindings and
    pointing to the enclosing one. Nothing is ever mutated, so the parent is
    still valid for checking sibling subterms after a child is made.
    """

    def __init__(self, bindings: Optional[Dict[str, object]] = None, parent: Optional[TypeEnv] = None):
        self.bindings = dict(bindings) if bindings else {}
        self.parent = parent

    @classmethod
    def of(cls, env) -> TypeEnv:
        """Accept a TypeEnv, a plain mapping, or None."""
        if env is None:
            return cls()
        if isinstance(env, TypeEnv):
            return env
        return cls(dict(env))

    def extend(self, bindings: Iterable[Tuple[str, object]]) -> TypeEnv:
        """
        New environment with `bindings` visible on top of this one.
        Later pairs shadow earlier ones with the same name.
        """
        return TypeEnv(dict(bindings), self)

    def lookup(self, name: str):
        env = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.parent
        return None

    def __contains__(self, name):
        return self.lookup(name) is not None

    def names(self):
        """All visible names, innermost binding first."""
        seen = []
        env = self
        while env is not None:
            for name in env.bindings:
                if name not in seen:
                    seen.append(name)
            env = env.parent
        return seen

    def __repr__(self):
        return f"TypeEnv({', '.join(f'{n}: {self.lookup(n)}' for n in self.names())})"
