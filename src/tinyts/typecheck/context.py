"""Checking context for minting fresh type-variable names during substitution."""

from __future__ import annotations

from typing import Container


class CheckContext:
    """
    Per-session state shared by the substitution engine and the checker.

    The only state is a counter used to build unique names for renamed type
    parameters. Names look like ``T@3``: the ``@`` cannot occur in an
    identifier written by the user, so a synthesized name never clashes with
    a real one. The counter only goes up.

    A name minted by another session can still reach this one (inside a
    returned type, an initial environment, or the in-scope type variables),
    so callers pass the names a new binder must not collide with.
    """

    SEPARATOR = '@'

    def __init__(self, start: int = 1):
        self.fresh_counter: int = start

    def fresh_name(self, base: str, avoid: Container[str] = ()) -> str:
        """
        Mint a new unique name derived from `base`.

        Example: fresh_name('T') -> 'T@1', then fresh_name('T@1') -> 'T@1@2'

        Args:
            base: Name of the type parameter being renamed
            avoid: Names already in use; candidates among them are skipped

        Returns:
            A name never returned before by this context and not in `avoid`
        """
        while True:
            name = f'{base}{self.SEPARATOR}{self.fresh_counter}'
            self.fresh_counter += 1
            if name not in avoid:
                return name
