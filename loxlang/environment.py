"""Variable environment.

A stack of scopes, innermost last. The global scope sits at the bottom of
the stack and is never popped. Lookups and assignments walk from the
innermost scope outwards and act on the first scope holding the name;
declarations always write to the innermost scope, which permits shadowing.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from contextlib import contextmanager
from typing import Iterator

from loxlang.exceptions import UndefinedVariableException
from loxlang.nodes import Value


class Environment:
    """Stack of lexical scopes."""

    def __init__(self, file: str | None = None):
        self.scopes: list[dict[str, Value]] = [{}]
        self.file = file

    @property
    def depth(self) -> int:
        """
        Number of active scopes, the global one included.
        """
        return len(self.scopes)

    def define(self, name: str, value: Value) -> None:
        """
        Bind ``name`` in the innermost scope, replacing any existing binding there.
        """
        self.scopes[-1][name] = value

    def get(self, name: str, line: int | None = None) -> Value:
        """
        Return the value bound to ``name`` in the nearest scope.

        Raises:
            UndefinedVariableException: If no active scope binds the name.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise UndefinedVariableException(name, line, self.file)

    def assign(self, name: str, value: Value, line: int | None = None) -> None:
        """
        Rebind ``name`` in the nearest scope that already holds it.

        Raises:
            UndefinedVariableException: If no active scope binds the name.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                scope[name] = value
                return
        raise UndefinedVariableException(name, line, self.file)

    def push(self) -> None:
        """
        Enter a new, empty scope.
        """
        self.scopes.append({})

    def pop(self) -> None:
        """
        Leave the innermost scope.

        Raises:
            RuntimeError: If only the global scope is left.
        """
        if len(self.scopes) == 1:
            raise RuntimeError("Cannot pop the global scope")
        self.scopes.pop()

    @contextmanager
    def scope(self) -> Iterator[None]:
        """
        Run the body of a ``with`` statement inside a fresh scope.

        The scope is popped on every exit path, including exceptions.
        """
        self.push()
        try:
            yield
        finally:
            self.pop()
