"""Runtime environment for uforth.

The Environment stores bindings of names to runtime values in an arena of
scope records. Each scope refers to its parent by index into the arena rather
than by reference, so the arena alone owns every scope: the root lives as long
as the Environment, and each block invocation pushes a child scope that is
popped again when the invocation returns.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from uforth import Value
from uforth.types.errors import UForthUnboundSymbol


# Returned by Environment.get for names bound nowhere in the chain
UNBOUND = object()


class Scope:
    """One frame of bindings plus the arena index of its parent."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[int] = None):
        self.vars: dict[str, Value] = {}
        self.parent: Optional[int] = parent

    def copy(self) -> Scope:
        scope = Scope(self.parent)
        scope.vars = dict(self.vars)
        return scope


class Environment:
    """Chain of scopes with first-write-wins binding in the innermost scope."""

    __slots__ = ("scopes",)

    def __init__(self):
        self.scopes: list[Scope] = [Scope()]

    @property
    def current(self) -> int:
        """Arena index of the innermost scope."""
        return len(self.scopes) - 1

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def define(self, name: str, value: Value) -> bool:
        """Bind `name` to `value` in the innermost scope.

        Only succeeds if `name` is not already bound in that scope; bindings in
        outer scopes do not block it. Returns True if the binding was made.
        """
        innermost = self.scopes[-1].vars
        if name in innermost:
            return False
        innermost[name] = value
        return True

    def find(self, name: str) -> Optional[int]:
        """Index of the nearest scope in the chain that binds `name`."""
        index: Optional[int] = self.current
        while index is not None:
            scope = self.scopes[index]
            if name in scope.vars:
                return index
            index = scope.parent
        return None

    def is_bound(self, name: str) -> bool:
        return self.find(name) is not None

    def get(self, name: str, default: Value = UNBOUND) -> Value:
        """Value bound to `name`, innermost scope first, or `default`."""
        index = self.find(name)
        if index is None:
            return default
        return self.scopes[index].vars[name]

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`, innermost scope first.

        Raises UForthUnboundSymbol if no scope in the chain binds it.
        """
        value = self.get(name)
        if value is UNBOUND:
            raise UForthUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return value

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the innermost scope."""
        for k, v in mapping.items():
            self.define(k, v)

    @contextmanager
    def child_scope(self) -> Iterator[int]:
        """Push a scope whose parent is the current innermost scope.

        The scope is popped when the block exits, including on error.
        """
        parent = self.current
        self.scopes.append(Scope(parent))
        try:
            yield self.current
        finally:
            del self.scopes[parent + 1:]

    def snapshot(self) -> list[Scope]:
        return [scope.copy() for scope in self.scopes]

    def restore(self, snapshot: list[Scope]) -> None:
        self.scopes = [scope.copy() for scope in snapshot]

    def _write_vars(self, buffer: StringIO, scope: Scope) -> None:
        """Write one scope's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in scope.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable view of the innermost scope."""
        with StringIO() as buffer:
            self._write_vars(buffer, self.scopes[-1])
            if self.scopes[-1].parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            index: Optional[int] = self.current
            while index is not None:
                env_buf = StringIO()
                self._write_vars(env_buf, self.scopes[index])
                chain.append(env_buf.getvalue())
                index = self.scopes[index].parent
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
