"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Durable storage is a string-keyed blob store: read returns None for unknown keys
    - write replaces the whole value (last writer wins, no merge)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the reducers that produce
      the values are never async themselves — the store awaits around them
"""

from typing import Protocol


class DurableStorage(Protocol):
    """Persistent key-value capability outliving a single session."""
    async def read(self, key: str) -> str | None: ...
    async def write(self, key: str, value: str) -> None: ...
