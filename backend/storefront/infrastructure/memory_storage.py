"""In-Memory Durable Storage — dict-backed DurableStorage for tests and ephemeral stores.

Invariants:
    - Values are stored as given (strings), never parsed
    - State lives as long as the instance
"""


class InMemoryDurableStorage:
    """DurableStorage over a plain dict."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(initial or {})
        self.writes = 0

    async def read(self, key: str) -> str | None:
        return self.values.get(key)

    async def write(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1
