import random

from madlib.core.errors import StorageError


class MockFieldStore:
    """In-memory field pools with the same sampling contract as the DB store."""

    def __init__(self, pools: dict[str, list[str]] | None = None) -> None:
        self.pools = {k: list(v) for k, v in (pools or {}).items()}
        self.requests: list[set[str]] = []

    def add_field(self, field: str, value: str) -> None:
        self.pools.setdefault(field, []).append(value)

    def remove_field(self, field: str, value: str) -> None:
        self.pools[field] = [v for v in self.pools.get(field, []) if v != value]

    def sample_one(self, field_names) -> dict[str, str]:
        names = set(field_names)
        self.requests.append(names)
        return {
            name: random.choice(self.pools[name])
            for name in names
            if self.pools.get(name)
        }


class FailingFieldStore:
    def add_field(self, field: str, value: str) -> None:
        raise StorageError("disk I/O error")

    def remove_field(self, field: str, value: str) -> None:
        raise StorageError("disk I/O error")

    def sample_one(self, field_names) -> dict[str, str]:
        raise StorageError("disk I/O error")
