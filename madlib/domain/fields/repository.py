# ============================================================
# DB access layer
# ============================================================
from typing import Iterable, Protocol

from sqlalchemy import bindparam, text
from sqlalchemy.orm import Session

from madlib.db.connection import storage_guard


class FieldRepositoryProtocol(Protocol):
    def add_field(self, field: str, value: str) -> None:
        """Add a candidate value to a field's pool"""
        ...

    def remove_field(self, field: str, value: str) -> None:
        """Remove every entry matching field and value"""
        ...

    def sample_one(self, field_names: Iterable[str]) -> dict[str, str]:
        """Pick one random value per field with a non-empty pool"""
        ...


class FieldRepository(FieldRepositoryProtocol):
    # One random row per field, all fields in a single statement.
    _SAMPLE_QUERY = text("""
            SELECT field, value FROM (
                SELECT
                    field,
                    value,
                    ROW_NUMBER() OVER (
                        PARTITION BY field
                        ORDER BY RANDOM()
                    ) AS pick
                FROM madlib_fields
                WHERE field IN :fields
            ) AS picked
            WHERE pick = 1
            """).bindparams(bindparam("fields", expanding=True))

    def __init__(self, db: Session):
        self.db = db

    def add_field(self, field: str, value: str) -> None:
        """Append a value. Duplicates are allowed."""
        query = text("""
                INSERT INTO madlib_fields (field, value)
                VALUES (:field, :value)
                """)
        with storage_guard(self.db):
            self.db.execute(query, {"field": field, "value": value})
            self.db.commit()

    def remove_field(self, field: str, value: str) -> None:
        """Delete all exact matches. Removing a missing pair is a no-op."""
        query = text("""
                DELETE FROM madlib_fields
                WHERE field = :field AND value = :value
                """)
        with storage_guard(self.db):
            self.db.execute(query, {"field": field, "value": value})
            self.db.commit()

    def sample_one(self, field_names: Iterable[str]) -> dict[str, str]:
        """
        Draw one value per requested field, uniformly at random.

        Fields without any entries are absent from the result; callers treat
        them as unresolved.
        """
        fields = sorted(set(field_names))
        if not fields:
            return {}

        with storage_guard(self.db):
            result = self.db.execute(self._SAMPLE_QUERY, {"fields": fields})
            return {row.field: row.value for row in result}

    def list_values(self, field: str) -> list[str]:
        """A field's pool in storage order."""
        query = text("""
                SELECT value FROM madlib_fields
                WHERE field = :field
                ORDER BY id
                """)
        with storage_guard(self.db):
            return list(self.db.execute(query, {"field": field}).scalars())
