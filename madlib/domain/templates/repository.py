# ============================================================
# DB access layer
# ============================================================
from __future__ import annotations

from typing import Protocol, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from madlib.core.errors import DuplicateNameError
from madlib.db.connection import storage_guard
from .entities import Template


class TemplateRepositoryProtocol(Protocol):
    def create(self, name: str, format: str) -> Template:
        """Store a new madlib and return it"""
        ...

    def delete(self, name: str) -> None:
        """Delete a madlib by name"""
        ...

    def list(self) -> list[str]:
        """List all madlib names"""
        ...

    def lookup(self, name: str) -> Optional[Template]:
        """Get a madlib by name"""
        ...


class TemplateRepository(TemplateRepositoryProtocol):
    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, format: str) -> Template:
        """
        Store a new madlib under the lower-cased name.

        The name is checked before the insert so a duplicate is reported as
        DuplicateNameError rather than a generic failure. The unique index
        on `name` catches the insert that loses a race with another create.
        """
        name = name.lower()
        with storage_guard(self.db):
            if self.lookup(name) is not None:
                raise DuplicateNameError(name)

            query = text("""
                    INSERT INTO madlib (name, format)
                    VALUES (:name, :format)
                    """)
            try:
                self.db.execute(query, {"name": name, "format": format})
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise DuplicateNameError(name) from exc

            return self.lookup(name)

    def delete(self, name: str) -> None:
        """Delete a madlib. Unknown names are a no-op."""
        query = text("""
                DELETE FROM madlib
                WHERE name = :name
                """)
        with storage_guard(self.db):
            self.db.execute(query, {"name": name.lower()})
            self.db.commit()

    def list(self) -> list[str]:
        """Madlib names in storage order."""
        query = text("""
                SELECT name FROM madlib
                ORDER BY id
                """)
        with storage_guard(self.db):
            return list(self.db.execute(query).scalars())

    def lookup(self, name: str) -> Optional[Template]:
        """Exact match on the lower-cased name, or None."""
        query = text("""
                SELECT id, name, format FROM madlib
                WHERE name = :name
                LIMIT 1
                """)
        with storage_guard(self.db):
            row = self.db.execute(query, {"name": name.lower()}).mappings().first()
        if row is None:
            return None
        return Template(**row)
