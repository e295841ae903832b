# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class MadlibError(Exception):
    pass

class StorageError(MadlibError):
    """Raised when the persistence backend fails (connection, constraint, query)."""
    pass

class DuplicateNameError(StorageError):
    """Raised when a madlib with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Madlib '{name}' already exists")

class SchemaInitError(StorageError):
    """Raised when the madlib tables cannot be created at startup."""
    pass
