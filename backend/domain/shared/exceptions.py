"""Exceptions shared across domain contexts."""


class PersistenceError(Exception):
    """Raised by store adapters when a read or write fails.

    Propagated unchanged to the caller; a failure on the primary write
    aborts the rest of a multi-step operation.
    """

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Persistence failure during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
