"""Domain ports shared across contexts."""

from domain.shared.ports.transaction_manager import ITransactionManager

__all__ = [
    "ITransactionManager",
]
