"""Transaction manager port.

Groups writes against several stores into one all-or-nothing unit.
"""

from typing import AsyncContextManager, Protocol


class ITransactionManager(Protocol):
    """Interface for store-level transactions.

    Example:
        >>> async with transaction_manager.atomic():
        ...     await profile_repository.save_profile(profile)
        ...     await log_repository.delete_all_entries(account_id)

    Implementations must roll back every write issued inside the block
    when the block raises, then re-raise the original exception.
    """

    def atomic(self) -> AsyncContextManager[None]:
        """Open a transaction scope."""
        ...
