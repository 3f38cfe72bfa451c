"""Account orchestrators."""

from .account_lifecycle_controller import AccountLifecycleController

__all__ = ["AccountLifecycleController"]
