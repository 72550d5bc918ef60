"""Function hook management.

- FunctionHook: a webhook (or cloud code) function registration
- FunctionHooksResource: REST mapping for /1/hooks/functions
- FunctionHooksManager: interactive create/list/edit/delete workflows

Usage:
    from cloudhooks.hooks import FunctionHooksManager, FunctionHooksResource

    with APIClient.from_config(config.api) as client:
        manager = FunctionHooksManager(FunctionHooksResource(client), Terminal())
        manager.list_all()
"""

from cloudhooks.hooks.manager import FunctionHooksManager
from cloudhooks.hooks.models import DeleteFieldOp, FunctionHook, FunctionHookResults
from cloudhooks.hooks.resource import FunctionHooksResource, FunctionHookStore

__all__ = [
    "DeleteFieldOp",
    "FunctionHook",
    "FunctionHookResults",
    "FunctionHookStore",
    "FunctionHooksManager",
    "FunctionHooksResource",
]
