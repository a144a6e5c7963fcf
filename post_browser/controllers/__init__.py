"""Controllers mutating the rendered document in response to events."""

from .listeners import CLICK, ListenerBinding, ListenerManager
from .refresh import RefreshOrchestrator, RefreshResult, delete_child_elements
from .selection import SelectionHandler, SelectionResult, resolve_employee_id
from .toggle import ToggleController

__all__ = [
    "CLICK",
    "ListenerBinding",
    "ListenerManager",
    "RefreshOrchestrator",
    "RefreshResult",
    "SelectionHandler",
    "SelectionResult",
    "ToggleController",
    "delete_child_elements",
    "resolve_employee_id",
]
