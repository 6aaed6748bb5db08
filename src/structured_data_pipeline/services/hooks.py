"""
Hook registry for named extension points.

Data Machine publishes its API as named filters: a caller passes a default
value and extra arguments, and every registered callback transforms the value
in priority order. This module models that mechanism in-process.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger("structured_data_pipeline.services.hooks")

DEFAULT_PRIORITY = 10


class HookRegistry:
    """
    Registry of filter callbacks keyed by extension point name.

    Callbacks with a lower priority run first; equal priorities run in
    registration order.
    """

    def __init__(self):
        self._filters: Dict[str, List[Tuple[int, int, Callable[..., Any]]]] = {}
        self._sequence = 0

    def add_filter(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ):
        """
        Register a callback for an extension point.

        Args:
            name: Extension point name (e.g., 'dm_create_pipeline')
            callback: Called as callback(value, *args), returns the new value
            priority: Lower runs first
        """
        if not callable(callback):
            raise TypeError(f"Filter callback for '{name}' must be callable")

        self._filters.setdefault(name, []).append((priority, self._sequence, callback))
        self._filters[name].sort(key=lambda entry: (entry[0], entry[1]))
        self._sequence += 1
        logger.debug(f"Registered filter for '{name}' (priority {priority})")

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        """
        Remove a previously registered callback.

        Returns:
            True if the callback was registered, False otherwise
        """
        entries = self._filters.get(name, [])
        remaining = [entry for entry in entries if entry[2] is not callback]
        if len(remaining) == len(entries):
            return False

        if remaining:
            self._filters[name] = remaining
        else:
            del self._filters[name]
        return True

    def has_filter(self, name: str) -> bool:
        """Whether any callback is registered for the extension point."""
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """
        Pass a value through every callback registered for an extension point.

        Args:
            name: Extension point name
            value: Default value, returned unchanged when nothing is registered
            *args: Extra arguments given to every callback

        Returns:
            The value returned by the last callback
        """
        for _, _, callback in list(self._filters.get(name, [])):
            value = callback(value, *args)
        return value

    def clear(self, name: Optional[str] = None):
        """Remove all callbacks, or only those of one extension point."""
        if name is None:
            self._filters.clear()
        else:
            self._filters.pop(name, None)


# Singleton instance
_hook_registry: Optional[HookRegistry] = None


def get_hook_registry() -> HookRegistry:
    """Get singleton instance of HookRegistry."""
    global _hook_registry
    if _hook_registry is None:
        _hook_registry = HookRegistry()
    return _hook_registry
