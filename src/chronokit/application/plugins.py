from __future__ import annotations

import functools
import logging
import threading
from typing import Callable, List, Optional, Set, Tuple

from chronokit.domain.errors import PluginConflictError
from chronokit.ports.plugins import InstantCapabilities, Plugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Process-wide, append-only record of applied plugins, tracked per host class."""

    def __init__(self) -> None:
        self._applied: Set[Tuple[type, int]] = set()
        self._plugins: List[Plugin] = []
        self._lock = threading.Lock()

    def apply(self, plugin: Plugin, host: type, capabilities: InstantCapabilities) -> bool:
        """Runs ``plugin`` against ``host`` unless it already ran there or on a base class.

        Returns whether it ran. Methods installed on a base class are inherited, so a
        subclass is skipped once one of its bases has the plugin.
        """
        with self._lock:
            if any((base, id(plugin)) in self._applied for base in host.__mro__):
                logger.debug(f"Plugin {_name(plugin)} already registered on {host.__name__}, skipping")
                return False
            plugin(host, capabilities)
            self._applied.add((host, id(plugin)))
            if all(known is not plugin for known in self._plugins):
                self._plugins.append(plugin)
        logger.debug(f"Registered plugin {_name(plugin)} on {host.__name__}")
        return True

    def is_registered(self, plugin: Plugin, host: Optional[type] = None) -> bool:
        """Whether ``plugin`` ran on ``host``, or on any host when none is given."""
        if host is not None:
            return (host, id(plugin)) in self._applied
        return any(plugin_id == id(plugin) for _, plugin_id in self._applied)

    @property
    def plugins(self) -> List[Plugin]:
        return list(self._plugins)


def install_methods(host: type, capabilities: InstantCapabilities, **functions: Callable) -> None:
    """Binds ``func(capabilities, instance, *args)`` free functions as methods of ``host``.

    Raises :class:`PluginConflictError` when a name is a core attribute of ``host`` or
    was already installed by another plugin.
    """
    owned = host.__dict__.get("__plugin_methods__")
    if owned is None:
        owned = set()
        setattr(host, "__plugin_methods__", owned)
    for name, function in functions.items():
        if name in owned:
            raise PluginConflictError(f"Method {name!r} is already provided by another plugin.")
        if hasattr(host, name):
            raise PluginConflictError(f"Method {name!r} would shadow a core attribute of {host.__name__}.")
        setattr(host, name, _bind(function, capabilities, name))
        owned.add(name)


def _bind(function: Callable, capabilities: InstantCapabilities, name: str) -> Callable:
    @functools.wraps(function)
    def method(self, *args, **kwargs):
        return function(capabilities, self, *args, **kwargs)

    method.__name__ = name
    method.__qualname__ = name
    return method


def _name(plugin: Plugin) -> str:
    return getattr(plugin, "__name__", repr(plugin))
