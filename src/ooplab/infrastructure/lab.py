"""Lab — runtime root injected into every service.

The Lab owns the plugin manager and the outbox and builds notifiers and
dispatchers from the resolved settings.  Plugins are loaded lazily on
first access so constructing a Lab never touches entry points.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ooplab.infrastructure.outbox import Outbox

if TYPE_CHECKING:
    from ooplab.config.settings import OoplabSettings
    from ooplab.notifiers.base import Notifier
    from ooplab.notifiers.dispatcher import Dispatcher
    from ooplab.plugins.builtins.audit import AuditPlugin
    from ooplab.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

AUDIT_PLUGIN_NAME = "audit-builtin"


class Lab:
    """Settings, plugins, and delivery storage for one process."""

    def __init__(self, settings: OoplabSettings, *, outbox: Outbox | None = None) -> None:
        self._settings = settings
        self._outbox = outbox or Outbox()
        self._plugins: PluginManager | None = None

    @property
    def settings(self) -> OoplabSettings:
        return self._settings

    @property
    def outbox(self) -> Outbox:
        return self._outbox

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (created and loaded on first access)."""
        if self._plugins is None:
            self._plugins = self._init_plugins()
        return self._plugins

    @property
    def audit(self) -> AuditPlugin:
        """The built-in audit plugin instance."""
        plugin = self.plugins.get_plugin(AUDIT_PLUGIN_NAME)
        assert plugin is not None
        return plugin  # type: ignore[return-value]

    def _init_plugins(self) -> PluginManager:
        """Create a PluginManager, load entry points, register built-ins."""
        from ooplab.plugins.builtins.audit import AuditPlugin
        from ooplab.plugins.manager import PluginManager

        pm = PluginManager()
        if self._settings.plugins.enabled:
            names = pm.discover_and_load()
            logger.debug("Loaded plugins: %s", names)
        pm.register_plugin(AuditPlugin(), name=AUDIT_PLUGIN_NAME)
        return pm

    def notifiers(self, channels: Iterable[str] | None = None) -> list[Notifier]:
        """Build notifiers for *channels* (default: ``[notify] channels``), in order.

        Raises ``UnknownVariant`` for an unregistered channel.
        """
        from ooplab.notifiers.base import build_notifier

        config = self._settings.notify
        selected = list(channels) if channels is not None else list(config.channels)
        return [
            build_notifier(
                channel,
                self._outbox,
                recipient=config.recipient_for(channel.strip().lower()),
            )
            for channel in selected
        ]

    def dispatcher(
        self,
        channels: Iterable[str] | None = None,
        *,
        stop_on_error: bool | None = None,
    ) -> Dispatcher:
        """Build a hook-aware dispatcher over :meth:`notifiers`."""
        from ooplab.notifiers.dispatcher import Dispatcher

        if stop_on_error is None:
            stop_on_error = self._settings.notify.stop_on_error
        return Dispatcher(
            self.notifiers(channels),
            hooks=self.plugins,
            stop_on_error=stop_on_error,
        )
