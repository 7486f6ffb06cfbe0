"""Pluggy hook specifications for ooplab send and measure events.

Send hooks carry cross-cutting behaviour (auditing, logging) around each
notifier invocation.  ``register_shapes`` lets plugins contribute shape
variants at load time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from ooplab.domain.shapes import Shape

hookspec = pluggy.HookspecMarker("ooplab")


class OoplabHookSpec:
    """Hook specifications for the ooplab plugin system."""

    @hookspec
    def pre_send(self, channel: str, message: str) -> None:
        """Called before a notifier sends."""

    @hookspec
    def post_send(self, channel: str, recipient: str, message: str) -> None:
        """Called after a notifier delivered a message."""

    @hookspec
    def send_failed(self, channel: str, message: str, error: str) -> None:
        """Called when a notifier raised while sending."""

    @hookspec
    def post_measure(self, kind: str, area: float, perimeter: float) -> None:
        """Called after a shape was measured."""

    @hookspec
    def register_shapes(self) -> dict[str, type[Shape]] | None:
        """Return kind -> Shape mappings to extend SHAPE_REGISTRY."""
