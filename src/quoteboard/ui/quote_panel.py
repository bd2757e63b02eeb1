"""Quote panel — NiceGUI display surface for one refresh controller.

The panel never reads controller internals while rendering: it re-renders
from the ``quote.state.changed`` events published for its controller.
Starting and stopping the controller follows the page's client lifecycle.
"""

from __future__ import annotations

import logging as _logging
from typing import Any

from nicegui import ui

from quoteboard.core import events
from quoteboard.core.event_bus import EventBus
from quoteboard.core.models.event import Event
from quoteboard.core.models.state import FetchState
from quoteboard.core.refresh_controller import RefreshController

_log = _logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Fetching Quote..."


class QuotePanel:
    """Renders a :class:`FetchState` and forwards user actions.

    Args:
        controller: The controller whose state this panel shows.
        event_bus: Bus the controller publishes on.
    """

    def __init__(self, controller: RefreshController, event_bus: EventBus) -> None:
        self._controller = controller
        self._bus = event_bus
        self._sub_id: str | None = None

        # UI elements (bound in build())
        self._lbl_quote: Any = None
        self._lbl_author: Any = None
        self._btn_refresh: Any = None

    def build(self) -> None:
        """Create the elements, subscribe to state changes and start refreshing."""
        with ui.column().classes("w-full items-center"):
            self._lbl_quote = ui.label(PLACEHOLDER_TEXT).classes("text-lg text-center")
            self._lbl_author = ui.label("").classes("text-sm text-grey")
            self._btn_refresh = ui.button("New Quote", icon="autorenew", on_click=self._on_refresh_click)
            ui.label(f"Quotes auto-refresh every {self._controller.interval:g} seconds").classes("text-xs")

        self.activate()

    def activate(self) -> None:
        """Subscribe to this controller's state and start auto-refresh.

        Called on build and again on every client (re)connect; an already
        running controller is left alone.
        """
        if self._sub_id is None:
            self._sub_id = self._bus.subscribe(
                events.QUOTE_STATE_CHANGED,
                self._on_state_changed,
                filter_dict={"controller_id": self._controller.controller_id},
            )
        self.render(self._controller.state)
        if not self._controller.is_running:
            self._controller.start()

    def deactivate(self) -> None:
        """Stop auto-refresh and drop the subscription (client disconnected)."""
        self._controller.stop()
        if self._sub_id is not None:
            self._bus.unsubscribe(self._sub_id)
            self._sub_id = None

    def render(self, state: FetchState) -> None:
        """Push *state* into the bound elements.

        Elements whose client has already gone raise ``RuntimeError``; those
        updates are dropped.
        """
        quote = state.current_quote
        try:
            if self._lbl_quote is not None:
                self._lbl_quote.text = f"“{quote.text}”" if quote else PLACEHOLDER_TEXT
            if self._lbl_author is not None:
                self._lbl_author.text = f"- {quote.author}" if quote else ""
            if self._btn_refresh is not None:
                self._btn_refresh.set_enabled(not state.is_loading)
        except RuntimeError:
            _log.debug("quote panel client gone, ignoring update")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_refresh_click(self) -> None:
        self._controller.refresh_now()

    async def _on_state_changed(self, event: Event) -> None:
        state = FetchState.model_validate(
            {
                "current_quote": event.payload.get("current_quote"),
                "is_loading": event.payload.get("is_loading", False),
            }
        )
        self.render(state)
