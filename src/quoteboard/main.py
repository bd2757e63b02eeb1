"""Quoteboard — application entry point (NiceGUI composition root).

Wires together: Config → logging → EventBus → QuoteSource → one
RefreshController + QuotePanel per connected client.
"""

from __future__ import annotations

import logging as _logging

from nicegui import app, ui

from quoteboard.config.config_manager import load_config
from quoteboard.core.event_bus import EventBus
from quoteboard.core.quote_source import QuoteSource
from quoteboard.core.refresh_controller import RefreshController
from quoteboard.log_config.logger import setup_logging
from quoteboard.ui.quote_panel import QuotePanel

_log = _logging.getLogger(__name__)


def main() -> None:
    """Synchronous entry point — bootstraps and starts NiceGUI."""
    config = load_config()
    setup_logging(config.system.log_level, config.system.log_dir)
    _log.info("Starting Quoteboard")

    bus = EventBus(queue_size=config.system.event_bus_queue_size)
    source = QuoteSource(
        timeout=config.http.request_timeout_seconds,
        user_agent=config.http.user_agent,
    )

    @ui.page("/")
    def index() -> None:
        controller = RefreshController(
            source,
            event_bus=bus,
            discard_stale=config.system.discard_stale_results,
        )
        panel = QuotePanel(controller, bus)
        panel.build()
        ui.context.client.on_connect(panel.activate)
        ui.context.client.on_disconnect(panel.deactivate)

    async def on_startup() -> None:
        await bus.start()
        _log.info("Quoteboard running on http://localhost:%d", config.system.webui_port)

    async def on_shutdown() -> None:
        await bus.stop()
        _log.info("Quoteboard stopped")

    app.on_startup(on_startup)
    app.on_shutdown(on_shutdown)

    ui.run(
        port=config.system.webui_port,
        title="Quoteboard",
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
