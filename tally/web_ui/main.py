"""NiceGUI entrypoint for the Tally web runtime."""

from __future__ import annotations

import argparse

from nicegui import app, ui

from tally.utils import logging as logging_utils
from tally.web_ui.runtime import WebRuntime


def _install_theme() -> None:
    """Install global CSS for the counter page."""
    ui.add_head_html(
        """
<style>
.tally-count {
  font-size: 100px;
  font-weight: 700;
  line-height: 1;
  font-variant-numeric: tabular-nums;
}
</style>
        """
    )


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI page for the runtime."""

    @ui.page("/")
    def index() -> None:
        with ui.column().classes("w-full h-screen items-center justify-center"):
            count_label = ui.label("0").classes("tally-count")
            with ui.row().classes("items-center justify-center q-gutter-sm"):
                play_button = ui.button("Play", icon="play_arrow", on_click=runtime.on_play)
                reset_button = ui.button("Reset", icon="restart_alt", on_click=runtime.on_reset)

        def render_count(value: int) -> None:
            count_label.set_text(str(value))

        def render_playing(playing: bool) -> None:
            play_button.set_text("Pause" if playing else "Play")
            play_button.props(f"icon={'pause' if playing else 'play_arrow'}")

        runtime.bind_client(
            ui.context.client,
            on_count=render_count,
            on_playing=render_playing,
            on_reset_visible=reset_button.set_visibility,
        )


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the Tally NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    runtime = WebRuntime()
    if args.smoke_test:
        print("web-smoke-ok", runtime.state())
        return
    _install_theme()
    _build_ui(runtime)
    app.on_shutdown(runtime.shutdown)
    ui.run(
        host=args.host,
        port=args.port,
        title="Tally",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
