"""Executable Textual app hosting the editor session."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textrighter.adapters.textual.app"
    ) from exc

from textrighter import __version__
from textrighter.config import mode_config
from textrighter.editor import EditorSession
from textrighter.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks, mark_indent


class TextRighterApp(App[None]):
    """Full-screen modal editor built on one EditorSession."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-view {
        height: 1fr;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $primary-darken-2;
        padding: 0 1;
    }

    #message-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #prompt-bar {
        height: 1;
        display: none;
    }

    #prompt-label {
        width: auto;
        padding: 0 0 0 1;
    }

    #prompt {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
    }
    """

    BINDINGS = [("ctrl+c", "quit", "Quit")]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None
        self._prompt_bar: Horizontal | None = None
        self._prompt_label: Static | None = None
        self._prompt_widget: Input | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        self._prompt_label = Static("", id="prompt-label")
        self._prompt_widget = Input(id="prompt")
        self._prompt_bar = Horizontal(self._prompt_label, self._prompt_widget, id="prompt-bar")
        yield self._buffer_widget
        yield self._status_widget
        yield self._message_widget
        yield self._prompt_bar

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            update_message=self._update_message,
            open_prompt=self._open_prompt,
            close_prompt=self._close_prompt,
            request_exit=self.exit,
            log=lambda line: telemetry.get_logger("textrighter.tui").debug(line),
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self.set_interval(1.0, self._refresh_message)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self.session.prompting:
            if event.key == "escape":
                self.adapter.cancel_prompt()
                event.stop()
            return
        self.adapter.handle_textual_key(event.key, event.character)
        event.stop()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter:
            self.adapter.submit_prompt(event.value)

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            self.adapter.refresh()

    def _refresh_message(self) -> None:
        if self.adapter:
            self._update_message(self.adapter.message_line())

    def _update_buffer(self, session: EditorSession) -> None:
        if not self._buffer_widget or not self.adapter:
            return
        height = max(self._buffer_widget.size.height, 1)
        width = max(self._buffer_widget.size.width, 1)
        viewport = self.adapter.viewport
        viewport.follow(session.cursor, height, width)

        if session.buffer.is_empty():
            welcome = f"TextRighter -- {__version__}"
            self._buffer_widget.update(Text("\n" * (height // 3) + welcome.center(width)))
            return

        rows = session.visible_lines(viewport.top, viewport.left, height, width)
        marked = [mark_indent(line) for line in rows]
        rows = [display for display, _ in marked]
        row = session.cursor.y - viewport.top
        column = session.cursor.x - viewport.left
        if 0 <= row < len(rows) and column >= len(rows[row]):
            rows[row] = rows[row].ljust(column + 1)
        text = Text("\n".join(rows))
        start = 0
        for line, (_, indent) in zip(rows, marked):
            if indent:
                text.stylize("dim", start, start + indent)
            start += len(line) + 1
        offset = sum(len(line) + 1 for line in rows[:row]) + column
        text.stylize("reverse", offset, offset + 1)
        self._buffer_widget.update(text)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            color = mode_config(self.session.mode_name).color
            self._status_widget.update(Text(status, style=f"bold {color}"))

    def _update_message(self, message: str) -> None:
        if self._message_widget:
            self._message_widget.update(Text(message))

    def _open_prompt(self, label: str) -> None:
        if self._prompt_bar and self._prompt_label and self._prompt_widget:
            self._prompt_label.update(Text(label))
            self._prompt_widget.value = ""
            self._prompt_bar.display = True
            self._prompt_widget.focus()

    def _close_prompt(self) -> None:
        if self._prompt_bar and self._prompt_widget:
            self._prompt_bar.display = False
            self._prompt_widget.value = ""
            self.set_focus(None)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="textrighter", description="Modal terminal text editor."
    )
    parser.add_argument("file", nargs="?", help="File to open (created on save)")
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("TEXTRIGHTER_LOG_PRESET", "production"),
        choices=sorted(telemetry.PRESETS),
        help="Telemetry preset (default: production, logs to a file)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    session = EditorSession.open(args.file) if args.file else EditorSession()
    TextRighterApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
