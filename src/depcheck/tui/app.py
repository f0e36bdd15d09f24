"""Textual TUI for editing dependency listings and viewing their full dependency lists."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Footer, Header, Input, Static, TextArea

from depcheck.api import SAMPLE_INPUT, process
from depcheck.core.errors import DependencyCheckError

INTRO = """[dim]Type or paste one listing per line, e.g. [bold]X depends on Y R[/bold].
Names use letters, digits, underscores, @, dollar signs and dashes (no leading digit or dash).
[cyan]Ctrl+R[/] check  ·  [cyan]Ctrl+O[/] load file  ·  [cyan]Ctrl+L[/] sample  ·  [cyan]Ctrl+Q[/] quit[/]"""

COLOR_HEADER = "bold magenta"
COLOR_ERROR = "bold red"


def _check_panels(text: str) -> tuple[str | None, str | None, str | None]:
    """Return (input, output, error) panel contents for a document; error excludes the others."""
    try:
        result = process(text)
    except DependencyCheckError as e:
        return None, None, str(e)
    return result.normalized_input, result.expanded_output, None


def _load_document(value: str) -> tuple[str | None, str | None]:
    """Read the file named by value; return (text, None) or (None, reason it could not be loaded)."""
    if not value.strip():
        return None, "Enter a file path."
    path = Path(value.strip()).expanduser()
    try:
        return path.read_text(encoding="utf-8"), None
    except UnicodeDecodeError:
        return None, f"Not a UTF-8 text file: {path}"
    except IsADirectoryError:
        return None, f"Not a file: {path}"
    except OSError as e:
        return None, f"Could not read {path}: {e.strerror or e}"


class LoadFileScreen(ModalScreen[str | None]):
    """Ask for a file path and hand the file's text back to the editor."""

    BINDINGS = [Binding("escape", "dismiss(None)", "Cancel")]

    DEFAULT_CSS = """
    LoadFileScreen {
        align: center middle;
    }
    #load_file {
        width: 70;
        height: auto;
        padding: 1 2;
        border: round $primary;
    }
    #load_file_status {
        color: $error;
        height: auto;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="load_file"):
            yield Input(placeholder="path/to/dependencies.txt", id="load_file_path")
            yield Static("", id="load_file_status", markup=False)

    def on_mount(self) -> None:
        self.query_one("#load_file", Vertical).border_title = "Load file  (Enter / Esc)"
        self.query_one("#load_file_path", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        text, problem = _load_document(event.value)
        if problem is not None:
            # Stay open so the path can be corrected.
            self.query_one("#load_file_status", Static).update(problem)
            return
        self.dismiss(text)


class DepCheckApp(App[None]):
    """Terminal UI to check dependency listings."""

    TITLE = "depcheck"
    BINDINGS = [
        Binding("ctrl+r", "check", "Check", priority=True),
        Binding("ctrl+o", "load_file", "Load file", priority=True),
        Binding("ctrl+l", "load_sample", "Sample", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    DEFAULT_CSS = """
    #intro {
        padding: 0 1;
        margin-bottom: 1;
    }
    #text_input {
        height: 12;
        border: solid $primary;
    }
    #results {
        height: 1fr;
    }
    .panel_title {
        padding: 1 1 0 1;
    }
    .panel {
        padding: 0 2;
        border: solid $secondary;
        height: auto;
    }
    #error_panel {
        border: solid $error;
    }
    """

    def __init__(self, initial_path: Path | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._initial_path = initial_path
        self._editor: TextArea | None = None
        # panel name -> (title, body); filled on mount
        self._panels: dict[str, tuple[Static, Static]] = {}

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield Static(INTRO, id="intro", markup=True)
        yield TextArea(SAMPLE_INPUT, id="text_input")
        with VerticalScroll(id="results"):
            yield Static(f"[{COLOR_HEADER}]Input[/]", id="input_title", classes="panel_title")
            yield Static("", id="input_panel", classes="panel", markup=False)
            yield Static(f"[{COLOR_HEADER}]Output[/]", id="output_title", classes="panel_title")
            yield Static("", id="output_panel", classes="panel", markup=False)
            yield Static(f"[{COLOR_ERROR}]Error[/]", id="error_title", classes="panel_title")
            yield Static("", id="error_panel", classes="panel", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = "Library dependency analysis"
        self._editor = self.query_one("#text_input", TextArea)
        self._panels = {
            name: (
                self.query_one(f"#{name}_title", Static),
                self.query_one(f"#{name}_panel", Static),
            )
            for name in ("input", "output", "error")
        }
        self._show_panels(None, None, None)
        if self._initial_path is not None:
            self._load_path(self._initial_path)
        self._editor.focus()

    def _show_panels(self, input_text: str | None, output: str | None, error: str | None) -> None:
        for name, content in (("input", input_text), ("output", output), ("error", error)):
            title, body = self._panels[name]
            title.display = content is not None
            body.display = content is not None
            body.update(content or "")

    def _load_path(self, path: Path) -> None:
        text, problem = _load_document(str(path))
        if problem is not None:
            self.notify(problem, severity="error", timeout=5)
            return
        self._load_text(text)

    def _load_text(self, text: str) -> None:
        if self._editor is not None:
            self._editor.load_text(text)
        self.action_check()

    def action_check(self) -> None:
        if self._editor is None:
            return
        self._show_panels(*_check_panels(self._editor.text))

    def action_load_sample(self) -> None:
        if self._editor is None:
            return
        self._editor.load_text(SAMPLE_INPUT)
        self._show_panels(None, None, None)

    def action_load_file(self) -> None:
        if isinstance(self.screen, LoadFileScreen):
            return
        self.push_screen(LoadFileScreen(), self._on_load_file_done)

    def _on_load_file_done(self, text: str | None) -> None:
        if text is not None:
            self._load_text(text)


def main() -> None:
    """Entry point for the depcheck TUI."""
    path = None
    if len(sys.argv) > 1:
        path = Path(sys.argv[1].strip())
    app = DepCheckApp(initial_path=path)
    app.run()


if __name__ == "__main__":
    main()
