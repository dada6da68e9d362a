"""Interactive theme editor driven from a terminal."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .css import Color
from .outline import OutlineNode, css_entries, project_outline
from .preview import (
    DEFAULT_LINE,
    DEFAULT_SURFACE,
    DEFAULT_TEXT,
    button_layout,
    splash_text_index,
    watermark_text,
)
from .theme import ThemeError
from .workspace import Workspace

DEFAULT_SAVE_NAME = "theme.json"

_HELP = """\
Commands:
  new                 start a new theme
  open [PATH]         open a theme.json
  save                save the theme and changed stylesheets
  saveas [PATH]       save the theme under a new name
  outline             show the theme outline
  tabs                list editor tabs
  show N              print the text of tab N
  edit N              replace the text of tab N (end with a line holding '.')
  close N             close tab N
  css N               open stylesheet N of the outline in a tab
  preview [main|splash]
                      describe the preview
  help                show this text
  exit                leave the editor"""


def _hex(color: Color) -> str:
    red, green, blue, _ = color
    return "#" + "".join(f"{round(channel * 255):02x}" for channel in (red, green, blue))


def _outline_lines(node: OutlineNode, depth: int = 0) -> list[str]:
    lines = ["  " * depth + node.label]
    for child in node.children:
        lines.extend(_outline_lines(child, depth + 1))
    return lines


class ThemeEditorApp:
    """Reads commands from a text stream and edits a theme in a workspace."""

    def __init__(
        self,
        workspace: Workspace | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
        preview_size: tuple[float, float] = (400.0, 600.0),
    ) -> None:
        self.workspace = workspace if workspace is not None else Workspace()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clock = clock
        self._started = clock()
        self.preview_size = preview_size
        self.running = False
        self._commands: dict[str, Callable[[str], None]] = {
            "new": lambda _: self.action_new(),
            "open": self._command_open,
            "save": lambda _: self.action_save(),
            "saveas": self._command_save_as,
            "outline": lambda _: self._show_outline(),
            "tabs": lambda _: self._show_tabs(),
            "show": self._command_show,
            "edit": self._command_edit,
            "close": self._command_close,
            "css": self._command_css,
            "preview": self._command_preview,
            "help": lambda _: self._say(_HELP),
            "exit": lambda _: self._stop(),
            "quit": lambda _: self._stop(),
        }

    # -- input and output ---------------------------------------------------

    def _say(self, text: str) -> None:
        print(text, file=self._out)

    def _ask(self, prompt: str) -> str | None:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.rstrip("\r\n").strip()

    def _stop(self) -> None:
        self.running = False

    # -- main loop ----------------------------------------------------------

    def run(self) -> None:
        """Read and carry out commands until ``exit`` or end of input."""
        self.running = True
        shown_status = self.workspace.status_message
        while self.running:
            line = self._ask("> ")
            if line is None:
                break
            if not line:
                continue
            name, _, argument = line.partition(" ")
            handler = self._commands.get(name.lower())
            if handler is None:
                self._say(f"Unknown command: {name} (type 'help')")
                continue
            handler(argument.strip())
            status = self.workspace.status_message
            if status and status != shown_status:
                self._say(f"[{status}]")
            shown_status = status
        self.running = False

    # -- file actions -------------------------------------------------------

    def action_new(self) -> None:
        """Replace the current theme with the starter theme."""
        self.workspace.new_theme()

    def action_open(self) -> None:
        """Ask for a theme.json path and open it."""
        path = self._ask("Open theme: ")
        if path:
            self._open_path(path)

    def _open_path(self, path: str) -> None:
        try:
            self.workspace.load_theme(path)
        except ThemeError:
            pass

    def action_save(self) -> None:
        """Save the theme, asking for a path if it has none yet."""
        theme = self.workspace.theme
        if theme is None:
            return
        if theme.json_path is None:
            self.action_save_as()
            return
        try:
            self.workspace.save()
        except ThemeError as exc:
            self.workspace.status_message = f"Error: {exc}"

    def action_save_as(self) -> None:
        """Ask for a new path and save the theme there."""
        if self.workspace.theme is None:
            return
        answer = self._ask(f"Save as [{DEFAULT_SAVE_NAME}]: ")
        if answer is None:
            return
        self._save_to(answer or DEFAULT_SAVE_NAME)

    def _save_to(self, path: str) -> None:
        try:
            self.workspace.save_as(path)
        except ThemeError as exc:
            self.workspace.status_message = f"Error: {exc}"

    def _command_open(self, argument: str) -> None:
        if argument:
            self._open_path(argument)
        else:
            self.action_open()

    def _command_save_as(self, argument: str) -> None:
        if argument and self.workspace.theme is not None:
            self._save_to(argument)
        else:
            self.action_save_as()

    # -- projects and editor ------------------------------------------------

    def _show_outline(self) -> None:
        theme = self.workspace.theme
        if theme is None:
            self._say("(no theme loaded)")
            return
        self._say("\n".join(_outline_lines(project_outline(theme))))
        for number, (path, _) in enumerate(css_entries(theme)):
            self._say(f"  css {number}: {path}")

    def _show_tabs(self) -> None:
        if not self.workspace.tabs:
            self._say("(no theme loaded — new or open)")
            return
        for index, tab in enumerate(self.workspace.tabs):
            marker = ">" if index == self.workspace.active_tab else " "
            dirty = " *" if tab.dirty else ""
            self._say(f"{marker}{index}: {tab.label}{dirty}")

    def _tab_argument(self, argument: str) -> int | None:
        try:
            index = int(argument)
        except ValueError:
            self._say(f"Error: not a tab number: {argument!r}")
            return None
        if not 0 <= index < len(self.workspace.tabs):
            self._say(f"Error: no tab {index}")
            return None
        return index

    def _command_show(self, argument: str) -> None:
        index = self._tab_argument(argument)
        if index is None:
            return
        self.workspace.active_tab = index
        self._say(self.workspace.tabs[index].content)

    def _command_edit(self, argument: str) -> None:
        index = self._tab_argument(argument)
        if index is None:
            return
        lines = []
        while True:
            line = self._in.readline()
            if not line or line.rstrip("\r\n") == ".":
                break
            lines.append(line.rstrip("\r\n") + "\n")
        self.workspace.active_tab = index
        self.workspace.edit_tab(index, "".join(lines))

    def _command_close(self, argument: str) -> None:
        index = self._tab_argument(argument)
        if index is None:
            return
        try:
            self.workspace.close_tab(index)
        except ValueError as exc:
            self._say(f"Error: {exc}")

    def _command_css(self, argument: str) -> None:
        theme = self.workspace.theme
        if theme is None:
            self._say("(no theme loaded)")
            return
        entries = css_entries(theme)
        try:
            relative, label = entries[int(argument)]
        except (ValueError, IndexError):
            self._say(f"Error: no stylesheet {argument!r}")
            return
        root = theme.root_dir if theme.root_dir is not None else Path()
        index = self.workspace.find_or_open_tab(root / relative, label)
        self.workspace.active_tab = index
        self.workspace.pending_focus = None
        self._say(f"{index}: {label}")

    # -- preview ------------------------------------------------------------

    def _command_preview(self, argument: str) -> None:
        if self.workspace.theme is None:
            self._say("(open a theme to preview)")
            return
        screen = argument.lower() or "main"
        if screen == "main":
            self._say("\n".join(self._main_preview()))
        elif screen == "splash":
            self._say("\n".join(self._splash_preview()))
        else:
            self._say(f"Error: unknown screen {argument!r}")

    def _main_preview(self) -> list[str]:
        theme = self.workspace.theme
        width, height = self.preview_size
        colors = self.workspace.main_css_vars()
        surface = colors.get("--surface", DEFAULT_SURFACE)
        hover = colors.get("--line", DEFAULT_LINE)
        text = colors.get("--text", DEFAULT_TEXT)
        background = self.workspace.background_path(theme.main.backgrounds, "main")
        lines = [
            f"Main Screen ({width:g}x{height:g})",
            f"  background: {background if background is not None else '(none)'}",
            f"  colours: surface {_hex(surface)}  hover {_hex(hover)}  text {_hex(text)}",
        ]
        for placement in button_layout(width, height, theme.main.buttons):
            lines.append(
                f"  [{placement.label}] at ({placement.x:.1f}, {placement.y:.1f})"
                f" size {placement.width:.1f}x{placement.height:.1f}"
            )
        lines.append(f"  {watermark_text(theme)}")
        return lines

    def _splash_preview(self) -> list[str]:
        theme = self.workspace.theme
        width, height = self.preview_size
        text = self.workspace.splash_css_vars().get("--text", DEFAULT_TEXT)
        background = self.workspace.background_path(theme.splash.backgrounds, "splash")
        lines = [
            f"Splash Screen ({width:g}x{height:g})",
            f"  background: {background if background is not None else '(none)'}",
            f"  colours: text {_hex(text)}",
        ]
        texts = theme.splash.texts
        if texts:
            index = splash_text_index(self._clock() - self._started, len(texts))
            lines.append(f"  text: {texts[index]}")
        return lines


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="themeforge", description="Edit launcher themes.")
    parser.add_argument("theme", nargs="?", type=Path, help="theme.json to open at start")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the editor, optionally opening a theme first."""
    args = parse_args(argv)
    app = ThemeEditorApp()
    if args.theme is not None:
        app._open_path(str(args.theme))
        print(f"[{app.workspace.status_message}]", file=app._out)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())