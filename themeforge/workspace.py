"""Editing session: the open theme and the editor tabs that hold its files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Mapping

from .css import CssVars, parse_css_vars
from .theme import Theme, ThemeError

JSON_TAB_LABEL = "theme.json"


@dataclass
class EditorTab:
    """One editable text document shown in the editor."""

    label: str
    file_path: Path | None = None
    dirty: bool = False
    content: str = ""

    BUF_SIZE: ClassVar[int] = 64 * 1024

    def set_content(self, text: str) -> None:
        """Replace the text, cut at the first NUL and to fit the edit buffer."""
        text = text.split("\0", 1)[0]
        data = text.encode("utf-8")[: self.BUF_SIZE - 1]
        self.content = data.decode("utf-8", errors="ignore")


def _read_file(path: Path) -> str | None:
    try:
        return path.read_bytes().decode("utf-8", errors="replace")
    except OSError:
        return None


def _write_file(path: Path, text: str, make_parents: bool = False) -> bool:
    try:
        if make_parents:
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError:
        return False
    return True


def _pick(entries: Mapping[str, str], key: str) -> str:
    """Return the entry for ``key``, or the one with the smallest key."""
    return entries[key] if key in entries else entries[min(entries)]


class Workspace:
    """The theme being edited together with its open editor tabs."""

    def __init__(self) -> None:
        self.theme: Theme | None = None
        self.tabs: list[EditorTab] = []
        self.active_tab: int = 0
        self.pending_focus: int | None = None
        self.status_message: str = ""

    def _tab_index(self, path: Path) -> int | None:
        return next(
            (index for index, tab in enumerate(self.tabs) if tab.file_path == path), None
        )

    def _open_tab(self, path: Path, label: str) -> EditorTab:
        tab = EditorTab(label=label, file_path=path)
        content = _read_file(path)
        if content is not None:
            tab.set_content(content)
        self.tabs.append(tab)
        return tab

    def new_theme(self) -> None:
        """Start editing the default starter theme."""
        self.theme = Theme.create_default()
        self.apply_theme_to_editor()
        self.status_message = "New theme created"

    def load_theme(self, path: str | Path) -> None:
        """Open the theme.json at ``path`` and its stylesheets."""
        path = Path(path)
        try:
            theme = Theme.load(path)
        except ThemeError:
            self.status_message = f"Error: could not load {path.name}"
            raise
        self.theme = theme
        self.status_message = f"Opened: {path.name}"
        self.apply_theme_to_editor()

    def save(self) -> None:
        """Write the theme.json tab and every changed stylesheet tab to disk.

        The theme is refreshed from the theme.json tab first; if that text is
        not valid the theme keeps its values but the text is still written.
        """
        if self.theme is None:
            raise ThemeError("no theme loaded")
        json_path = self.theme.json_path
        if json_path is None:
            raise ThemeError("theme has no file path")

        if self.tabs:
            json_tab = self.tabs[0]
            try:
                self.theme.from_json_string(json_tab.content)
            except ThemeError:
                pass
            if _write_file(json_path, json_tab.content):
                json_tab.dirty = False

        for tab in self.tabs[1:]:
            if not tab.dirty or tab.file_path is None:
                continue
            if _write_file(tab.file_path, tab.content, make_parents=True):
                tab.dirty = False

        self.status_message = f"Saved: {json_path.name}"

    def save_as(self, path: str | Path) -> None:
        """Tie the theme to ``path`` and save it there."""
        if self.theme is None:
            raise ThemeError("no theme loaded")
        path = Path(path)
        self.theme.json_path = path
        self.theme.root_dir = path.parent
        if self.tabs:
            self.tabs[0].file_path = path
        self.save()

    def apply_theme_to_editor(self) -> None:
        """Rebuild the tabs: theme.json first, then each stylesheet once."""
        self.tabs = []
        self.active_tab = 0
        self.pending_focus = None
        if self.theme is None:
            return

        json_tab = EditorTab(label=JSON_TAB_LABEL, file_path=self.theme.json_path)
        json_tab.set_content(self.theme.to_json_string())
        self.tabs.append(json_tab)

        root = self.theme.root_dir
        if root is None:
            return
        for css_map in (self.theme.main.css, self.theme.splash.css):
            for _, rel_path in sorted(css_map.items()):
                abs_path = root / rel_path
                if self._tab_index(abs_path) is None:
                    self._open_tab(abs_path, abs_path.name)

    def find_or_open_tab(self, path: str | Path, label: str) -> int:
        """Return the index of the tab for ``path``, opening it if needed."""
        path = Path(path)
        index = self._tab_index(path)
        if index is not None:
            return index
        self._open_tab(path, label)
        return len(self.tabs) - 1

    def close_tab(self, index: int) -> None:
        """Close a tab; the theme.json tab cannot be closed."""
        if index == 0:
            raise ValueError("the theme.json tab cannot be closed")
        del self.tabs[index]
        if self.active_tab >= len(self.tabs):
            self.active_tab = len(self.tabs) - 1

    def edit_tab(self, index: int, text: str) -> None:
        """Replace a tab's text and mark it as changed."""
        tab = self.tabs[index]
        tab.set_content(text)
        tab.dirty = True

    def find_css_buffer(self, css_map: Mapping[str, str], key: str) -> str | None:
        """Return the open editor text of the stylesheet named by ``key``.

        Falls back to the entry with the smallest key when ``key`` is absent.
        """
        if self.theme is None or self.theme.root_dir is None or not css_map:
            return None
        index = self._tab_index(self.theme.root_dir / _pick(css_map, key))
        return None if index is None else self.tabs[index].content

    def main_css_vars(self) -> CssVars:
        """Colour variables from the main stylesheet's current editor text."""
        if self.theme is None:
            return CssVars()
        buffer = self.find_css_buffer(self.theme.main.css, "main")
        return CssVars() if buffer is None else parse_css_vars(buffer)

    def splash_css_vars(self) -> CssVars:
        """Colour variables from the splash stylesheet, else from the main one."""
        if self.theme is None:
            return CssVars()
        buffer = self.find_css_buffer(self.theme.splash.css, "splash")
        found = CssVars() if buffer is None else parse_css_vars(buffer)
        return found if found.colors else self.main_css_vars()

    def background_path(self, backgrounds: Mapping[str, str], key: str) -> Path | None:
        """Absolute path of the background named by ``key`` or the first one."""
        if self.theme is None or self.theme.root_dir is None or not backgrounds:
            return None
        return self.theme.root_dir / _pick(backgrounds, key)