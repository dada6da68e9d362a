"""Theme description model and its JSON representation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class ThemeError(Exception):
    """Raised when a theme cannot be read, parsed or written."""


@dataclass
class ThemeLayout:
    """Placement hints for the main screen."""

    sidebar_position: str = ""
    play_button_align: str = ""


@dataclass
class ThemeMain:
    """Main-screen section: button labels, layout, backgrounds and stylesheets."""

    buttons: dict[str, str] = field(default_factory=dict)
    layout: ThemeLayout = field(default_factory=ThemeLayout)
    backgrounds: dict[str, str] = field(default_factory=dict)
    css: dict[str, str] = field(default_factory=dict)


@dataclass
class ThemeSplash:
    """Splash-screen section: rotating texts, backgrounds and stylesheets."""

    texts: list[str] = field(default_factory=list)
    backgrounds: dict[str, str] = field(default_factory=dict)
    css: dict[str, str] = field(default_factory=dict)


def _string(container: dict[str, Any], key: str, where: str) -> str:
    value = container.get(key, "")
    if not isinstance(value, str):
        raise ThemeError(f"{where}.{key} must be a string")
    return value


def _string_map(value: Any, where: str) -> dict[str, str]:
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ThemeError(f"{where} must be an object of strings")
    return dict(value)


def _string_list(value: Any, where: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ThemeError(f"{where} must be an array of strings")
    return list(value)


@dataclass
class Theme:
    """A complete theme, optionally tied to the theme.json it came from."""

    name: str = ""
    author: str = ""
    description: str = ""
    version: str = ""
    main: ThemeMain = field(default_factory=ThemeMain)
    splash: ThemeSplash = field(default_factory=ThemeSplash)
    root_dir: Path | None = None
    json_path: Path | None = None

    @staticmethod
    def create_default() -> Theme:
        """Return the starter theme offered for a new project."""
        return Theme(
            name="NewTheme",
            version="1.0.0",
            main=ThemeMain(
                buttons={
                    "play": "Play",
                    "settings": "Settings",
                    "login": "Login",
                    "successfully": "Success",
                    "logs": "Logs",
                    "themes": "Themes",
                },
                layout=ThemeLayout(sidebar_position="left", play_button_align="stretch"),
                backgrounds={"main": "./backgrounds/bg_main.png"},
                css={"main": "./css/main.css"},
            ),
            splash=ThemeSplash(
                texts=["Welcome!", "Loading..."],
                backgrounds={"splash": "./backgrounds/bg_splash.png"},
                css={"splash": "./css/splash.css"},
            ),
        )

    @staticmethod
    def load(path: str | Path) -> Theme:
        """Read a theme from a theme.json file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ThemeError(f"could not load {path.name}: {exc}") from exc
        theme = Theme()
        theme.from_json_string(text)
        theme.json_path = path
        theme.root_dir = path.parent
        return theme

    def save(self) -> None:
        """Write the theme back to the file it belongs to."""
        if self.json_path is None:
            raise ThemeError("theme has no file path")
        self.save_as(self.json_path)

    def save_as(self, path: str | Path) -> None:
        """Write the theme to ``path`` and make that its file."""
        path = Path(path)
        try:
            path.write_text(self.to_json_string(), encoding="utf-8")
        except OSError as exc:
            raise ThemeError(f"could not write {path}: {exc}") from exc
        self.json_path = path
        self.root_dir = path.parent

    def to_dict(self) -> dict[str, Any]:
        """Return the theme as a JSON-ready dictionary."""
        data: dict[str, Any] = {"name": self.name}
        if self.author:
            data["author"] = self.author
        if self.description:
            data["description"] = self.description
        data["version"] = self.version

        main: dict[str, Any] = {"buttons": dict(self.main.buttons)}
        layout = self.main.layout
        if layout.sidebar_position or layout.play_button_align:
            main["layout"] = {}
            if layout.sidebar_position:
                main["layout"]["sidebar_position"] = layout.sidebar_position
            if layout.play_button_align:
                main["layout"]["play_button_align"] = layout.play_button_align
        main["backgrounds"] = dict(self.main.backgrounds)
        main["css"] = dict(self.main.css)
        data["main"] = main

        data["splash"] = {
            "texts": list(self.splash.texts),
            "backgrounds": dict(self.splash.backgrounds),
            "css": dict(self.splash.css),
        }
        return data

    def to_json_string(self) -> str:
        """Serialise the theme with sorted keys and four-space indentation."""
        return json.dumps(self.to_dict(), indent=4, sort_keys=True, ensure_ascii=False)

    def update_from_dict(self, data: Any) -> None:
        """Update the theme from a parsed theme.json document.

        Top-level strings are reset when absent; sections and their entries
        are only replaced when present. Nothing changes if the data is invalid.
        """
        if not isinstance(data, dict):
            raise ThemeError("theme document must be an object")

        name = _string(data, "name", "theme")
        author = _string(data, "author", "theme")
        description = _string(data, "description", "theme")
        version = _string(data, "version", "theme")

        main = ThemeMain(
            buttons=dict(self.main.buttons),
            layout=ThemeLayout(
                self.main.layout.sidebar_position, self.main.layout.play_button_align
            ),
            backgrounds=dict(self.main.backgrounds),
            css=dict(self.main.css),
        )
        section = data.get("main")
        if isinstance(section, dict):
            if "buttons" in section:
                main.buttons = _string_map(section["buttons"], "main.buttons")
            if "backgrounds" in section:
                main.backgrounds = _string_map(section["backgrounds"], "main.backgrounds")
            if "css" in section:
                main.css = _string_map(section["css"], "main.css")
            if "layout" in section:
                layout = section["layout"]
                if not isinstance(layout, dict):
                    raise ThemeError("main.layout must be an object")
                main.layout = ThemeLayout(
                    sidebar_position=_string(layout, "sidebar_position", "main.layout"),
                    play_button_align=_string(layout, "play_button_align", "main.layout"),
                )

        splash = ThemeSplash(
            texts=list(self.splash.texts),
            backgrounds=dict(self.splash.backgrounds),
            css=dict(self.splash.css),
        )
        section = data.get("splash")
        if isinstance(section, dict):
            if "texts" in section:
                splash.texts = _string_list(section["texts"], "splash.texts")
            if "backgrounds" in section:
                splash.backgrounds = _string_map(section["backgrounds"], "splash.backgrounds")
            if "css" in section:
                splash.css = _string_map(section["css"], "splash.css")

        self.name = name
        self.author = author
        self.description = description
        self.version = version
        self.main = main
        self.splash = splash

    def from_json_string(self, text: str) -> None:
        """Update the theme from theme.json text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ThemeError(f"invalid theme JSON: {exc}") from exc
        self.update_from_dict(data)