"""Tree outline of a theme, as shown in the projects panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Mapping

from .theme import Theme


@dataclass
class OutlineNode:
    """One line of the outline; ``css_path`` is set on stylesheet entries."""

    label: str
    children: list[OutlineNode] = field(default_factory=list)
    css_path: str | None = None
    default_open: bool = False


def _mapping_lines(entries: Mapping[str, str], width: int) -> list[OutlineNode]:
    return [OutlineNode(f"{key:<{width}}  {value}") for key, value in sorted(entries.items())]


def _css_nodes(entries: Mapping[str, str]) -> list[OutlineNode]:
    return [OutlineNode(path, css_path=path) for _, path in sorted(entries.items())]


def _main_node(theme: Theme) -> OutlineNode:
    main = theme.main
    node = OutlineNode("Main Screen", default_open=True)
    node.children.append(
        OutlineNode(
            f"Buttons ({len(main.buttons)})",
            [OutlineNode(f'{key:<20}  "{label}"') for key, label in sorted(main.buttons.items())],
        )
    )
    layout = main.layout
    if layout.sidebar_position or layout.play_button_align:
        lines = []
        if layout.sidebar_position:
            lines.append(OutlineNode(f"sidebar_position:  {layout.sidebar_position}"))
        if layout.play_button_align:
            lines.append(OutlineNode(f"play_button_align: {layout.play_button_align}"))
        node.children.append(OutlineNode("Layout", lines))
    node.children.append(OutlineNode("Backgrounds", _mapping_lines(main.backgrounds, 16)))
    node.children.append(OutlineNode("CSS", _css_nodes(main.css)))
    return node


def _splash_node(theme: Theme) -> OutlineNode:
    splash = theme.splash
    node = OutlineNode("Splash Screen", default_open=True)
    node.children.append(
        OutlineNode(
            f"Texts ({len(splash.texts)})",
            [OutlineNode(f'"{text}"') for text in splash.texts],
        )
    )
    node.children.append(OutlineNode("Backgrounds", _mapping_lines(splash.backgrounds, 16)))
    node.children.append(OutlineNode("CSS", _css_nodes(splash.css)))
    return node


def project_outline(theme: Theme) -> OutlineNode:
    """Build the outline tree for ``theme``."""
    title = f"{theme.name or '(unnamed)'}  v{theme.version}"
    root = OutlineNode(title, default_open=True)
    if theme.author:
        root.children.append(OutlineNode(f"by {theme.author}"))
    if theme.description:
        root.children.append(OutlineNode(theme.description))
    root.children.append(_main_node(theme))
    root.children.append(_splash_node(theme))
    return root


def css_entries(theme: Theme) -> list[tuple[str, str]]:
    """Stylesheets as (relative path, tab label) pairs, main section first."""
    return [
        (path, PurePath(path).name)
        for css_map in (theme.main.css, theme.splash.css)
        for _, path in sorted(css_map.items())
    ]