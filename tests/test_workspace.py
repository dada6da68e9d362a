import json

import pytest

from themeforge.css import parse_css_vars, parse_hex
from themeforge.theme import Theme, ThemeError
from themeforge.workspace import EditorTab, Workspace

MAIN_CSS = ":root {\n  --text: #ff0000;\n  --surface: #102030;\n}\nbody { color: var(--text); }\n"
SPLASH_CSS = "body { margin: 0; }\n"


def _make_project(tmp_path):
    theme = Theme.create_default()
    path = tmp_path / "theme.json"
    theme.save_as(path)
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "main.css").write_text(MAIN_CSS, encoding="utf-8")
    (tmp_path / "css" / "splash.css").write_text(SPLASH_CSS, encoding="utf-8")
    return path


def _loaded(tmp_path):
    ws = Workspace()
    ws.load_theme(_make_project(tmp_path))
    return ws


def test_set_content_truncates_to_buffer():
    tab = EditorTab(label="x")
    tab.set_content("a" * (EditorTab.BUF_SIZE * 2))
    assert len(tab.content.encode("utf-8")) == EditorTab.BUF_SIZE - 1


def test_set_content_stops_at_nul():
    tab = EditorTab(label="x")
    tab.set_content("before\0after")
    assert tab.content == "before"


def test_new_theme_opens_json_tab_only():
    ws = Workspace()
    ws.new_theme()
    assert ws.status_message == "New theme created"
    assert [tab.label for tab in ws.tabs] == ["theme.json"]
    assert ws.tabs[0].content == Theme.create_default().to_json_string()


def test_load_theme_opens_css_tabs(tmp_path):
    ws = _loaded(tmp_path)
    assert [tab.label for tab in ws.tabs] == ["theme.json", "main.css", "splash.css"]
    assert ws.tabs[1].content == MAIN_CSS
    assert ws.tabs[2].content == SPLASH_CSS
    assert ws.tabs[1].file_path == tmp_path / "css" / "main.css"
    assert ws.status_message == "Opened: theme.json"
    assert not any(tab.dirty for tab in ws.tabs)


def test_load_missing_theme_raises(tmp_path):
    ws = Workspace()
    with pytest.raises(ThemeError):
        ws.load_theme(tmp_path / "absent.json")
    assert ws.status_message == "Error: could not load absent.json"
    assert ws.theme is None


def test_shared_stylesheet_gets_one_tab(tmp_path):
    path = _make_project(tmp_path)
    theme = Theme.load(path)
    theme.splash.css = {"splash": "./css/main.css"}
    theme.save()
    ws = Workspace()
    ws.load_theme(path)
    assert [tab.label for tab in ws.tabs] == ["theme.json", "main.css"]


def test_save_writes_tabs_and_refreshes_theme(tmp_path):
    ws = _loaded(tmp_path)
    data = json.loads(ws.tabs[0].content)
    data["name"] = "Renamed"
    text = json.dumps(data)
    ws.edit_tab(0, text)
    ws.edit_tab(1, "body {}")
    assert ws.tabs[0].dirty and ws.tabs[1].dirty
    ws.save()
    assert (tmp_path / "theme.json").read_text(encoding="utf-8") == text
    assert (tmp_path / "css" / "main.css").read_text(encoding="utf-8") == "body {}"
    assert (tmp_path / "css" / "splash.css").read_text(encoding="utf-8") == SPLASH_CSS
    assert ws.theme.name == "Renamed"
    assert not any(tab.dirty for tab in ws.tabs)
    assert ws.status_message == "Saved: theme.json"


def test_save_keeps_theme_when_json_invalid(tmp_path):
    ws = _loaded(tmp_path)
    ws.edit_tab(0, "{ not json")
    ws.save()
    assert (tmp_path / "theme.json").read_text(encoding="utf-8") == "{ not json"
    assert ws.theme.name == Theme.create_default().name


def test_save_without_path_raises():
    ws = Workspace()
    ws.new_theme()
    with pytest.raises(ThemeError):
        ws.save()


def test_save_without_theme_raises():
    with pytest.raises(ThemeError):
        Workspace().save()


def test_save_as_then_save_creates_css_directory(tmp_path):
    ws = Workspace()
    ws.new_theme()
    path = tmp_path / "theme.json"
    ws.save_as(path)
    assert ws.tabs[0].file_path == path
    assert Theme.load(path).to_dict() == Theme.create_default().to_dict()

    css_path = tmp_path / "css" / "main.css"
    index = ws.find_or_open_tab(css_path, "main.css")
    ws.edit_tab(index, MAIN_CSS)
    ws.save()
    assert css_path.read_text(encoding="utf-8") == MAIN_CSS
    assert ws.tabs[index].dirty is False


def test_find_or_open_tab_reuses_existing(tmp_path):
    ws = _loaded(tmp_path)
    assert ws.find_or_open_tab(tmp_path / "css" / "splash.css", "other") == 2
    extra = tmp_path / "extra.css"
    extra.write_text("p {}", encoding="utf-8")
    index = ws.find_or_open_tab(extra, "extra.css")
    assert index == len(ws.tabs) - 1
    assert ws.tabs[index].content == "p {}"
    assert ws.find_or_open_tab(extra, "extra.css") == index


def test_close_tab_adjusts_active(tmp_path):
    ws = _loaded(tmp_path)
    ws.active_tab = 2
    ws.close_tab(2)
    assert len(ws.tabs) == 2
    assert ws.active_tab == 1


def test_close_json_tab_refused(tmp_path):
    ws = _loaded(tmp_path)
    with pytest.raises(ValueError):
        ws.close_tab(0)
    assert len(ws.tabs) == 3


def test_find_css_buffer_falls_back_to_first(tmp_path):
    ws = _loaded(tmp_path)
    css_map = {"zz": "./css/splash.css", "aa": "./css/main.css"}
    assert ws.find_css_buffer(css_map, "missing") == MAIN_CSS
    assert ws.find_css_buffer(css_map, "zz") == SPLASH_CSS
    assert ws.find_css_buffer({}, "main") is None


def test_main_css_vars_follow_editor_text(tmp_path):
    ws = _loaded(tmp_path)
    assert ws.main_css_vars().colors == parse_css_vars(MAIN_CSS).colors
    edited = ":root {\n  --text: #00ff00;\n}\n"
    ws.edit_tab(1, edited)
    assert ws.main_css_vars().get("--text", (0.0, 0.0, 0.0, 0.0)) == parse_hex("#00ff00")


def test_splash_css_vars_fall_back_to_main(tmp_path):
    ws = _loaded(tmp_path)
    colors = ws.splash_css_vars().colors
    assert colors
    assert colors == ws.main_css_vars().colors
    own = ":root {\n  --text: #0000ff;\n}\n"
    ws.edit_tab(2, own)
    assert ws.splash_css_vars().colors == parse_css_vars(own).colors


def test_css_vars_empty_without_theme():
    assert Workspace().main_css_vars().colors == {}
    assert Workspace().splash_css_vars().colors == {}


def test_background_path(tmp_path):
    ws = _loaded(tmp_path)
    assert ws.background_path(ws.theme.main.backgrounds, "main") == (
        tmp_path / "backgrounds" / "bg_main.png"
    )
    assert ws.background_path({"b": "x.png", "a": "y.png"}, "missing") == tmp_path / "y.png"
    assert ws.background_path({}, "main") is None
    assert Workspace().background_path({"main": "x.png"}, "main") is None