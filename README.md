# themeforge

themeforge is a small editor for launcher themes. A theme is a `theme.json`
file plus the CSS files and background images it refers to. themeforge loads
the theme, opens its CSS files as editable tabs, reads the colour variables
out of each stylesheet's `:root { ... }` block and works out where things
would be drawn on the main and splash screens.

## Installing

```
pip install .
```

The package has no runtime dependencies beyond the standard library. To run
the test suite:

```
pip install ".[test]"
pytest
```

## The theme format

```json
{
    "main": {
        "backgrounds": {"main": "./backgrounds/bg_main.png"},
        "buttons": {"play": "Play", "settings": "Settings"},
        "css": {"main": "./css/main.css"},
        "layout": {"play_button_align": "stretch", "sidebar_position": "left"}
    },
    "name": "NewTheme",
    "splash": {
        "backgrounds": {"splash": "./backgrounds/bg_splash.png"},
        "css": {"splash": "./css/splash.css"},
        "texts": ["Welcome!", "Loading..."]
    },
    "version": "1.0.0"
}
```

`author` and `description` are optional and are left out when empty, as is
the `layout` block when neither of its fields is set. Paths are relative to
the directory that holds `theme.json`. Themes are written with sorted keys and
four-space indentation.

## Command line

```
themeforge [THEME]
```

starts the interactive editor, opening `THEME` (a `theme.json`) first if it is
given. `themeforge --help` lists the options. The editor reads one command per
line from standard input:

| Command | What it does |
| --- | --- |
| `new` | start the default starter theme |
| `open [PATH]` | open a `theme.json` (asks for the path if none is given) |
| `save` | save `theme.json` and every changed CSS tab; asks for a path if the theme has none |
| `saveas [PATH]` | save under a new path (default `theme.json`) |
| `outline` | print the theme outline and number its stylesheets |
| `tabs` | list the editor tabs; `>` marks the active one, `*` a changed one |
| `show N` | print the text of tab N |
| `edit N` | replace the text of tab N with the lines that follow, up to a line holding only `.` |
| `close N` | close tab N (tab 0, `theme.json`, cannot be closed) |
| `css N` | open stylesheet N of the outline in a tab |
| `preview [main\|splash]` | describe the preview: background path, colours, button positions, watermark or current splash text |
| `help` | list the commands |
| `exit`, `quit` | leave the editor |

Status messages such as `[Saved: theme.json]` are printed when they change.
The preview is laid out on a 400 × 600 area; the splash text shown changes
every two seconds of time since the editor started.

## Using the library

```python
from themeforge.theme import Theme
from themeforge.css import parse_css_vars

theme = Theme.create_default()
theme.save_as("mytheme/theme.json")

loaded = Theme.load("mytheme/theme.json")
print(loaded.to_json_string())

colours = parse_css_vars(":root {\n  --text: #d9d9e6;\n}")
print(colours.get("--text", (1.0, 1.0, 1.0, 1.0)))
```

- `themeforge.theme` — `Theme` with its `ThemeMain`, `ThemeLayout` and
  `ThemeSplash` sections. `Theme.load`, `save`, `save_as` and
  `from_json_string` raise `ThemeError` when a theme cannot be read, parsed
  or written; `to_dict` and `update_from_dict` convert to and from plain
  dictionaries. An invalid document leaves the theme unchanged.
- `themeforge.css` — `parse_css_vars` collects `--name: #rrggbb` declarations
  from the first `:root` block into a `CssVars`, whose colours are RGBA
  tuples of floats. `parse_hex` turns `#rrggbb` into such a tuple.
- `themeforge.workspace` — `Workspace` keeps the open theme together with
  its `EditorTab`s: `theme.json` is always the first tab and each CSS file
  the theme lists gets one tab. `Workspace.save` updates the theme from the
  JSON tab (keeping it as it was if that text is invalid), writes the tab
  back and writes every changed CSS tab, creating directories as needed.
  `main_css_vars` and `splash_css_vars` read colours from the current editor
  text; the splash falls back to the main stylesheet when it declares none.
- `themeforge.outline` — `project_outline` builds the tree of
  `OutlineNode`s for a theme, and `css_entries` lists its stylesheets.
- `themeforge.preview` — `button_layout` places the main-screen buttons,
  `splash_text_index` picks the splash text for a moment in time,
  `centered_position` centres text, and `watermark_text` gives the
  name-and-version line.
- `themeforge.app` — `ThemeEditorApp`, the interactive editor, and `main`.

## What it does not do

themeforge works in a terminal only: it opens no window, draws nothing and
shows no file dialogs. Background images are not loaded or displayed; the
preview reports their paths and the positions and colours things would have.
There is no plugin support.