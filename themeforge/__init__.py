"""Editor and previewer for launcher themes: theme.json model, CSS colour
variables, editor workspace, outline, preview geometry and a terminal editor."""

__version__ = "0.1.0"
__all__ = ["__version__"]