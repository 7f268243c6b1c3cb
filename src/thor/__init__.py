"""thor: a small modal terminal text editor."""

__version__ = "0.2.0"

# Row store
from thor.buffer import Buffer
from thor.register import Register
from thor.row import Row

# Coordinate mapping
from thor.coords import TAB_STOP, char_to_render, expand_tabs, render_to_char

# Syntax highlighting
from thor.highlight import Highlight, highlight_line, is_separator, syntax_to_color
from thor.syntax import HLDB, SyntaxProfile, select_syntax

# Editor session
from thor.editor import Editor
from thor.keybindings import KeybindingsManager, Mode
from thor.render import Viewport
from thor.settings import EditorSettings, SettingsManager
from thor.status import StatusMessage

# Terminal
from thor.keys import KeyId, parse_key
from thor.terminal import ProcessTerminal, Terminal, TerminalError

__all__ = [
    "__version__",
    # Row store
    "Buffer",
    "Register",
    "Row",
    # Coordinate mapping
    "TAB_STOP",
    "char_to_render",
    "expand_tabs",
    "render_to_char",
    # Syntax highlighting
    "HLDB",
    "Highlight",
    "SyntaxProfile",
    "highlight_line",
    "is_separator",
    "select_syntax",
    "syntax_to_color",
    # Editor session
    "Editor",
    "EditorSettings",
    "KeybindingsManager",
    "Mode",
    "SettingsManager",
    "StatusMessage",
    "Viewport",
    # Terminal
    "KeyId",
    "ProcessTerminal",
    "Terminal",
    "TerminalError",
    "parse_key",
]
