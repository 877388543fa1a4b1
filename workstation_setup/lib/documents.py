"""Fixed documents written byte-for-byte."""

from __future__ import annotations

THEME_NAME = "dark_plus_transparent"

HELIX_CONFIG_TOML = """\
# Helix Configuration File

# Theme settings
theme = "dark_plus_transparent"

# Editor settings
[editor]
line-number = "relative"  # Show relative line numbers for easier navigation
bufferline = "multiple"   # Display multiple buffer tabs

# Cursor appearance
[editor.cursor-shape]
insert = "bar"            # Use a thin bar cursor in insert mode

# Keybindings for normal mode
[keys.normal]
esc = ["collapse_selection", "keep_primary_selection"]  # Clear selection but keep primary
C-e = ["scroll_down", "move_line_down"]                # Scroll and move cursor down
C-y = ["scroll_up", "move_line_up"]                    # Scroll and move cursor up

# Keybindings for insert mode
[keys.insert]
j = { k = "normal_mode" }  # Exit insert mode with 'jk'
"""

HELIX_THEME_TOML = """\
# Dark Plus Transparent Theme
inherits = "dark_plus"
"ui.background" = {}
"""


def pip_conf(index_url: str, trusted_host: str) -> str:
    return f"[global]\nindex-url = {index_url}\ntrusted-host = {trusted_host}\n"
