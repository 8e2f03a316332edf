"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be merged with deep_merge. The
merge functions create copies, so the original is never mutated.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "prompt": {
        "placeholder": "(no message)",
        "timestamp_len": 10,
        "show_elapsed": False,
        "timestamp_file": "",
        "prompt_char": "$",
        "root_prompt_char": "#",
        "two_line": True,
    },
    "ignore": {
        "file": "",
        "dirs": [],
    },
    "glyphs": {
        "dirty": "*",
        "tracked": "!",
        "untracked": "?",
        "staged": "+",
        "stashed": "$",
    },
    "colors": {
        "clean": "green",
        "dirty": "bright-yellow",
        "uno": "lime",
        "tracked": "bright-yellow",
        "untracked": "bright-red",
        "staged": "green",
        "stashed": "lime",
        "behind": "bright-red",
        "ahead": "bright-yellow",
        "even": "green",
        "user": "bright-green",
        "root": "bright-red",
        "cwd": "bright-cyan",
        "status": "green",
    },
    "logging": {
        "level": "warning",
        "format": "json",
        "file": "",
    },
}
