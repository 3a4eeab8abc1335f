"""Project configuration settings.

Values that depend on the environment are read through small helpers so that
tests can monkeypatch the environment after import.
"""

from pathlib import Path
import os

# Password store
DEFAULT_STORE_DIR = Path.home() / ".password-store"
SECRET_EXTENSION = ".gpg"
PASS_COMMAND = ("pass", "show")

# Clipboard
WAYLAND_CLIPBOARD_COMMAND = ("wl-copy",)
X11_CLIPBOARD_COMMAND = ("xclip", "-selection", "clipboard")

# UI
APP_TITLE = "passpick"
THEME = "tokyo-night"
INPUT_PLACEHOLDER = "Search password"
MAX_VISIBLE_ROWS = 12

# Logging
LOG_LEVEL = os.environ.get("PASSPICK_LOG_LEVEL", "WARNING").upper()
_cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
LOG_FILE = Path(os.environ.get("PASSPICK_LOG_FILE", _cache_home / "passpick" / "passpick.log"))


def store_dir() -> Path:
	env_dir = os.environ.get("PASSWORD_STORE_DIR")
	return Path(env_dir).expanduser() if env_dir else DEFAULT_STORE_DIR


def clipboard_command() -> tuple:
	"""Pick the clipboard program for the current display session."""
	override = os.environ.get("PASSPICK_CLIPBOARD", "").split()
	if override:
		return tuple(override)
	if os.environ.get("WAYLAND_DISPLAY") or os.environ.get("XDG_SESSION_TYPE") == "wayland":
		return WAYLAND_CLIPBOARD_COMMAND
	return X11_CLIPBOARD_COMMAND

__all__ = [
	'DEFAULT_STORE_DIR','SECRET_EXTENSION','PASS_COMMAND','WAYLAND_CLIPBOARD_COMMAND','X11_CLIPBOARD_COMMAND',
	'APP_TITLE','THEME','INPUT_PLACEHOLDER','MAX_VISIBLE_ROWS','LOG_LEVEL','LOG_FILE','store_dir','clipboard_command'
]
