"""Runtime configuration defaults for logging."""

from __future__ import annotations

LOG_PATH = "/tmp/menu-browser-debug.log"
LOG_LEVEL = "DEBUG"

LOG_PATH_ENV = "MENU_BROWSER_LOG_PATH"
LOG_LEVEL_ENV = "MENU_BROWSER_LOG_LEVEL"
