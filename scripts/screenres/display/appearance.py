import subprocess
from abc import ABC, abstractmethod

from screenres.logging import Logger
from .config import DisplayConfig
from .errors import AppearanceError
from .strategies import run_command


class DarkModeToggle(ABC):
    def __init__(self):
        self.logger = Logger(self.__class__.__name__)

    @abstractmethod
    def toggle(self) -> str:
        """Flip the system appearance and return the new dark mode state ("true"/"false")."""

    def _run(self, cmd) -> str:
        try:
            return run_command(cmd).strip()
        except FileNotFoundError:
            raise AppearanceError(f"{cmd[0]} not found")
        except subprocess.CalledProcessError as e:
            raise AppearanceError(f"{' '.join(cmd)} failed: {(e.stderr or '').strip() or e}")


class GnomeDarkMode(DarkModeToggle):
    SCHEMA = "org.gnome.desktop.interface"
    KEY = "color-scheme"
    DARK = "prefer-dark"
    LIGHT = "default"

    def toggle(self) -> str:
        current = self._run([DisplayConfig.GSETTINGS_BIN, "get", self.SCHEMA, self.KEY]).strip("'")
        dark = current != self.DARK
        self._run([DisplayConfig.GSETTINGS_BIN, "set", self.SCHEMA, self.KEY, self.DARK if dark else self.LIGHT])
        self.logger.debug(f"{self.KEY}: {current} -> {self.DARK if dark else self.LIGHT}")
        return "true" if dark else "false"


class MacDarkMode(DarkModeToggle):
    SCRIPT = (
        'pref = Application("System Events").appearancePreferences\n'
        'pref.darkMode = !pref.darkMode()\n'
        'pref.darkMode()'
    )

    def toggle(self) -> str:
        return self._run([DisplayConfig.OSASCRIPT_BIN, "-l", "JavaScript", "-e", self.SCRIPT])
