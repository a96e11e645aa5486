import subprocess
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from screenres.logging import Logger
from .errors import CatalogUnavailable, ConfigurationFailed, DisplayNotFound
from .models import DisplayMode, ModeCatalog


def run_command(cmd: List[str]) -> str:
    result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    return result.stdout


class DisplayEnumerator(ABC):
    """Lists the connected displays and the modes each one supports."""

    def __init__(self):
        self.logger = Logger(self.__class__.__name__)

    @abstractmethod
    def catalogs(self) -> List[ModeCatalog]:
        """Return a fresh snapshot for every connected display, in display order."""

    def displays(self) -> List[str]:
        return [catalog.display_id for catalog in self.catalogs()]

    def catalog(self, display_index: int) -> ModeCatalog:
        catalogs = self.catalogs()
        if not 0 <= display_index < len(catalogs):
            raise DisplayNotFound(display_index, len(catalogs))

        catalog = catalogs[display_index]
        if not catalog.modes:
            raise CatalogUnavailable(f"Unable to get display modes for {catalog.display_id}")
        return catalog


class CommandEnumerator(DisplayEnumerator):
    """Enumerator that parses the output of one external query command."""

    query_command: Tuple[str, ...] = ()

    def catalogs(self) -> List[ModeCatalog]:
        try:
            output = run_command(list(self.query_command))
        except FileNotFoundError:
            raise CatalogUnavailable(f"{self.query_command[0]} not found")
        except subprocess.CalledProcessError as e:
            raise CatalogUnavailable(f"{' '.join(self.query_command)} failed: {e.stderr or e}")

        catalogs = self.parse(output)
        self.logger.debug(f"Found {len(catalogs)} display(s)")
        return catalogs

    @abstractmethod
    def parse(self, output: str) -> List[ModeCatalog]:
        pass


class DisplayConfigurator(ABC):
    """Applies one mode inside a begin / configure / commit-or-cancel transaction."""

    def __init__(self):
        self.logger = Logger(self.__class__.__name__)

    def is_usable(self, mode: DisplayMode) -> bool:
        return mode.usable

    @abstractmethod
    def begin(self, catalog: ModeCatalog) -> None:
        pass

    @abstractmethod
    def configure(self, mode: DisplayMode) -> None:
        pass

    @abstractmethod
    def commit(self) -> None:
        """Make the configured mode live; raise ``ConfigurationFailed`` on error."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop the transaction, restoring the previous mode if anything was applied."""


class CommandConfigurator(DisplayConfigurator):
    """Configurator driven by a single external command per mode change."""

    def __init__(self):
        super().__init__()
        self._catalog: Optional[ModeCatalog] = None
        self._pending: Optional[List[str]] = None
        self._attempted = False

    @abstractmethod
    def command_for(self, catalog: ModeCatalog, mode: DisplayMode) -> List[str]:
        pass

    def begin(self, catalog: ModeCatalog) -> None:
        self._catalog = catalog
        self._pending = None
        self._attempted = False

    def configure(self, mode: DisplayMode) -> None:
        if self._catalog is None:
            raise ConfigurationFailed("configure() called outside of a transaction")
        self._pending = self.command_for(self._catalog, mode)

    def commit(self) -> None:
        if self._pending is None:
            raise ConfigurationFailed("Nothing to commit")

        self._attempted = True
        self.logger.debug(f"Running: {' '.join(self._pending)}")
        try:
            run_command(self._pending)
        except FileNotFoundError:
            raise ConfigurationFailed(f"{self._pending[0]} not found")
        except subprocess.CalledProcessError as e:
            raise ConfigurationFailed(f"{' '.join(self._pending)} failed: {(e.stderr or '').strip() or e}")
        self._end()

    def cancel(self) -> None:
        previous = self._catalog.current_mode if self._catalog is not None else None
        if self._attempted and previous is not None:
            restore = self.command_for(self._catalog, previous)
            self.logger.info(f"Restoring previous mode {previous}")
            try:
                run_command(restore)
            except (FileNotFoundError, subprocess.CalledProcessError) as e:
                self.logger.error(f"Failed to restore previous mode: {e}")
        self._end()

    def _end(self) -> None:
        self._catalog = None
        self._pending = None
        self._attempted = False
