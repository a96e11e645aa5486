"""Display configuration manager - main module."""

from typing import Iterable, List, Tuple

from screenres.logging import Logger
from .errors import ConfigurationFailed, DegenerateRequest, ModeNotAvailable, ModeRejected
from .matcher import find_mode_index
from .models import ModeCatalog, ResolvedRequest
from .resolver import resolve
from .strategies import DisplayConfigurator, DisplayEnumerator

logger = Logger(__name__)


class DisplayManager:
    def __init__(self, enumerator: DisplayEnumerator, configurator: DisplayConfigurator):
        self.logger = logger
        self.enumerator = enumerator
        self.configurator = configurator

    def display_catalogs(self) -> List[ModeCatalog]:
        return self.enumerator.catalogs()

    def catalog(self, display_index: int) -> ModeCatalog:
        return self.enumerator.catalog(display_index)

    def select(self, request: ResolvedRequest) -> Tuple[ModeCatalog, int]:
        """Return ``(catalog, mode_index)`` for ``request`` or raise."""
        if request.is_degenerate:
            raise DegenerateRequest()

        catalog = self.enumerator.catalog(request.display_index)
        index = find_mode_index(request, catalog.modes)
        if index is None:
            raise ModeNotAvailable(request)
        return catalog, index

    def set_mode(self, tokens: Iterable[str]) -> bool:
        """Resolve, match and apply. Returns False when the mode was already active."""
        request = resolve(tokens)
        catalog, index = self.select(request)
        return self.apply(catalog, index)

    def apply(self, catalog: ModeCatalog, index: int) -> bool:
        if index == catalog.current_index:
            self.logger.info(f"{catalog.modes[index]} is already active on {catalog.display_id}")
            return False

        mode = catalog.modes[index]
        if not self.configurator.is_usable(mode):
            raise ModeRejected(mode)

        self.logger.info(f"Setting display mode {mode} on {catalog.display_id}")
        self.configurator.begin(catalog)
        try:
            self.configurator.configure(mode)
            self.configurator.commit()
        except ConfigurationFailed:
            self.configurator.cancel()
            raise
        except Exception as e:
            self.configurator.cancel()
            raise ConfigurationFailed(f"Failed to set {mode} on {catalog.display_id}: {e}") from e
        return True
