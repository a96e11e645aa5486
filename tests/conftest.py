import pytest

from screenres.display.errors import ConfigurationFailed
from screenres.display.models import DisplayMode, ModeCatalog
from screenres.display.strategies import DisplayConfigurator, DisplayEnumerator


class FakeEnumerator(DisplayEnumerator):
    def __init__(self, catalogs):
        super().__init__()
        self._catalogs = list(catalogs)
        self.calls = 0

    def catalogs(self):
        self.calls += 1
        return list(self._catalogs)


class FakeConfigurator(DisplayConfigurator):
    def __init__(self, fail_commit=False):
        super().__init__()
        self.fail_commit = fail_commit
        self.events = []

    def begin(self, catalog):
        self.events.append(("begin", catalog.display_id))

    def configure(self, mode):
        self.events.append(("configure", mode))

    def commit(self):
        self.events.append(("commit",))
        if self.fail_commit:
            raise ConfigurationFailed("commit refused")

    def cancel(self):
        self.events.append(("cancel",))


def mode(width, height, scale=1, frequency=60, **kwargs):
    return DisplayMode(width=width, height=height, scale=scale, frequency=frequency, **kwargs)


@pytest.fixture
def modes():
    return (
        mode(1440, 900, 2),
        mode(1440, 900, 1),
        mode(1280, 800, 2),
        mode(1280, 800, 1),
        mode(800, 600, 1),
        mode(1920, 1200, 1, usable=False),
    )


@pytest.fixture
def catalog(modes):
    return ModeCatalog(display_id="eDP-1", modes=modes, current_index=0)


@pytest.fixture
def configurator():
    return FakeConfigurator()
