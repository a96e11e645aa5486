import sys
from typing import List, NamedTuple, Optional

from .appearance import DarkModeToggle, GnomeDarkMode, MacDarkMode
from .config import DisplayConfig
from .displayplacer_strategy import DisplayplacerConfigurator, DisplayplacerEnumerator
from .strategies import DisplayConfigurator, DisplayEnumerator
from .xrandr_strategy import XrandrConfigurator, XrandrEnumerator


class Collaborators(NamedTuple):
    enumerator: DisplayEnumerator
    configurator: DisplayConfigurator
    appearance: DarkModeToggle
    display_bins: List[str]
    appearance_bins: List[str]


class CollaboratorFactory:
    """Factory that returns the display collaborators for a platform name."""

    _mapping = {
        "linux": (XrandrEnumerator, XrandrConfigurator, GnomeDarkMode,
                  [DisplayConfig.XRANDR_BIN], [DisplayConfig.GSETTINGS_BIN]),
        "darwin": (DisplayplacerEnumerator, DisplayplacerConfigurator, MacDarkMode,
                   [DisplayConfig.DISPLAYPLACER_BIN], [DisplayConfig.OSASCRIPT_BIN]),
    }

    @classmethod
    def get(cls, platform: Optional[str] = None) -> Collaborators:
        key = (platform or sys.platform).strip().lower()
        if key.startswith("linux"):
            key = "linux"
        entry = cls._mapping.get(key)
        if not entry:
            raise ValueError(f"Unsupported platform: {platform or sys.platform}")
        enumerator_cls, configurator_cls, appearance_cls, display_bins, appearance_bins = entry
        return Collaborators(
            enumerator=enumerator_cls(),
            configurator=configurator_cls(),
            appearance=appearance_cls(),
            display_bins=list(display_bins),
            appearance_bins=list(appearance_bins),
        )
