from typing import Iterable

import shutil
from screenres.logging import Logger

logger = Logger(__name__)

INSTALL_HINTS = {
    "xrandr": "sudo pacman -S --needed xorg-xrandr  (Debian/Ubuntu: sudo apt-get install x11-xserver-utils)",
    "displayplacer": "brew install displayplacer",
    "gsettings": "sudo pacman -S --needed glib2  (Debian/Ubuntu: sudo apt-get install libglib2.0-bin)",
    "osascript": "ships with macOS",
}


class BinaryChecker:
    def __init__(self, bins: Iterable[str]):
        self.bins_to_check = list(bins)

    def check_exists(self, binary: str) -> bool:
        return shutil.which(binary) is not None

    def check_all(self) -> bool:
        missing = [b for b in self.bins_to_check if not self.check_exists(b)]

        if missing:
            logger.error("missing required binaries: %s", " ".join(missing))
            for b in missing:
                hint = INSTALL_HINTS.get(b)
                if hint:
                    logger.error("  %s: %s", b, hint)
            return False

        logger.debug("required binaries present: %s", " ".join(self.bins_to_check))
        return True
