"""X11 displays via xrandr."""

import re
from typing import List, Optional

from .config import DisplayConfig
from .models import DisplayMode, ModeCatalog
from .strategies import CommandConfigurator, CommandEnumerator

_OUTPUT_RE = re.compile(r"^(\S+) (connected|disconnected|unknown connection)\b")
_MODE_RE = re.compile(r"^\s+((\d+)x(\d+)(i?)\S*)\s+(.*)$")
_RATE_RE = re.compile(r"(\d+(?:\.\d+)?)(\*?)")


class XrandrEnumerator(CommandEnumerator):
    """Every refresh rate listed for a mode becomes its own ``DisplayMode``.

    xrandr has no notion of a backing scale factor, so all modes report 1x.
    Interlaced modes are listed but flagged as unusable for the desktop.
    """

    query_command = (DisplayConfig.XRANDR_BIN, "--query")

    def parse(self, output: str) -> List[ModeCatalog]:
        catalogs: List[ModeCatalog] = []
        name: Optional[str] = None
        modes: List[DisplayMode] = []
        live: Optional[DisplayMode] = None

        for line in output.split('\n'):
            header = _OUTPUT_RE.match(line)
            if header:
                if name is not None:
                    catalogs.append(ModeCatalog.from_live_mode(name, modes, live))
                name, modes, live = None, [], None
                if header.group(2) == 'connected':
                    name = header.group(1)
                continue

            if name is None:
                continue

            mode_line = _MODE_RE.match(line)
            if not mode_line:
                continue

            mode_name, width, height, interlaced, rates = mode_line.groups()
            for rate, marker in _RATE_RE.findall(rates):
                refresh_rate = float(rate)
                mode = DisplayMode(
                    width=int(width),
                    height=int(height),
                    scale=1,
                    frequency=int(refresh_rate),
                    mode_id=mode_name,
                    refresh_rate=refresh_rate,
                    usable=not interlaced,
                )
                modes.append(mode)
                if marker:
                    live = mode

        if name is not None:
            catalogs.append(ModeCatalog.from_live_mode(name, modes, live))

        self.logger.debug(f"Connected outputs: {', '.join(c.display_id for c in catalogs) or 'none'}")
        return catalogs


class XrandrConfigurator(CommandConfigurator):
    def command_for(self, catalog: ModeCatalog, mode: DisplayMode) -> List[str]:
        cmd = [DisplayConfig.XRANDR_BIN, "--output", catalog.display_id, "--mode", mode.mode_id]
        if mode.refresh_rate is not None:
            cmd += ["--rate", f"{mode.refresh_rate:.2f}"]
        return cmd
