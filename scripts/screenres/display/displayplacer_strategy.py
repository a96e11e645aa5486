"""macOS displays via displayplacer (https://github.com/jakehilborn/displayplacer)."""

import re
from typing import List, Optional

from .config import DisplayConfig
from .models import DisplayMode, ModeCatalog
from .strategies import CommandConfigurator, CommandEnumerator

_MODE_RE = re.compile(r"^\s*mode (\d+): res:(\d+)x(\d+) hz:(\d+)(.*)$")


class DisplayplacerEnumerator(CommandEnumerator):
    """Modes keep the order displayplacer lists them in.

    ``res`` is the logical size; ``scaling:on`` marks a 2x backed mode.
    """

    query_command = (DisplayConfig.DISPLAYPLACER_BIN, "list")

    def parse(self, output: str) -> List[ModeCatalog]:
        catalogs: List[ModeCatalog] = []

        for block in output.split('\n\n'):
            if 'Persistent screen id:' not in block:
                continue

            display_id = ""
            modes: List[DisplayMode] = []
            live: Optional[DisplayMode] = None

            for line in block.strip().split('\n'):
                if line.startswith('Persistent screen id:'):
                    display_id = line.split(': ', 1)[1].strip()
                    continue

                mode_line = _MODE_RE.match(line)
                if not mode_line:
                    continue

                mode_num, width, height, hertz, extra = mode_line.groups()
                mode = DisplayMode(
                    width=int(width),
                    height=int(height),
                    scale=2 if 'scaling:on' in extra else 1,
                    frequency=int(hertz),
                    mode_id=mode_num,
                    refresh_rate=float(hertz),
                )
                modes.append(mode)
                if '<-- current mode' in extra:
                    live = mode

            catalogs.append(ModeCatalog.from_live_mode(display_id, modes, live))

        return catalogs


class DisplayplacerConfigurator(CommandConfigurator):
    def command_for(self, catalog: ModeCatalog, mode: DisplayMode) -> List[str]:
        return [DisplayConfig.DISPLAYPLACER_BIN, f"id:{catalog.display_id} mode:{mode.mode_id}"]
