from dataclasses import dataclass, field
from typing import Optional, Tuple

from .config import DisplayConfig


@dataclass(frozen=True)
class ResolvedRequest:
    display_index: int = 0
    width: int = 0
    height: Optional[int] = None
    scale: Optional[int] = None

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0

    def __str__(self) -> str:
        height = self.height if self.height is not None else "*"
        scale = f"{self.scale}x" if self.scale is not None else "*"
        return f"{self.width} x {height} @ {scale}"


@dataclass(frozen=True)
class DisplayMode:
    width: int
    height: int
    scale: int
    frequency: int
    mode_id: str = ""
    refresh_rate: Optional[float] = None
    usable: bool = True

    def format(self, leading: str = "") -> str:
        return leading + DisplayConfig.MODE_LINE_FORMAT % (
            self.width, self.height, self.scale, self.frequency
        )

    def __str__(self) -> str:
        return f"{self.width}x{self.height}@{self.scale}x@{self.frequency}Hz"


@dataclass(frozen=True)
class ModeCatalog:
    """Snapshot of one display's modes, in the order the display system reports them."""

    display_id: str
    modes: Tuple[DisplayMode, ...] = field(default_factory=tuple)
    current_index: Optional[int] = None

    @classmethod
    def from_live_mode(cls, display_id: str, modes, live_mode: Optional[DisplayMode]) -> "ModeCatalog":
        modes = tuple(modes)
        current_index = None
        if live_mode is not None and live_mode in modes:
            current_index = modes.index(live_mode)
        return cls(display_id=display_id, modes=modes, current_index=current_index)

    @property
    def current_mode(self) -> Optional[DisplayMode]:
        if self.current_index is None:
            return None
        return self.modes[self.current_index]

    def __len__(self) -> int:
        return len(self.modes)
