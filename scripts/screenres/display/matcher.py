from typing import Optional, Sequence

from screenres.logging import Logger
from .models import DisplayMode, ResolvedRequest

logger = Logger(__name__)


def matches(request: ResolvedRequest, mode: DisplayMode) -> bool:
    """Width must be equal; height and scale only when the request sets them."""
    if mode.width != request.width:
        return False
    if request.height is not None and mode.height != request.height:
        return False
    if request.scale is not None and mode.scale != request.scale:
        return False
    return True


def find_mode_index(request: ResolvedRequest, modes: Sequence[DisplayMode]) -> Optional[int]:
    # First hit in catalog order wins, there is no secondary sort
    for index, mode in enumerate(modes):
        if matches(request, mode):
            logger.debug(f"{request} matched mode {index}: {mode}")
            return index
    logger.debug(f"{request} matched none of {len(modes)} mode(s)")
    return None
