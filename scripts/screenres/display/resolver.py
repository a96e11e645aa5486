"""Turn the positional arguments of the set command into a ``ResolvedRequest``.

Accepted shapes, where a leading display index may always be omitted::

    width                       -> display 0
    index width
    index width height          (third value > MAX_SCALE)
    index width scale           (third value <= MAX_SCALE)
    index width height scale    (height and scale in either order)

Tokens that are not integers are dropped without complaint. This shifts the
positions of the remaining values, so ``["0", "x", "800"]`` resolves the same
as ``["0", "800"]``. Callers that depend on strict positions should validate
the tokens first; the silent drop is most likely a latent defect.
"""

import re
from typing import Iterable, List, Optional

from screenres.logging import Logger
from .config import DisplayConfig
from .models import ResolvedRequest

logger = Logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> Optional[int]:
    if _INTEGER_RE.fullmatch(token):
        return int(token)
    return None


def to_values(tokens: Iterable[str]) -> List[int]:
    values = []
    for token in tokens:
        value = parse_int(token)
        if value is None:
            logger.debug(f"Dropping non-numeric argument: {token!r}")
            continue
        values.append(value)
    return values


def resolve(tokens: Iterable[str]) -> ResolvedRequest:
    values = to_values(tokens)

    if not values:
        return ResolvedRequest()

    if values[0] > DisplayConfig.MAX_DISPLAYS:
        logger.debug(f"{values[0]} exceeds {DisplayConfig.MAX_DISPLAYS}, assuming display 0")
        values.insert(0, 0)

    if len(values) < 2:
        return ResolvedRequest()

    display_index, width = values[0], values[1]
    height = scale = None

    if len(values) > 2:
        if values[2] > DisplayConfig.MAX_SCALE:
            height = values[2]
            if len(values) > 3:
                scale = values[3]
        else:
            scale = values[2]
            if len(values) > 3:
                height = values[3]

    request = ResolvedRequest(display_index=display_index, width=width, height=height, scale=scale)
    logger.debug(f"Resolved {values} to display {display_index}: {request}")
    return request
