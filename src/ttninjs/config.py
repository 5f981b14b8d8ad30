"""Codec configuration read from the environment.

Fails closed: a set but invalid value raises CodecConfigError, it never
falls back to the default.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

TTNINJS_MAX_DEPTH_ENV = "TTNINJS_MAX_DEPTH"

# Levels of associations/assignments below the top-level document
DEFAULT_MAX_DEPTH = 32
# Deeper trees exceed pydantic's recursion guard on validation or serialization
MAX_DEPTH_LIMIT = 64


class CodecConfigError(Exception):
    """Raised when codec configuration in the environment is invalid."""

    pass


def get_max_depth_from_env() -> int:
    """Get the maximum embedding depth from the environment.

    Returns:
        The configured depth, or DEFAULT_MAX_DEPTH when the variable is unset
        or empty.

    Raises:
        CodecConfigError: If the value is not an integer between 1 and
            MAX_DEPTH_LIMIT.
    """
    raw = os.environ.get(TTNINJS_MAX_DEPTH_ENV, "").strip()
    if not raw:
        return DEFAULT_MAX_DEPTH

    try:
        depth = int(raw)
    except ValueError as e:
        raise CodecConfigError(
            f"{TTNINJS_MAX_DEPTH_ENV} must be a positive integer, got {raw!r}"
        ) from e

    if depth < 1:
        raise CodecConfigError(f"{TTNINJS_MAX_DEPTH_ENV} must be at least 1, got {depth}")
    if depth > MAX_DEPTH_LIMIT:
        raise CodecConfigError(
            f"{TTNINJS_MAX_DEPTH_ENV} must be at most {MAX_DEPTH_LIMIT}, got {depth}"
        )

    if depth != DEFAULT_MAX_DEPTH:
        logger.debug("Using %s=%d", TTNINJS_MAX_DEPTH_ENV, depth)
    return depth


def resolve_max_depth(max_depth: int | None = None) -> int:
    """Return the embedding depth limit to enforce.

    An explicit value is capped at MAX_DEPTH_LIMIT; None reads the environment.
    """
    if max_depth is None:
        return get_max_depth_from_env()
    if max_depth > MAX_DEPTH_LIMIT:
        logger.debug("Capping max_depth=%d at %d", max_depth, MAX_DEPTH_LIMIT)
        return MAX_DEPTH_LIMIT
    return max_depth
