"""Rate limited logging for repeated dataset problems."""

from __future__ import annotations

import logging
import time

__all__ = ["warn_once", "reset_warnings"]

_LAST: dict[str, float] = {}
_MAX_CODES = 512


def warn_once(
    logger: logging.Logger, code: str, message: str, *args: object, window: float = 300
) -> bool:
    """Log ``message`` at warning level at most once per ``window`` seconds.

    ``code`` identifies the problem, e.g. ``"invalid_crop:tomato"``, and is
    prefixed to the message. Returns ``True`` when the warning was emitted.
    The cache is capped; the oldest code is dropped when it fills up.
    """

    now = time.monotonic()
    last = _LAST.get(code)
    if last is not None and now - last <= window:
        return False
    if last is None and len(_LAST) >= _MAX_CODES:
        _LAST.pop(min(_LAST, key=_LAST.__getitem__), None)
    _LAST[code] = now
    logger.warning("%s: " + message, code, *args)
    return True


def reset_warnings() -> None:
    """Forget previously emitted warning codes."""
    _LAST.clear()
