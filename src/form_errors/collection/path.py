"""Field path parsing.

A path is a single key (``"email"`` or ``0``), a dotted string
(``"user.roles.1"``) or a sequence of keys (``("user", "roles", 1)``).
All forms normalise to a tuple of string segments, so ``1`` and ``"1"``
address the same slot.
"""

from __future__ import annotations

from collections.abc import Sequence

PATH_SEPARATOR = "."

ErrorKey = str | int
ErrorPath = ErrorKey | Sequence[ErrorKey] | None


def to_segments(path: ErrorPath) -> tuple[str, ...]:
    """Normalise *path* into a tuple of string segments.

    ``None`` and empty sequences yield ``()``, which every query treats as
    "no match". The empty string is a real key and yields ``("",)``.
    """
    if path is None:
        return ()
    if isinstance(path, str):
        return tuple(path.split(PATH_SEPARATOR))
    if isinstance(path, int):
        return (str(path),)
    return tuple(str(key) for key in path)


def join_path(segments: Sequence[ErrorKey]) -> str:
    return PATH_SEPARATOR.join(str(key) for key in segments)
