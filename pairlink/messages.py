"""Player-facing text for pointer results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .session import PointerResult

TRANSIENT_MESSAGE_SECONDS = 2.0

INTERSECTION_MESSAGE = "Lines cannot intersect! Try again."
COMPLETE_MESSAGE = "Congratulations! You completed the puzzle!"


@dataclass(frozen=True)
class ShellMessage:
    text: str
    duration: Optional[float]  # None keeps the message until the next session


def message_for(result: PointerResult) -> Optional[ShellMessage]:
    if result.kind == "rejected" and result.reason == "intersects-existing":
        return ShellMessage(INTERSECTION_MESSAGE, TRANSIENT_MESSAGE_SECONDS)
    if result.kind == "puzzle-complete":
        return ShellMessage(COMPLETE_MESSAGE, None)
    return None
