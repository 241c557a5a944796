"""Translate raw input events into direction intents."""

from __future__ import annotations

from classic_snake.snake import Direction

_NAME_MAP: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "arrowup": Direction.UP,
    "arrowdown": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def direction_from_name(name: str) -> Direction | None:
    """Map a direction or key name to a :class:`Direction`.

    Unknown names return ``None`` so callers can drop them silently.
    """
    if not isinstance(name, str):
        return None
    return _NAME_MAP.get(name.strip().lower())


def direction_from_swipe(
    dx: float, dy: float, min_distance: float = 0.0,
) -> Direction | None:
    """Map a swipe delta in screen space to a :class:`Direction`.

    The dominant axis wins; screen ``y`` grows downward. Swipes no longer
    than *min_distance* along the dominant axis return ``None``.
    """
    if abs(dx) > abs(dy):
        if abs(dx) <= min_distance:
            return None
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    if abs(dy) <= min_distance or dy == 0:
        return None
    return Direction.DOWN if dy > 0 else Direction.UP
