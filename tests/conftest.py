import pytest

from pairlink.types import Token

RADIUS = 20.0


def board_tokens():
    """Three pairs laid out in rows: value 1 at y=50, 2 at y=150, 3 at y=250."""

    layout = [
        (1, (50.0, 50.0)),
        (1, (250.0, 50.0)),
        (2, (50.0, 150.0)),
        (2, (250.0, 150.0)),
        (3, (50.0, 250.0)),
        (3, (250.0, 250.0)),
    ]
    colors = {1: "#FF5733", 2: "#33FF57", 3: "#3357FF"}
    return [
        Token(id=idx, value=value, position=pos, radius=RADIUS, color=colors[value])
        for idx, (value, pos) in enumerate(layout)
    ]


@pytest.fixture
def tokens():
    return board_tokens()
