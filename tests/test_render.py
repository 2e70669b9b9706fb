import matplotlib
from matplotlib.path import Path as MplPath

from pairlink.render import curve_path, render_snapshot
from pairlink.session import Session

matplotlib.use("Agg")

_PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_curve_path_uses_midpoint_quadratics():
    path = curve_path([(0.0, 0.0), (10.0, 10.0), (20.0, 0.0)])

    assert list(path.codes) == [MplPath.MOVETO, MplPath.CURVE3, MplPath.CURVE3, MplPath.LINETO]
    assert path.vertices.tolist() == [[0.0, 0.0], [10.0, 10.0], [15.0, 5.0], [20.0, 0.0]]


def test_curve_path_needs_two_points():
    assert curve_path([(1.0, 1.0)]) is None
    straight = curve_path([(0.0, 0.0), (5.0, 5.0)])
    assert list(straight.codes) == [MplPath.MOVETO, MplPath.LINETO]


def test_render_snapshot_writes_png(tmp_path, tokens):
    session = Session.from_tokens(tokens)
    session.pointer_down(50, 50)
    session.pointer_move(150, 60)
    session.pointer_up(250, 50)
    session.pointer_down(50, 150)
    session.pointer_move(120, 170)

    out = tmp_path / "boards" / "board.png"
    render_snapshot(session.snapshot(), out)

    assert out.exists()
    assert out.read_bytes()[:8] == _PNG_MAGIC
