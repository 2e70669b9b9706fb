"""Matplotlib rendering of a :class:`~pairlink.session.SessionSnapshot`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, PathPatch
from matplotlib.path import Path as MplPath

from .session import SessionSnapshot
from .types import Point

logger = logging.getLogger(__name__)

CONNECTED_FILL = "#CCCCCC"
LINE_WIDTH = 3.0


def curve_path(points: Sequence[Point]) -> Optional[MplPath]:
    """Build a quadratic-curve path through ``points``.

    Every interior point is a control point and the curve passes through the
    midpoint to the next one; the last point is joined with a straight line.
    """

    if len(points) < 2:
        return None
    vertices: List[Tuple[float, float]] = [tuple(points[0])]
    codes = [MplPath.MOVETO]
    for idx in range(1, len(points) - 1):
        cx, cy = points[idx]
        nx, ny = points[idx + 1]
        vertices.extend([(cx, cy), ((cx + nx) / 2.0, (cy + ny) / 2.0)])
        codes.extend([MplPath.CURVE3, MplPath.CURVE3])
    vertices.append(tuple(points[-1]))
    codes.append(MplPath.LINETO)
    return MplPath(vertices, codes)


def render_snapshot(
    snapshot: SessionSnapshot,
    path: Optional[Union[str, Path]] = None,
    *,
    ax=None,
    dpi: int = 100,
):
    """Draw ``snapshot`` on ``ax`` (a new figure when omitted) and optionally save it."""

    owns_figure = ax is None
    if owns_figure:
        fig, ax = plt.subplots(figsize=(snapshot.width / dpi, snapshot.height / dpi), dpi=dpi)
    else:
        fig = ax.figure

    ax.set_xlim(0, snapshot.width)
    ax.set_ylim(snapshot.height, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.set_axis_off()

    for connection in snapshot.connections:
        curve = curve_path(connection.points)
        if curve is not None:
            ax.add_patch(
                PathPatch(curve, facecolor="none", edgecolor=connection.color, linewidth=LINE_WIDTH, zorder=1)
            )

    if snapshot.candidate_points and len(snapshot.candidate_points) >= 2:
        xs = [p[0] for p in snapshot.candidate_points]
        ys = [p[1] for p in snapshot.candidate_points]
        ax.plot(xs, ys, color=snapshot.candidate_color, linewidth=LINE_WIDTH, zorder=2)

    for token in snapshot.tokens:
        fill = CONNECTED_FILL if token.connected else token.color
        ax.add_patch(
            Circle(token.position, token.radius, facecolor=fill, edgecolor="#000", linewidth=2, zorder=3)
        )
        ax.text(
            token.position[0],
            token.position[1],
            str(token.value),
            ha="center",
            va="center",
            fontsize=12,
            fontweight="bold",
            color="#000",
            zorder=4,
        )

    if path is not None:
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output)
        logger.info("Rendered board to %s", output)
        if owns_figure:
            plt.close(fig)
    return fig
