import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import matplotlib

from pairlink import ConfigurationError, PuzzleConfig, PuzzleGame, PointerResult
from pairlink.messages import message_for
from pairlink.render import render_snapshot

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _load_strokes(path: str) -> List[List[Sequence[float]]]:
    with open(path) as fin:
        data = json.load(fin)
    if not isinstance(data, list):
        raise ValueError(f"Stroke file {path} must contain a JSON list of strokes")
    strokes = []
    for idx, stroke in enumerate(data):
        if not isinstance(stroke, list) or not stroke:
            raise ValueError(f"Stroke {idx} must be a non-empty list of [x, y] points")
        strokes.append(stroke)
    return strokes


def _replay_stroke(game: PuzzleGame, stroke: Sequence[Sequence[float]]) -> PointerResult:
    x, y = stroke[0]
    down = game.pointer_down(x, y)
    if down.kind != "path-started":
        return down
    for x, y in stroke[1:-1]:
        game.pointer_move(x, y)
    x, y = stroke[-1]
    return game.pointer_up(x, y)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Generate and replay number-pair line puzzles")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for token placement")
    parser.add_argument("--width", type=float, default=600.0, help="Canvas width (default: 600)")
    parser.add_argument("--height", type=float, default=400.0, help="Canvas height (default: 400)")
    parser.add_argument("--pairs", type=int, default=None, help="Fix the number of pairs")
    parser.add_argument(
        "--strokes",
        help="JSON file with a list of strokes, each a list of [x, y] points",
    )
    parser.add_argument("--json-output", help="Write the final board snapshot as JSON")
    parser.add_argument("--png-output", help="Render the final board to a PNG file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    config = PuzzleConfig(width=args.width, height=args.height)
    game = PuzzleGame(config, seed=args.seed)
    try:
        snapshot = game.new_session(pair_count=args.pairs)
    except ConfigurationError as exc:
        logger.error("Configuration problem: %s", exc)
        raise SystemExit(2)

    print("Tokens:")
    for token in snapshot.tokens:
        x, y = token.position
        print(f"  #{token.id} value={token.value} at ({x:.1f}, {y:.1f}) color={token.color}")

    if args.strokes:
        strokes = _load_strokes(args.strokes)
        logger.info("Replaying %d stroke(s) from %s", len(strokes), args.strokes)
        for idx, stroke in enumerate(strokes):
            result = _replay_stroke(game, stroke)
            line = f"Stroke {idx}: {result.kind}"
            if result.reason:
                line += f" ({result.reason})"
            message = message_for(result)
            if message is not None:
                line += f" - {message.text}"
            print(line)

    snapshot = game.snapshot()
    connected = sum(1 for token in snapshot.tokens if token.connected) // 2
    print(f"Connected pairs: {connected}/{len(snapshot.tokens) // 2}")
    print(f"State: {snapshot.state}")

    if args.json_output:
        output_path = Path(args.json_output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(snapshot.to_dict(), indent=2), encoding="utf-8")
        print(f"Snapshot written to {output_path}")

    if args.png_output:
        matplotlib.use("Agg")
        render_snapshot(snapshot, args.png_output)
        print(f"Board rendered to {args.png_output}")


if __name__ == "__main__":
    main(sys.argv[1:])
