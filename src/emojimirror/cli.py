"""CLI for emojimirror: ``emojimirror classify``, ``calibrate`` and ``thresholds``.

Frames are replayed from JSONL files, one frame per line: an object mapping
channel names to scores, a list of ``{"categoryName", "score"}`` entries as
the landmarker reports them, or ``null`` for a frame without a face.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from emojimirror.types import BlendshapeVector

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emojimirror",
        description="Classify facial blendshape frames into emoji expressions",
    )
    sub = parser.add_subparsers(dest="command")

    # emojimirror classify
    cls_p = sub.add_parser("classify", help="Classify frames from a JSONL file")
    cls_p.add_argument("frames", help="JSONL file with one blendshape frame per line")
    cls_p.add_argument(
        "--baseline", "-b",
        default=None,
        help="Baseline JSON file written by `emojimirror calibrate`",
    )
    cls_p.add_argument(
        "--calibrate-at",
        type=int,
        default=None,
        help="Calibrate from frame N before classifying it",
    )
    cls_p.add_argument(
        "--config", "-c",
        default=None,
        help="YAML file with thresholds / min_score",
    )
    cls_p.add_argument(
        "--scores",
        action="store_true",
        help="Also print per-category scores",
    )
    cls_p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    # emojimirror calibrate
    cal_p = sub.add_parser("calibrate", help="Save one frame as a baseline")
    cal_p.add_argument("frames", help="JSONL file with one blendshape frame per line")
    cal_p.add_argument(
        "-o", "--output",
        required=True,
        help="Output baseline JSON path",
    )
    cal_p.add_argument(
        "--frame",
        type=int,
        default=0,
        help="Index of the rest-face frame (default: 0)",
    )
    cal_p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    # emojimirror thresholds
    thr_p = sub.add_parser("thresholds", help="Show the effective classifier configuration")
    thr_p.add_argument(
        "--config", "-c",
        default=None,
        help="YAML file with thresholds / min_score",
    )

    return parser


def load_frames(path: str) -> List[Optional[BlendshapeVector]]:
    """Read blendshape frames from a JSONL file.

    Blank lines are skipped. Raises FileNotFoundError for a missing file and
    ValueError for a line that is not valid JSON.
    """
    from emojimirror.blendshapes import blend_map

    frames: List[Optional[BlendshapeVector]] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                item = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{lineno}: invalid JSON ({e.msg})") from e

            if item is None:
                frames.append(None)
                continue
            if not isinstance(item, (dict, list)):
                raise ValueError(f"{path}:{lineno}: expected an object, a list or null")

            try:
                if isinstance(item, dict):
                    frames.append({str(k): float(v) for k, v in item.items() if v is not None})
                else:
                    frames.append(blend_map(item))
            except (TypeError, ValueError) as e:
                raise ValueError(f"{path}:{lineno}: invalid blendshape score ({e})") from e
    return frames


def _load_config(path: Optional[str]):
    from emojimirror.config import ClassifierConfig

    if path is None:
        return ClassifierConfig()
    return ClassifierConfig.from_yaml(path)


def _cmd_classify(args: argparse.Namespace) -> None:
    """Handle ``emojimirror classify``."""
    from emojimirror.analyzer import EmojiExpressionAnalyzer
    from emojimirror.baseline import BaselineStore
    from emojimirror.classifier import ExpressionClassifier
    from emojimirror.persistence import load_baseline

    frames = load_frames(args.frames)
    store = load_baseline(args.baseline) if args.baseline else BaselineStore()
    analyzer = EmojiExpressionAnalyzer(
        store=store,
        classifier=ExpressionClassifier(_load_config(args.config)),
    )

    for frame_id, blendshapes in enumerate(frames):
        if args.calibrate_at == frame_id:
            store.calibrate(blendshapes)

        obs = analyzer.observe(blendshapes, frame_id=frame_id)
        line = f"{frame_id}\t{obs.data.category.value}\t{obs.data.glyph}"
        if args.scores:
            line += "\t" + " ".join(
                f"{cat.value}={value:.3f}" for cat, value in obs.data.scores.items()
            )
        print(line)

    print(f"\nDone: {len(frames)} frames, calibrated: {store.is_calibrated}")


def _cmd_calibrate(args: argparse.Namespace) -> None:
    """Handle ``emojimirror calibrate``."""
    from emojimirror.baseline import BaselineStore
    from emojimirror.persistence import save_baseline

    frames = load_frames(args.frames)
    if not 0 <= args.frame < len(frames):
        raise ValueError(f"Frame {args.frame} out of range ({len(frames)} frames)")

    blendshapes = frames[args.frame]
    if blendshapes is None:
        raise ValueError(f"Frame {args.frame} has no face; nothing to calibrate")

    store = BaselineStore()
    store.calibrate(blendshapes)
    save_baseline(store, args.output)
    print(f"Saved baseline ({len(blendshapes)} channels) to {args.output}")


def _cmd_thresholds(args: argparse.Namespace) -> None:
    """Handle ``emojimirror thresholds``."""
    config = _load_config(args.config)
    for name, value in config.thresholds.items():
        print(f"  {name:10s} {value:.3f}")
    print(f"  {'min_score':10s} {config.min_score:.3f}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``emojimirror`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "classify": _cmd_classify,
        "calibrate": _cmd_calibrate,
        "thresholds": _cmd_thresholds,
    }
    try:
        handlers[args.command](args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
