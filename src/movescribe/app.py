"""Command-line entry point: render one move in a notation style."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from movescribe.core.enums import Family, NotationStyle
from movescribe.core.errors import NotationError
from movescribe.core.types import VariantDescriptor
from movescribe.notation.models import ExtendedMoveInfo
from movescribe.notation.transcript import TranscriptRenderer
from movescribe.settings import NotationSettings

_LOGGER = logging.getLogger(__name__)

_VARIANTS: dict[str, Callable[[], VariantDescriptor]] = {
    "chess": VariantDescriptor.chess,
    "shogi": VariantDescriptor.shogi,
    "minishogi": VariantDescriptor.minishogi,
    "xiangqi": VariantDescriptor.xiangqi,
    "minixiangqi": VariantDescriptor.minixiangqi,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movescribe",
        description="Render a played move in a board-game notation.",
    )
    parser.add_argument("move", help="wire move, e.g. h2e2 or P@e5")
    parser.add_argument("position", help="serialized position after the move")
    parser.add_argument("--previous", "-p", default=None,
                        help="serialized position before the move")
    parser.add_argument("--san", default=None,
                        help="Western SAN of the move (san style only)")
    parser.add_argument("--style", "-s", default=None,
                        choices=[s.value for s in NotationStyle],
                        help="notation style (default: the variant family's)")
    parser.add_argument("--variant", default="chess", choices=sorted(_VARIANTS),
                        help="board variant preset")
    parser.add_argument("--family", default=None,
                        choices=[f.value for f in Family],
                        help="family for a custom board size")
    parser.add_argument("--width", type=int, default=None,
                        help="custom board width (with --height)")
    parser.add_argument("--height", type=int, default=None,
                        help="custom board height (with --width)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="enable debug logging")
    return parser


def _variant_from_args(args: argparse.Namespace) -> VariantDescriptor:
    preset = _VARIANTS[args.variant]()
    if args.width is None and args.height is None:
        return preset
    if args.width is None or args.height is None:
        raise ValueError("--width and --height must be given together")
    family = Family(args.family) if args.family else preset.family
    return VariantDescriptor(family, args.width, args.height)


def main(argv: list[str] | None = None) -> int:
    """Parse *argv*, print the notation token and return an exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        variant = _variant_from_args(args)
        settings = (
            NotationSettings(style=args.style)
            if args.style
            else NotationSettings.for_family(variant.family)
        )
        renderer = TranscriptRenderer(variant, settings)
        _LOGGER.debug("Rendering %s as %s on %s", args.move, settings.style, variant)
        token = renderer.render_move(
            ExtendedMoveInfo(
                move=args.move,
                resulting_position=args.position,
                previous_position=args.previous,
                san=args.san,
            )
        )
    except (NotationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
