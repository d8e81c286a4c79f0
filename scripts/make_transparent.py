from __future__ import annotations

import argparse
import sys
from pathlib import Path

from alphacut.core.config import get_settings
from alphacut.domain.enums import SegmentationMode
from alphacut.services.transparency import make_transparent


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Remove a light background and save a transparent PNG.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SegmentationMode],
        default=None,
        help="segment (border flood fill + neighbor density) or flatten (every near-white pixel)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    mode = SegmentationMode(args.mode) if args.mode else settings.mode
    try:
        outcome = make_transparent(args.input.read_bytes(), mode, settings.max_pixels)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    args.output.write_bytes(outcome.png)
    print(f"Cleared {outcome.cleared} of {outcome.width * outcome.height} pixels, saved {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
