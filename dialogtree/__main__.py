"""
Command line entry point.

    python -m dialogtree play cat.json
    python -m dialogtree demo puzzle --save puzzle.json
    python -m dialogtree convert puzzle.json puzzle.xml
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import colorama

from dialogtree.config import ConsoleConfig
from dialogtree.console import run_dialog
from dialogtree.core.errors import DialogError
from dialogtree.samples import SAMPLES
from dialogtree.serialization import DialogSerializer, supported_extensions

logger = logging.getLogger("dialogtree")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dialogtree",
        description="Play, build and convert branching dialog files.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="Play a dialog file in the terminal.")
    play.add_argument("path", help=f"Dialog file ({', '.join(supported_extensions())}).")
    play.add_argument("--line-type", default="DialogLine", help="Registered line payload type.")
    play.add_argument("--entry-type", default="EntryLabel", help="Registered entry payload type.")
    play.add_argument(
        "--time-scale",
        type=float,
        default=0.0,
        help="Pause after each line, scaled by the log of its length.",
    )

    demo = sub.add_parser("demo", help="Play or save a built-in sample dialog.")
    demo.add_argument("sample", choices=sorted(SAMPLES), nargs="?", default="puzzle")
    demo.add_argument("--save", dest="save_path", default=None, help="Write the sample instead of playing it.")

    convert = sub.add_parser("convert", help="Convert a dialog file to another format.")
    convert.add_argument("source")
    convert.add_argument("target")

    return p


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the command line.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    colorama.just_fix_windows_console()

    try:
        if args.command == "play":
            serializer = DialogSerializer(args.line_type, args.entry_type)
            dialog = serializer.load(args.path)
            run_dialog(dialog, ConsoleConfig(time_scale=args.time_scale))

        elif args.command == "demo":
            dialog = SAMPLES[args.sample]()
            if args.save_path:
                DialogSerializer().save(dialog, args.save_path)
                print(f"Saved {args.sample} -> {args.save_path}")
            else:
                run_dialog(dialog)

        elif args.command == "convert":
            serializer = DialogSerializer()
            serializer.save(serializer.load(args.source), args.target)
            print(f"Converted {args.source} -> {args.target}")

    except (DialogError, OSError, ValueError, EOFError) as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
