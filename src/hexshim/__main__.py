"""
Command line entry point for hexshim.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .core.dumper import HexDumper, NarrowHexDump, WideHexDump
from .core.errors import HexShimError
from .utils.hex_utils import get_byte_range, parse_hex_string
from .utils.highlight import highlight_dump

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""

    parser = argparse.ArgumentParser(
        prog="hexshim",
        description="hexshim - Render files or hex strings as hexadecimal dumps"
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        help="Files to dump, standard input if omitted"
    )
    parser.add_argument(
        "--hex",
        metavar="STRING",
        help="Dump the bytes of a hex string (e.g. \"DE AD BE EF\") instead of files"
    )
    parser.add_argument("-i", "--indent", type=int, default=0,
                        help="Spaces placed before each line")
    parser.add_argument("-w", "--width", type=int, default=HexDumper.DEFAULT_BYTES_PER_LINE,
                        help="Bytes shown on each line")
    parser.add_argument("--no-ascii", dest="show_ascii", action="store_false",
                        help="Omit the ASCII gutter")
    parser.add_argument("--wide", action="store_true",
                        help="Render with wide characters")
    parser.add_argument("-s", "--skip", type=int, default=0,
                        help="Skip this many bytes of each input")
    parser.add_argument("-n", "--length", type=int, default=-1,
                        help="Dump at most this many bytes of each input")
    parser.add_argument("--color", action="store_true",
                        help="Highlight the output for terminals")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug information to stderr")
    return parser


def read_inputs(args: argparse.Namespace) -> List[Tuple[str, bytes]]:
    """Collect (name, data) pairs from the hex string, files, or standard input."""

    if args.hex is not None:
        return [("<hex>", args.hex_data)]

    if not args.files:
        return [("<stdin>", sys.stdin.buffer.read())]

    inputs = []
    for filename in args.files:
        with open(filename, 'rb') as f:
            inputs.append((filename, f.read()))

    return inputs


def render(data: bytes, args: argparse.Namespace) -> str:
    """Render one input according to the parsed arguments."""

    data, length = get_byte_range(data, args.skip, args.length)
    dumper_class = WideHexDump if args.wide else NarrowHexDump

    with dumper_class(data, length, args.indent, args.width, args.show_ascii) as dumper:
        logger.debug("Rendered %d bytes into %d lines", length, dumper.line_count)
        text = dumper.text()

    if args.color:
        return highlight_dump(text)

    return text


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if args.hex is not None:
        args.hex_data = parse_hex_string(args.hex)
        if args.hex_data is None:
            parser.error(f"invalid hex string: {args.hex!r}")

    try:
        inputs = read_inputs(args)
        for index, (name, data) in enumerate(inputs):
            if len(inputs) > 1:
                if index:
                    print()
                print(f"==> {name} <==")

            text = render(data, args)
            if text:
                print(text)

    except (OSError, HexShimError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
