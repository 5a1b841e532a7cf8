import argparse
import sys
from pathlib import Path

from loguru import logger

from motdtext import config
from motdtext.codecs.json_codec import serialize_json
from motdtext.dialect import Dialect, detect_dialect
from motdtext.service import TextFormatService

DIALECT_NAMES = ", ".join(d.name.lower() for d in Dialect)


def configure_logging(verbose: bool):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else config.LOG_LEVEL)


def read_input(args) -> str:
    """Text comes from the positional argument, ``--file`` or stdin (``-``)."""
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text == "-" or args.text is None:
        return sys.stdin.read()
    return args.text


def cmd_detect(args) -> int:
    text = read_input(args)
    print(detect_dialect(text).value)
    return 0


def cmd_parse(args) -> int:
    dialect = config.DEFAULT_DIALECT
    if args.format:
        dialect = Dialect.from_name(args.format)
        if dialect is None:
            logger.error(f"Unknown format {args.format!r}. Expected one of: {DIALECT_NAMES}")
            return 2

    text = read_input(args)
    if args.file or args.text in (None, "-"):
        # Drop the single newline editors and shells append to the input.
        text = text[:-1] if text.endswith("\n") else text

    service = TextFormatService()
    result = service.parse_detailed(text, dialect)

    if args.output == "json":
        print(serialize_json(result.component))
    elif args.output == "plain":
        print(result.component.plain_text())
    else:
        print(service.serialize_legacy(result.component))

    used = result.used_dialect.value if result.used_dialect else "none"
    print(f"dialect={used} fallback={str(result.fallback_used).lower()}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="motdtext: detect and normalize colour markup in server text.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dialect resolution and decoder fallbacks to stderr.",
    )
    subparsers = parser.add_subparsers(
        dest="command", required=True, help="Available commands"
    )

    def add_source_args(sub):
        sub.add_argument(
            "text",
            nargs="?",
            default=None,
            help="Text to process. Use '-' or omit it to read stdin.",
        )
        sub.add_argument(
            "-f", "--file", type=str, default=None, help="Read the text from a file."
        )

    # --- 'detect' command ---
    parser_detect = subparsers.add_parser(
        "detect", help="Print the dialect the text appears to be written in."
    )
    add_source_args(parser_detect)
    parser_detect.set_defaults(func=cmd_detect)

    # --- 'parse' command ---
    parser_parse = subparsers.add_parser(
        "parse", help="Decode the text and print it in a normalized form."
    )
    add_source_args(parser_parse)
    parser_parse.add_argument(
        "--format",
        type=str,
        default=None,
        help=f"Force a dialect instead of auto-detection ({DIALECT_NAMES}).",
    )
    parser_parse.add_argument(
        "-o",
        "--output",
        type=str,
        choices=["legacy", "json", "plain"],
        default="legacy",
        help="Output form: legacy section codes (default), JSON component or plain text.",
    )
    parser_parse.set_defaults(func=cmd_parse)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return args.func(args)


def cli_main():
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
