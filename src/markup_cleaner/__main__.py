# -*- coding: utf-8 -*-
"""
Command line entry point (``python -m markup_cleaner`` / ``markup-cleaner``).

    markup-cleaner [serve]                 start the HTTP service
    markup-cleaner clean FILE [--format]   normalize FILE ("-" for stdin)
"""
import argparse
import sys

import uvicorn

from markup_cleaner.config import settings
from markup_cleaner.formatter import format_markup
from markup_cleaner.pipeline import normalization_pipeline


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markup-cleaner",
        description="Normalize rich-text editor HTML into minimal semantic markup.",
    )
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the HTTP service.")
    serve.add_argument("--host", default=settings.HOST, help="Interface to bind.")
    serve.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on.")

    clean = commands.add_parser("clean", help="Normalize a file and print the result.")
    clean.add_argument("file", type=argparse.FileType("r", encoding="utf-8"),
                       help='HTML file to normalize, "-" for stdin.')
    clean.add_argument(
        "--format",
        choices=("raw", "beautify", "minify"),
        default="raw",
        help="Rendition of the normalized markup.",
    )
    return parser


def serve(host: str, port: int) -> None:
    """Start the Uvicorn server."""
    uvicorn.run(
        "markup_cleaner.api:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


def clean(markup: str, output_format: str = "raw") -> str:
    """Normalize markup and render it in the requested format."""
    result = normalization_pipeline.process(markup)
    if output_format == "raw":
        return result.markup
    return format_markup(result.markup, output_format)


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.command == "clean":
        with args.file:
            markup = args.file.read()
        sys.stdout.write(clean(markup, args.format) + "\n")
        return 0

    if args.command == "serve":
        serve(args.host, args.port)
    else:
        serve(settings.HOST, settings.PORT)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI helper
    sys.exit(main())
