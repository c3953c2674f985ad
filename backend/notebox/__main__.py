"""
Notebox - Command-Line Entry Point
==================================

Usage:
    python -m notebox -h 127.0.0.1 -p 8000 -c ./notes.json
    notebox --host 0.0.0.0 --port 8000 --cache /var/lib/notebox/notes.json

-h is --host, so help is only available as --help. All three of host,
port and cache are required; argparse exits with status 2 when one is
missing, before any socket is bound or file touched.
"""

import argparse
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from notebox import __version__
from notebox.config import Settings
from notebox.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notebox",
        description="Serve named text notes from a JSON file over HTTP.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    required = parser.add_argument_group("required")
    required.add_argument("-h", "--host", required=True, help="Interface to bind")
    required.add_argument("-p", "--port", required=True, type=int, help="Port to bind")
    required.add_argument("-c", "--cache", required=True, help="Path to the JSON note store")

    parser.add_argument("--upload-form", default=None, help="HTML file served at /UploadForm.html")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--no-docs", action="store_true", help="Disable /docs, /redoc and /openapi.json")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """
    Build Settings with command-line values taking precedence.

    Options left unset on the command line fall through to NOTEBOX_*
    environment variables and then to the field defaults.
    """
    overrides = {"host": args.host, "port": args.port, "cache": args.cache}
    if args.upload_form is not None:
        overrides["upload_form"] = args.upload_form
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.no_docs:
        overrides["docs_enabled"] = False
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        parser.error(f"invalid configuration:\n{e}")

    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
