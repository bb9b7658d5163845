#!/usr/bin/env python3
"""
CLI entrypoint: export a Zenn scrap to a Markdown file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from scrap2md.core.errors import ScrapExportError
from scrap2md.core.logging import setup_logger
from scrap2md.core.markdown import STYLES
from scrap2md.exporter import ExportRequest, ScrapExporter, output_filename, write_markdown

logger = logging.getLogger("scrap2md.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrap2md", description="Fetch a Zenn scrap and save it as Markdown"
    )
    parser.add_argument("url", help="Scrap URL or slug (e.g. https://zenn.dev/xxx/scraps/your_slug)")
    parser.add_argument("--cookie", default=None, help="Cookie header value for a logged-in session.")
    parser.add_argument(
        "--cookie-env",
        default=None,
        help="Environment variable holding the cookie (default: ZENN_COOKIE).",
    )
    parser.add_argument(
        "--no-login",
        dest="interactive_login",
        action="store_false",
        default=None,
        help="Never open a browser; fetch anonymously when no cookie is set.",
    )
    parser.add_argument(
        "--skip-header",
        action="store_true",
        default=None,
        help="Omit the author/date line of each comment and the thread separators.",
    )
    parser.add_argument("--style", choices=STYLES, default=None, help="Comment layout (default: flat).")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("-o", "--output", default=None, help="Output file path.")
    target.add_argument("--output-dir", default=None, help="Directory for the generated file.")
    target.add_argument("--stdout", action="store_true", help="Print Markdown instead of writing a file.")
    return parser


def main(argv: Optional[List[str]] = None, exporter: Optional[ScrapExporter] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()

    request = ExportRequest(
        url=args.url,
        cookie=args.cookie,
        cookie_env=args.cookie_env,
        skip_header=args.skip_header,
        style=args.style,
        interactive_login=args.interactive_login,
    )
    try:
        exporter = exporter or ScrapExporter()
        result = exporter.export(request)
    except ScrapExportError as e:
        logger.error(f"{e.kind}: {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130

    if args.stdout:
        sys.stdout.write(result.markdown)
        return 0

    if args.output:
        path = Path(args.output)
    else:
        path = Path(args.output_dir or ".") / output_filename(result.scrap.title, result.slug)
    try:
        write_markdown(result.markdown, path)
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
