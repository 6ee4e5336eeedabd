"""
CLI runner for the lintface engine.

Lints a single file and prints its diagnostics as JSON, or starts the HTTP
service.

Usage:
    lintface --language java --file Foo.java
    lintface --service [--host 127.0.0.1] [--port 8080]
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import find_config_file, load_config
from .errors import LintError
from .linter import Linter
from .schema import diagnostics_to_json, failure_to_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lintface",
        description="Tree-sitter based linter for Java, Python and R",
    )
    parser.add_argument("-l", "--language", help="Language to lint (java, python, r)")
    parser.add_argument("-f", "--file", help="Path to the file to lint")
    parser.add_argument("-s", "--service", action="store_true", help="Start as a web service")
    parser.add_argument("--config", help="Path to a lintface YAML config file")
    parser.add_argument("--host", default=None, help="Service bind address")
    parser.add_argument("--port", type=int, default=None, help="Service port")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser


def setup_logging(level: str) -> None:
    """Send log records to stderr so stdout stays valid JSON."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_service(host: Optional[str], port: Optional[int], log_level: str,
                config_path: Optional[str] = None) -> int:
    """Serve the HTTP API with an engine configured from ``config_path``.

    Falls back to ``LINTFACE_CONFIG_PATH`` when no config file was given or
    discovered.
    """
    import uvicorn
    from lint_service.main import create_app
    from lint_service.settings import settings

    bind_host = host or settings.host
    bind_port = port or settings.port
    config_path = config_path or settings.config_path
    app = create_app(linter=Linter(config=load_config(config_path)), settings=settings)

    logger.info("Starting lintface in web service mode on %s:%d", bind_host, bind_port)
    if config_path:
        logger.info("Using config file %s", config_path)
    uvicorn.run(app, host=bind_host, port=bind_port, log_level=log_level.lower())
    return 0


def lint_file(linter: Linter, language: str, file_path: str) -> int:
    """Lint one file. Returns the process exit code."""
    logger.info("Linting %s file: %s", language, file_path)
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            code = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read file %s: %s", file_path, e)
        error = {"error": {"kind": "io", "message": f"Failed to read file: {e}"}}
        print(json.dumps(error, indent=2), file=sys.stderr)
        return 1

    try:
        diagnostics = linter.lint(language, code)
    except LintError as e:
        print(json.dumps(failure_to_json(e), indent=2), file=sys.stderr)
        return 1

    if not diagnostics:
        logger.info("No syntax errors found.")
    else:
        print(json.dumps(diagnostics_to_json(diagnostics), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config_path = args.config or find_config_file(".")
    config = load_config(config_path)
    log_level = args.log_level or config.log_level
    setup_logging(log_level)

    if args.service or (args.language is None and args.file is None):
        return run_service(args.host, args.port, log_level, config_path)

    if args.language is None or args.file is None:
        parser.print_usage(sys.stderr)
        logger.error("Usage: lintface --language <lang> --file <path> or lintface --service")
        return 2

    linter = Linter(config=config)
    return lint_file(linter, args.language, args.file)


if __name__ == "__main__":
    sys.exit(main())
