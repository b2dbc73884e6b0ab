"""
Entry point for dockpeek.

Startup sequence:
  1. Parse arguments, start default file logging, load the (optional) YAML config
  2. Reconfigure file logging from the config (the terminal belongs to the UI)
  3. Fetch containers and images synchronously
  4. Hand the dashboard to the Textual app and block until it exits

Exit codes:
  0 - clean quit
  1 - no terminal, or the interface failed to start/run
"""

import argparse
import logging
import shutil
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from . import __version__, get_log_path
from .backend import RuntimeBackend
from .config import LogConfig, load_config
from .layout import DEFAULT_SIZE
from .runner import CommandRunner
from .state import Dashboard
from .textual_app import run as run_app

logger = logging.getLogger(__name__)


def setup_logging(log_config: LogConfig) -> str:
    path = log_config.file_path or get_log_path()
    max_bytes = log_config.max_size_mb * 1024 * 1024
    try:
        handler = RotatingFileHandler(path, maxBytes=max_bytes,
                                      backupCount=log_config.backup_count)
    except OSError as e:
        fallback = get_log_path()
        print(f"Cannot open log file {path}: {e}; using {fallback}", file=sys.stderr)
        path = fallback
        handler = RotatingFileHandler(path, maxBytes=max_bytes,
                                      backupCount=log_config.backup_count)
    logging.basicConfig(
        handlers=[handler],
        level=getattr(logging, log_config.level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    return path


def stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockpeek",
        description="Browse containers and images, and read their logs/inspect output.",
    )
    parser.add_argument("--config", metavar="FILE", help="YAML configuration file")
    parser.add_argument("--runtime", metavar="BINARY",
                        help="runtime CLI to invoke (default: docker)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Default handler first so problems in the config file reach the log.
    setup_logging(LogConfig())
    config = load_config(args.config)
    if args.runtime:
        config.runtime.binary = args.runtime

    if not stdout_is_terminal():
        print("dockpeek needs an interactive terminal", file=sys.stderr)
        return 1

    log_path = setup_logging(config.logging)
    logger.info(f"dockpeek {__version__} started, logging to {log_path}")

    backend = RuntimeBackend(CommandRunner(config.runtime.binary))
    size = tuple(shutil.get_terminal_size(DEFAULT_SIZE))
    dashboard = Dashboard(backend, config, size=size)
    dashboard.load()

    try:
        code = run_app(dashboard)
    except Exception as e:
        logger.critical(f"Interface failed: {e}", exc_info=True)
        print(f"Failed to load TUI: {e}", file=sys.stderr)
        return 1
    logger.info(f"Exited with code {code}")
    return code
