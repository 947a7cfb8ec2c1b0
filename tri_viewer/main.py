"""Entry point for the triangle viewer."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys

from tri_viewer.ui.app import TriangleViewerApp

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "TRI_VIEWER_LOG_LEVEL"
LOG_PATH_ENV_VAR = "TRI_VIEWER_LOG_PATH"
LOG_FILENAME = "tri_viewer_log.txt"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONFIG_HELP_DEFAULT = "tri_viewer.ini beside the script, or $TRI_VIEWER_CONFIG"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tri-viewer",
        description="Drag the vertices of a triangle and read off barycentric coordinates.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"INI settings file (default: {CONFIG_HELP_DEFAULT}).",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV_VAR, "INFO"),
        help=f"Logging level name (default: ${LOG_LEVEL_ENV_VAR} or INFO).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=os.getenv(LOG_PATH_ENV_VAR),
        help=f"Log file (default: ${LOG_PATH_ENV_VAR} or {LOG_FILENAME} beside the script).",
    )
    parser.add_argument("--debug", action="store_true", help="Same as --log-level DEBUG.")
    args = parser.parse_args(argv)
    if args.debug:
        args.log_level = "DEBUG"
    return args


def configure_logging(level_name: str, log_file: Path | None) -> Path:
    """Log to ``log_file`` and stdout; returns the file actually used."""

    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    if log_file is None:
        log_file = Path(sys.argv[0]).resolve().parent / LOG_FILENAME

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, mode="a", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )
    return log_file


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    log_file = configure_logging(args.log_level, args.log_file)
    logger.info("Triangle viewer starting (level %s, log %s)", args.log_level.upper(), log_file)

    app = TriangleViewerApp(
        sys.argv,
        main_script_path=Path(sys.argv[0]),
        config_file=args.config,
    )
    app.open_window()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
