# =============================================================================
# deej_web/cli.py - Command-Line Runner
# =============================================================================
# Runs the web UI standalone against a JSON slider mapping file.
#
# Usage:
#   python -m deej_web --config config.json
#   deej-web --port 9200 --session chrome.exe --session spotify.exe
#
# Stops cleanly on Ctrl+C or SIGTERM.
# =============================================================================

import argparse
import logging
import signal
import sys
import threading

from deej_core.stores import JsonFileConfigAccessor, StaticSessionRegistry
from deej_web.config import settings
from deej_web.exceptions import DeejWebException
from deej_web.server import WebServer

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deej-web",
        description="Serve the deej slider mapping web UI",
    )
    parser.add_argument(
        "--config",
        default=settings.CONFIG_PATH,
        help="JSON file holding the slider mapping",
    )
    parser.add_argument("--host", default=settings.WEB_HOST)
    parser.add_argument("--port", type=int, default=settings.WEB_PORT)
    parser.add_argument(
        "--static-dir",
        default=settings.STATIC_DIR,
        help="Directory with a built UI bundle (defaults to the packaged one)",
    )
    parser.add_argument(
        "--session",
        action="append",
        default=[],
        dest="sessions",
        help="Session key to report from /api/sessions (repeatable)",
    )
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.debug)

    server = WebServer(
        config_accessor=JsonFileConfigAccessor(args.config),
        session_registry=StaticSessionRegistry(args.sessions),
        port=args.port,
        host=args.host,
        static_dir=args.static_dir,
    )

    try:
        server.start()
    except DeejWebException as e:
        logger.error(f"Failed to start web server: {e}")
        return 1

    stop_requested = threading.Event()
    signal.signal(signal.SIGTERM, lambda signum, frame: stop_requested.set())

    print(f"deej web UI available at {server.url} (Ctrl+C to stop)", flush=True)

    try:
        while not stop_requested.wait(timeout=0.5):
            pass
    except KeyboardInterrupt:
        pass

    try:
        server.stop()
    except DeejWebException as e:
        logger.error(f"Failed to stop web server: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
