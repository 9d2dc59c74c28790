"""Main entry point for the pathfinder server and viewer."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import ServerConfig, configure_logging, parse_addr

logger = logging.getLogger("pathfinder")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathfinder", description="Maze generation and grid search")
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser("serve", help="Run the HTTP API server")
    serve.add_argument("--addr", type=str, help="Server listen address, e.g. :8080")
    serve.add_argument("--dev", action="store_true", help="Development mode (enables CORS)")
    serve.add_argument("--static-dir", type=str, help="Directory with a built front end to serve")
    serve.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, WARNING, ...)")

    commands.add_parser("view", help="Launch the desktop viewer")
    return parser


def config_from_args(args: argparse.Namespace) -> ServerConfig:
    """Environment settings overridden by command-line flags."""
    config = ServerConfig.from_env()
    if args.addr:
        config.host, config.port = parse_addr(args.addr)
    if args.dev:
        config.dev = True
    if args.static_dir:
        config.static_dir = args.static_dir
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config


def serve(config: ServerConfig) -> int:
    """Run the Flask development server."""
    configure_logging(config.log_level)

    from .web.app import create_app
    app = create_app(config)

    logger.info("listening addr=%s dev=%s", config.addr, config.dev)
    app.run(host=config.host, port=config.port, debug=False)
    return 0


def view() -> int:
    """Launch the PySide6 viewer."""
    # Set environment variables to avoid DPI scaling issues on macOS
    os.environ.setdefault('QT_AUTO_SCREEN_SCALE_FACTOR', '0')
    os.environ.setdefault('QT_LOGGING_RULES', 'qt.qpa.backingstore=false')

    from PySide6.QtWidgets import QApplication

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Pathfinder Visualizer")
    app.setApplicationVersion("1.0.0")

    # Import UI components (after QApplication is created)
    from .app.controller import PathfinderController
    from .ui.main_window import MainWindow

    controller = PathfinderController()
    window = MainWindow(controller)
    window.show()
    try:
        return app.exec()
    finally:
        controller.stop()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        try:
            config = config_from_args(args)
        except ValueError as e:
            parser.error(str(e))
        return serve(config)
    if args.command == "view":
        configure_logging()
        return view()

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
