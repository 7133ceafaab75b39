# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then:
- serve:   HTTP/GraphQL server in a background thread, console REPL in the
           main thread (optional),
- console: console REPL only,
- seed:    reset the tasks table with sample rows.
"""

from __future__ import annotations

import argparse
import logging
import signal
import threading

from werkzeug.serving import BaseWSGIServer, make_server

from ..api.app import create_app
from ..cli.bootstrap import create_initial_state, shutdown
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..tasks.task_seeds import seed_tasks

logger = logging.getLogger(__name__)


class HttpBackgroundRunner:
    """Runs the werkzeug WSGI server on a daemon thread."""

    def __init__(self, state: AppState, host: str, port: int) -> None:
        self._server: BaseWSGIServer = make_server(host, port, create_app(state), threaded=True)
        self._thread = threading.Thread(
            target=self._server.serve_forever, name="tasklist-http", daemon=True
        )

    @property
    def port(self) -> int:
        return self._server.server_port

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout=timeout)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasklist", description="Task list server.")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP/GraphQL server (default).")
    serve.add_argument("--host", default=None, help="Bind address (overrides TASKLIST_HOST).")
    serve.add_argument("--port", type=int, default=None, help="Port (overrides TASKLIST_PORT).")
    serve.add_argument(
        "--console", action="store_true", help="Also run the console REPL in this terminal."
    )

    sub.add_parser("console", help="Run the console REPL only.")
    sub.add_parser("seed", help="Reset the tasks table with sample tasks.")
    return parser


def _setup_logging(settings: Settings) -> int:
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    return console_level


def _run_server(state: AppState, args: argparse.Namespace) -> None:
    settings = state.settings
    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port
    with_console = bool(getattr(args, "console", False)) or settings.console_enabled

    runner: HttpBackgroundRunner | None = None
    if settings.http_enabled:
        runner = HttpBackgroundRunner(state, host, port)
        runner.start()
        logger.info(
            "Server running on http://%s:%s%s", host, runner.port, settings.graphql_path
        )

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    # With the REPL in the foreground, Ctrl+C stays a KeyboardInterrupt so input() returns.
    signals = (signal.SIGTERM,) if with_console else (signal.SIGINT, signal.SIGTERM)
    for sig in signals:
        try:
            signal.signal(sig, _handle_signal)
        except (ValueError, OSError):
            logger.debug("Cannot install handler for signal %s", sig)

    try:
        if with_console:
            run_console_loop(state, should_stop=stop_main.is_set)
            stop_main.set()
        elif runner is None:
            logger.warning("HTTP disabled and console off; nothing to run.")
        else:
            logger.info("Press Ctrl+C to stop.")
            stop_main.wait()
    finally:
        if runner is not None:
            runner.stop()
            runner.join(timeout=10.0)


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    command = args.command or "serve"

    settings = get_settings()
    _setup_logging(settings)
    logger.info("Starting %s (%s)...", settings.app_name, command)

    state = create_initial_state(settings=settings)
    try:
        if command == "seed":
            created = seed_tasks(state.task_store)
            print(f"Seeded {len(created)} tasks into {settings.tasks_db_path}")
        elif command == "console":
            run_console_loop(state)
        else:
            if not hasattr(args, "host"):
                args = _build_parser().parse_args(["serve"])
            _run_server(state, args)
    finally:
        shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
