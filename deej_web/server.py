# =============================================================================
# deej_web/server.py - Web Server Lifecycle
# =============================================================================
# WebServer owns the listening socket and a uvicorn server running on a
# background thread.
#
# Usage:
#   server = WebServer(config_accessor, session_registry)
#   server.start()          # returns once uvicorn accepts requests
#   print(server.url)       # http://localhost:9123
#   ...
#   server.stop()           # graceful, bounded by shutdown_timeout
#
# State machine:
#   stopped --start()--> running --stop()--> stopped
#
# start()/stop() are serialized by one lock. Request handling never takes it.
# =============================================================================

from __future__ import annotations

import logging
import socket
import threading
import time
from pathlib import Path

import uvicorn

from deej_core.interfaces import ConfigAccessor, SessionRegistry
from deej_core.models import ServerState
from deej_web.config import settings
from deej_web.exceptions import AlreadyRunningError, BindError, ShutdownError, StartupError
from deej_web.main import create_app, resolve_static_dir

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 128
STARTUP_TIMEOUT_SECONDS = 5.0
STARTUP_POLL_SECONDS = 0.01


class WebServer:
    """
    HTTP server for the web-based configuration UI.

    Host, port, shutdown timeout and static directory are fixed at
    construction; anything not passed falls back to settings.
    """

    def __init__(
        self,
        config_accessor: ConfigAccessor,
        session_registry: SessionRegistry,
        port: int | None = None,
        host: str | None = None,
        static_dir: str | Path | None = None,
        shutdown_timeout: float | None = None,
    ):
        self.config_accessor = config_accessor
        self.session_registry = session_registry

        self._port = port if port is not None else settings.WEB_PORT
        self._host = host if host is not None else settings.WEB_HOST
        self._static_dir = static_dir if static_dir is not None else settings.STATIC_DIR
        self._shutdown_timeout = (
            shutdown_timeout if shutdown_timeout is not None
            else settings.SHUTDOWN_TIMEOUT_SECONDS
        )

        self._lock = threading.Lock()
        self._state = ServerState.STOPPED
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def port(self) -> int:
        return self._port

    @property
    def host(self) -> str:
        return self._host

    @property
    def url(self) -> str:
        """
        URL of the web UI.

        Derived from the port only; it doesn't mean the server is reachable.
        """
        return f"http://localhost:{self._port}"

    def get_url(self) -> str:
        return self.url

    @property
    def state(self) -> ServerState:
        with self._lock:
            return self._state

    @property
    def is_running(self) -> bool:
        return self.state == ServerState.RUNNING

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """
        Bind the port and begin serving on a background thread.

        Returns once uvicorn has finished its startup and accepts requests.

        Raises:
            AlreadyRunningError: If the server is already running
            StaticAssetsError: If the UI bundle directory is missing
            BindError: If the port can't be bound
            StartupError: If uvicorn fails or stalls during its own startup
        """
        with self._lock:
            if self._state == ServerState.RUNNING:
                raise AlreadyRunningError(self.url)

            static_dir = resolve_static_dir(self._static_dir)
            app = create_app(
                config_accessor=self.config_accessor,
                session_registry=self.session_registry,
                static_dir=static_dir,
                web_url=self.url,
            )

            sock = self._bind()

            config = uvicorn.Config(
                app,
                log_config=None,
                access_log=False,
                lifespan="on",
            )
            server = uvicorn.Server(config)
            thread = threading.Thread(
                target=self._serve,
                args=(server, sock),
                name=f"deej-web-{self._port}",
                daemon=True,
            )

            thread.start()

            if not self._wait_started(server, thread):
                server.should_exit = True
                server.force_exit = True
                thread.join(timeout=self._shutdown_timeout)
                reason = "timed out" if thread.is_alive() else "exited before accepting requests"
                raise StartupError(self._port, reason)

            self._server = server
            self._thread = thread
            self._state = ServerState.RUNNING

            logger.info(f"Web server started on port {self._port}: {self.url}")

    def stop(self) -> None:
        """
        Gracefully stop serving.

        Stops accepting connections and waits for in-flight requests, up to
        the shutdown timeout. Does nothing if the server isn't running.

        Raises:
            ShutdownError: If the serving thread didn't finish in time; the
                server stays running and stop() may be called again
        """
        with self._lock:
            if self._state == ServerState.STOPPED:
                return

            server, thread = self._server, self._thread
            server.should_exit = True
            thread.join(timeout=self._shutdown_timeout)

            if thread.is_alive():
                # Stop waiting on open connections so a later stop() can finish
                server.force_exit = True
                raise ShutdownError(self._shutdown_timeout)

            self._server = None
            self._thread = None
            self._state = ServerState.STOPPED
            logger.info("Web server stopped")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _bind(self) -> socket.socket:
        """Create, bind and listen on the server socket."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self._host, self._port))
            sock.listen(LISTEN_BACKLOG)
        except OSError as e:
            sock.close()
            raise BindError(self._host, self._port, str(e)) from e
        return sock

    def _wait_started(self, server: uvicorn.Server, thread: threading.Thread) -> bool:
        """Wait for uvicorn startup. False if the thread ended first or time ran out."""
        deadline = time.monotonic() + STARTUP_TIMEOUT_SECONDS
        while not server.started:
            if not thread.is_alive() or time.monotonic() >= deadline:
                return False
            time.sleep(STARTUP_POLL_SECONDS)
        return True

    def _serve(self, server: uvicorn.Server, sock: socket.socket) -> None:
        """Thread target: run uvicorn until it is asked to exit."""
        try:
            server.run(sockets=[sock])
        except SystemExit as e:
            # uvicorn exits the process on startup failure; keep it to this thread
            logger.error(f"Web server exited during startup (code {e.code})")
        except Exception as e:
            logger.exception(f"Web server error: {e}")
        finally:
            sock.close()
