"""Console entrypoint: serve the app and accept a ``stop`` command on stdin."""

import asyncio
import contextlib
import logging
import signal
import sys
import threading
from collections.abc import Iterator
from typing import TextIO

import uvicorn
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from dog_gallery.api.app import create_app
from dog_gallery.app_logging import configure_logging
from dog_gallery.config import Settings
from dog_gallery.containers import AppContainer, build_container
from dog_gallery.domain.errors import DataStoreError
from dog_gallery.services.lifecycle import (
    STOP_PROMPT,
    LifecycleController,
    LifecycleState,
)

_logger = logging.getLogger("dog_gallery.main")


def _start_line_reader(stream: TextIO) -> "asyncio.Queue[str | None]":
    """Pump lines from a blocking stream into a queue; None marks EOF."""
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[str | None] = asyncio.Queue()

    def pump() -> None:
        for line in stream:
            if loop.is_closed():
                return
            loop.call_soon_threadsafe(queue.put_nowait, line)
        if not loop.is_closed():
            loop.call_soon_threadsafe(queue.put_nowait, None)

    threading.Thread(target=pump, name="console-commands", daemon=True).start()
    return queue


async def _next_line(
    lines: "asyncio.Queue[str | None]", server_task: "asyncio.Task[bool]"
) -> str | None:
    """Wait for a console line; None when input ends or the server stops."""
    reader = asyncio.ensure_future(lines.get())
    done, _ = await asyncio.wait(
        {reader, server_task}, return_when=asyncio.FIRST_COMPLETED
    )
    if reader in done:
        return reader.result()
    reader.cancel()
    return None


class ConsoleServer(uvicorn.Server):
    """Uvicorn server that leaves SIGINT/SIGTERM to the console controller.

    Stock uvicorn re-raises a captured signal once it has shut down, which
    would abort the controller before it closes the store.
    """

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield


async def _run_server(server: uvicorn.Server) -> bool:
    """Serve until told to exit; False when the listener never started."""
    try:
        await server.serve()
    except SystemExit:
        # uvicorn exits this way when it cannot bind.
        return False
    return server.started


def _bound_port(server: uvicorn.Server, default: int) -> int:
    """Return the port the listener actually bound (differs when 0 was asked)."""
    for listener in server.servers:
        for sock in listener.sockets:
            return sock.getsockname()[1]
    return default


def _install_stop_signals(server: uvicorn.Server) -> list[signal.Signals]:
    """Route stop signals to a graceful listener exit; second one forces it."""
    loop = asyncio.get_running_loop()

    def request_exit() -> None:
        if server.should_exit:
            server.force_exit = True
            return
        _logger.info("Stop signal received")
        server.should_exit = True

    installed: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, request_exit)
        except (NotImplementedError, RuntimeError):
            continue
        installed.append(sig)
    return installed


async def serve(container: AppContainer, stdin: TextIO = sys.stdin) -> int:
    """Run the web server until ``stop`` is entered or it is signalled."""
    settings = container.settings
    app = create_app(container, manage_resources=False)
    server = ConsoleServer(uvicorn.Config(app, host=settings.host, port=settings.port))
    server_task = asyncio.create_task(_run_server(server))
    while not server.started:
        if server_task.done():
            _logger.error(
                "Web server failed to start on %s:%s", settings.host, settings.port
            )
            await container.close_resources()
            return 1
        await asyncio.sleep(0.05)
    _logger.info(
        "Web server started and running at http://%s:%s",
        settings.host,
        _bound_port(server, settings.port),
    )

    async def stop_listener() -> None:
        server.should_exit = True
        await server_task

    controller = LifecycleController(
        stop_listener=stop_listener, close_store=container.close_resources
    )
    installed = _install_stop_signals(server)
    try:
        lines = _start_line_reader(stdin)
        while controller.state is LifecycleState.RUNNING:
            print(STOP_PROMPT, end="", flush=True)
            line = await _next_line(lines, server_task)
            if line is None:
                break
            await controller.handle_line(line)
        if controller.state is LifecycleState.RUNNING:
            # Input closed: keep serving until a signal stops the listener.
            await server_task
    finally:
        loop = asyncio.get_running_loop()
        for sig in installed:
            loop.remove_signal_handler(sig)
        await controller.shutdown()
    return 0


def main() -> int:
    """Load settings, connect to MongoDB, and serve."""
    configure_logging()
    try:
        settings = Settings()
    except ValidationError:
        _logger.exception("Invalid configuration")
        return 1
    configure_logging(settings.log_level)

    try:
        container = build_container(settings)
    except PyMongoError:
        _logger.exception("MongoDB connection error")
        return 1
    try:
        container.init_store()
    except DataStoreError:
        _logger.exception("MongoDB connection error")
        asyncio.run(container.close_resources())
        return 1
    _logger.info("Connected to MongoDB")

    return asyncio.run(serve(container))


if __name__ == "__main__":
    sys.exit(main())
