"""Process lifecycle state machine driven by console commands."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

_logger = logging.getLogger(__name__)

STOP_PROMPT = "Stop to shutdown the server: "


class LifecycleState(Enum):
    """Lifecycle states of the running server."""

    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"


@dataclass
class LifecycleController:
    """Interprets console commands and runs the ordered shutdown.

    The listener is always stopped before the store is closed. The controller
    never exits the process; callers inspect ``state`` instead.
    """

    stop_listener: Callable[[], Awaitable[None]]
    close_store: Callable[[], Awaitable[None]]
    write: Callable[[str], None] = print
    state: LifecycleState = LifecycleState.RUNNING

    async def handle_line(self, line: str) -> LifecycleState:
        """Apply one console line and return the resulting state."""
        if self.state is not LifecycleState.RUNNING:
            return self.state
        command = line.strip().lower()
        if command == "stop":
            await self.shutdown()
        elif command:
            self.write(f"Invalid command: {command}")
        return self.state

    async def shutdown(self) -> None:
        """Stop the listener, then close the store. Runs at most once."""
        if self.state is LifecycleState.SHUTTING_DOWN:
            return
        self.state = LifecycleState.SHUTTING_DOWN
        self.write("Shutting down the server")
        await self.stop_listener()
        await self.close_store()
        _logger.info("Shutdown complete")
