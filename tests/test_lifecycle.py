"""Tests for the console lifecycle controller."""

import asyncio

from dog_gallery.services.lifecycle import LifecycleController, LifecycleState


def _controller(events: list[str]) -> LifecycleController:
    async def stop_listener() -> None:
        events.append("listener stopped")

    async def close_store() -> None:
        events.append("store closed")

    return LifecycleController(
        stop_listener=stop_listener, close_store=close_store, write=events.append
    )


def test_stop_runs_ordered_shutdown() -> None:
    events: list[str] = []
    controller = _controller(events)

    state = asyncio.run(controller.handle_line("  STOP \n"))

    assert state is LifecycleState.SHUTTING_DOWN
    assert events == ["Shutting down the server", "listener stopped", "store closed"]


def test_invalid_command_is_reported() -> None:
    events: list[str] = []
    controller = _controller(events)

    state = asyncio.run(controller.handle_line("Restart\n"))

    assert state is LifecycleState.RUNNING
    assert events == ["Invalid command: restart"]


def test_blank_input_is_ignored() -> None:
    events: list[str] = []
    controller = _controller(events)

    state = asyncio.run(controller.handle_line("   \n"))

    assert state is LifecycleState.RUNNING
    assert events == []


def test_shutdown_runs_once() -> None:
    events: list[str] = []
    controller = _controller(events)

    async def scenario() -> None:
        await controller.handle_line("stop")
        await controller.handle_line("stop")
        await controller.handle_line("anything")
        await controller.shutdown()

    asyncio.run(scenario())

    assert events.count("store closed") == 1
    assert "Invalid command: anything" not in events
