"""Polling schedule: decides after each pass whether another one runs.

The next pass is scheduled only after the current one has finished, so a
slow fetch delays the schedule instead of stacking up overlapping passes.
"""

import asyncio
from collections.abc import Callable

from hydrator.loader import FragmentLoader
from hydrator.state import PollResult, PollState


def route_after_pass(state: PollState) -> str:
    """Return "end" once the loader has stopped, otherwise "poll"."""
    if state["stopped"]:
        return "end"
    return "poll"


async def run_polling(
    loader: FragmentLoader,
    interval_s: float,
    on_pass: Callable[[PollResult], None] | None = None,
    max_passes: int | None = None,
) -> PollState:
    """Run passes until the loader stops (or ``max_passes`` is reached).

    Without ``max_passes`` this keeps polling for as long as some fragment
    is still missing and the first pass loaded at least one.
    """
    while True:
        result = await loader.poll_once()
        if on_pass is not None:
            on_pass(result)

        if route_after_pass(loader.state) == "end":
            return loader.state
        if max_passes is not None and loader.state["passes"] >= max_passes:
            return loader.state

        await asyncio.sleep(interval_s)
