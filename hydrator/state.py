"""Poll state: progress of one loader instance across passes."""

from typing import NamedTuple, TypedDict


class PollState(TypedDict):
    attempts_since_last_gain: int  # Passes in a row that loaded nothing.
    is_initial_pass: bool  # True until the first pass completes.
    remaining: int  # Fragments not yet in the loaded set.
    passes: int  # Completed passes.
    stopped: bool  # Set once; no pass runs afterwards.


class PollResult(NamedTuple):
    gained: int
    stopped: bool


def initial_state(total: int) -> PollState:
    return {
        "attempts_since_last_gain": 0,
        "is_initial_pass": True,
        "remaining": total,
        "passes": 0,
        "stopped": False,
    }
