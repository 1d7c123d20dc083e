"""Fragment Loader: fetches fragments, renders them and binds them to the page.

One loader instance owns its loaded set and poll state. A fragment that made
it into the loaded set is never fetched again by that instance.

Failures are reported on the first pass only. Later passes retry silently so
a page left open does not flood diagnostics with the same message every few
seconds.
"""

from collections.abc import Callable, Iterable

from hydrator.diagnostics import Diagnostics
from hydrator.errors import FragmentNotFound, TransportError, UnmappedTarget
from hydrator.fragments import FRAGMENT_IDS, FRAGMENT_TARGETS
from hydrator.state import PollResult, PollState, initial_state
from hydrator.utils.markdown import render


class FragmentLoader:
    def __init__(
        self,
        source,
        binder,
        fragment_ids: Iterable[str] = FRAGMENT_IDS,
        targets: dict[str, str] | None = None,
        diagnostics: Diagnostics | None = None,
        renderer: Callable[[str], str] = render,
    ):
        self._source = source
        self._binder = binder
        self._fragment_ids = tuple(fragment_ids)
        self._targets = FRAGMENT_TARGETS if targets is None else targets
        self._render = renderer
        self.diagnostics = diagnostics or Diagnostics()
        self.loaded: set[str] = set()
        self.state: PollState = initial_state(len(self._fragment_ids))
        self._pass_in_progress = False

    async def poll_once(self) -> PollResult:
        """Run one pass over every fragment not loaded yet, in table order.

        Does nothing once the loader has stopped. An overlapping call made
        while a pass is still awaiting a fetch is refused.
        """
        if self.state["stopped"]:
            return PollResult(gained=0, stopped=True)
        if self._pass_in_progress:
            self.diagnostics.emit("pass-skipped")
            return PollResult(gained=0, stopped=False)

        self._pass_in_progress = True
        try:
            gained = 0
            for fragment_id in self._fragment_ids:
                if fragment_id in self.loaded:
                    continue
                if await self._load(fragment_id):
                    gained += 1
            self._finish_pass(gained)
        finally:
            self._pass_in_progress = False

        return PollResult(gained=gained, stopped=self.state["stopped"])

    async def _load(self, fragment_id: str) -> bool:
        """Fetch, render and bind one fragment. Returns True if it is now loaded."""
        first = self.state["is_initial_pass"]

        try:
            body = await self._source.fetch(fragment_id)
        except FragmentNotFound:
            if first:
                self.diagnostics.emit("not-found", fragment_id=fragment_id)
            return False
        except TransportError as exc:
            if first:
                self.diagnostics.emit(
                    "transport-error", fragment_id=fragment_id, message=exc.message
                )
            return False

        text = body.decode("utf-8-sig", errors="replace")
        target_id = self._targets.get(fragment_id)
        try:
            if target_id is None:
                raise UnmappedTarget(fragment_id, "not in the fragment table")
            if text.strip():
                self._binder.bind(target_id, fragment_id, self._render(text))
                kind, fields = "loaded", {"byte_length": len(body)}
            elif first:
                # Empty is terminal: it will not fill in without a restart
                self._binder.bind_plain(target_id, fragment_id)
                kind, fields = "loaded-empty", {}
            else:
                return False
        except UnmappedTarget:
            if first:
                self.diagnostics.emit("unmapped", fragment_id=fragment_id)
            return False

        self.loaded.add(fragment_id)
        self.diagnostics.emit(kind, fragment_id=fragment_id, **fields)
        return True

    def _finish_pass(self, gained: int) -> None:
        state = self.state
        state["passes"] += 1
        state["remaining"] = len(self._fragment_ids) - len(self.loaded)
        if gained:
            state["attempts_since_last_gain"] = 0
        else:
            state["attempts_since_last_gain"] += 1

        if state["remaining"] == 0 or (state["is_initial_pass"] and gained == 0):
            state["stopped"] = True
            self.diagnostics.emit(
                "complete", loaded=len(self.loaded), total=len(self._fragment_ids)
            )

        state["is_initial_pass"] = False

    def status(self) -> dict:
        """Current load counts and the loaded fragment ids, in table order."""
        return {
            "loaded_count": len(self.loaded),
            "total": len(self._fragment_ids),
            "loaded": [f for f in self._fragment_ids if f in self.loaded],
            "passes": self.state["passes"],
            "stopped": self.state["stopped"],
        }

    def format_status(self) -> str:
        status = self.status()
        lines = [
            "Content Loader Status:",
            f"Files loaded: {status['loaded_count']}/{status['total']}",
            f"Passes: {status['passes']} ({'stopped' if status['stopped'] else 'polling'})",
            "Loaded files: " + (", ".join(status["loaded"]) or "(none)"),
        ]
        return "\n".join(lines)
