"""Diagnostics sink: structured loader events, echoed to stderr."""

import sys
from dataclasses import dataclass, field

_MESSAGES = {
    "loaded": "Loaded {fragment_id} ({byte_length} bytes)",
    "loaded-empty": "Loaded {fragment_id} as plain text (empty file)",
    "not-found": "File not found: {fragment_id} (create this file to see content)",
    "transport-error": "Network error loading {fragment_id}: {message}",
    "unmapped": "No container found for {fragment_id}",
    "complete": "Content loading complete! Loaded {loaded}/{total} files.",
    "pass-skipped": "Pass already in progress, skipped overlapping pass",
}


@dataclass
class DiagnosticEvent:
    kind: str
    fields: dict = field(default_factory=dict)

    def message(self) -> str:
        template = _MESSAGES.get(self.kind, self.kind)
        return template.format(**self.fields)


class Diagnostics:
    """Collects events in order and prints one ``[hydrator]`` line per event.

    Pass ``quiet=True`` to record without printing.
    """

    def __init__(self, stream=None, quiet: bool = False):
        self._stream = stream
        self._quiet = quiet
        self.events: list[DiagnosticEvent] = []

    def emit(self, kind: str, **fields) -> DiagnosticEvent:
        event = DiagnosticEvent(kind, fields)
        self.events.append(event)
        if not self._quiet:
            print(f"[hydrator] {event.message()}", file=self._stream or sys.stderr)
        return event

    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]
