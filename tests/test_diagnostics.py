"""Tests for hydrator.diagnostics.Diagnostics."""

import io

from hydrator.diagnostics import DiagnosticEvent, Diagnostics


class TestMessages:
    def test_loaded(self):
        event = DiagnosticEvent("loaded", {"fragment_id": "a.txt", "byte_length": 12})
        assert event.message() == "Loaded a.txt (12 bytes)"

    def test_transport_error(self):
        event = DiagnosticEvent("transport-error", {"fragment_id": "a.txt", "message": "timeout"})
        assert event.message() == "Network error loading a.txt: timeout"

    def test_complete(self):
        event = DiagnosticEvent("complete", {"loaded": 3, "total": 18})
        assert event.message() == "Content loading complete! Loaded 3/18 files."

    def test_unknown_kind_falls_back_to_kind(self):
        assert DiagnosticEvent("custom").message() == "custom"


class TestDiagnostics:
    def test_emit_records_and_prints(self):
        stream = io.StringIO()
        diagnostics = Diagnostics(stream=stream)

        diagnostics.emit("not-found", fragment_id="a.txt")

        assert diagnostics.kinds() == ["not-found"]
        assert stream.getvalue() == (
            "[hydrator] File not found: a.txt (create this file to see content)\n"
        )

    def test_defaults_to_stderr(self, capsys):
        Diagnostics().emit("unmapped", fragment_id="x.txt")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No container found for x.txt" in captured.err

    def test_quiet_records_without_printing(self, capsys):
        diagnostics = Diagnostics(quiet=True)
        diagnostics.emit("loaded-empty", fragment_id="a.txt")
        assert diagnostics.events[0].fields == {"fragment_id": "a.txt"}
        assert capsys.readouterr().err == ""
