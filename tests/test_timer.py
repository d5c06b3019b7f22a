"""
Tests for the Timer progress context.
"""

import io
import logging

import pytest
from rich.console import Console

from mapconnect.utils.logging_config import MapConnectFormatter
from mapconnect.utils.timer import Timer


class TestPhases:

    def test_current_phase_defaults_to_name(self, timer):
        assert timer.current_phase == "test"

    def test_nested_phases(self, timer):
        timer.start("outer")
        timer.start("inner")
        assert timer.current_phase == "inner"
        timer.stop("inner")
        assert timer.current_phase == "outer"
        assert timer.stop("outer") >= 0.0

    def test_stop_wrong_phase_raises(self, timer):
        timer.start("outer")
        with pytest.raises(ValueError):
            timer.stop("something else")

    def test_stop_without_start_raises(self, timer):
        with pytest.raises(ValueError):
            timer.stop("never started")


class TestIteration:

    def test_next_counts_down(self, timer):
        timer.start_iter("items", 2)
        timer.next()
        timer.next()
        with pytest.raises(ValueError):
            timer.next()

    def test_progress_display(self):
        console = Console(file=io.StringIO())
        timer = Timer("bar", show_progress=True, console=console)
        timer.start_iter("items", 3)
        for _ in range(3):
            timer.next()
        timer.done()

    def test_empty_iteration(self, timer):
        timer.start_iter("nothing", 0)
        with pytest.raises(ValueError):
            timer.next()


class TestDiagnostics:

    def test_warn_records_phase(self, timer):
        timer.start("convert buildings")
        timer.warn("building 3 is odd")
        timer.stop("convert buildings")
        timer.warn("outside any phase")

        assert timer.warnings == [
            ("convert buildings", "building 3 is odd"),
            ("test", "outside any phase"),
        ]
        assert timer.warnings_for("convert buildings") == ["building 3 is odd"]

    def test_warn_logs(self, timer, caplog):
        with caplog.at_level(logging.WARNING, logger="mapconnect.utils.timer"):
            timer.warn("logged warning")
        assert "logged warning" in caplog.text
        assert caplog.records[-1].phase == "test"

    def test_note(self, timer):
        timer.note("Discarded 0 buildings")
        assert timer.notes == [("test", "Discarded 0 buildings")]
        assert timer.warnings == []

    def test_warn_context_on_record(self, timer, caplog):
        with caplog.at_level(logging.WARNING, logger="mapconnect.utils.timer"):
            timer.warn("no driveway", building_id=3, osm_way_id=41)
        record = caplog.records[-1]
        assert (record.building_id, record.osm_way_id) == (3, 41)
        assert "building_id=3" in MapConnectFormatter(use_colors=False).format(record)

    def test_done_prints_notes(self, capsys):
        timer = Timer("run", console=Console(width=200))
        timer.start("convert buildings")
        timer.note("Discarded 2 buildings that weren't close enough to a sidewalk")
        timer.stop("convert buildings")
        timer.done()
        out = capsys.readouterr().out
        assert "convert buildings: Discarded 2 buildings" in out
        assert "warnings" not in out

    def test_done_prints_warning_table(self, capsys):
        timer = Timer("run", console=Console(width=200))
        timer.warn("lot [7] has no driveway")
        timer.done()
        out = capsys.readouterr().out
        assert "1 warnings" in out
        assert "lot [7] has no driveway" in out

    def test_context_manager_calls_done(self, capsys):
        with Timer("ctx", console=Console(width=200)) as timer:
            timer.warn("from inside")
        assert "from inside" in capsys.readouterr().out
