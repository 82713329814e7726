"""Unit tests for coordconv.display."""

import pytest

from coordconv import pipeline
from coordconv.coordinate_format import CoordinateFormat
from coordconv.display import INPUT_LAYER, LayerVisibility, render, with_visibility
from coordconv.exceptions import ParseError
from coordconv.pipeline import CONVERSION_ERROR_TEXT, round_trip
from coordconv.precision import PrecisionSettings


@pytest.fixture
def report():
    return round_trip(48.816662, -123.508873, PrecisionSettings())


class TestRender:

    def test_input_text(self, report) -> None:
        state = render(report)

        assert state.input_text == "48.81666, -123.50887"
        assert state.markers[INPUT_LAYER].tooltip == "Input Location (DD): 48.81666, -123.50887"
        assert state.markers[INPUT_LAYER].position == (48.816662, -123.508873)

    def test_format_texts(self, report) -> None:
        state = render(report)

        assert state.format_texts[CoordinateFormat.DD] == "48.81666° N, 123.50887° W"
        assert state.format_texts[CoordinateFormat.DM] == "48° 48.99972' N, 123° 30.53238' W"

    def test_markers_at_reparsed_positions(self, report) -> None:
        state = render(report)

        dd = state.markers["dd"]
        assert dd.position == (48.81666, -123.50887)
        assert dd.tooltip == (
            "DD: 48.81666° N, 123.50887° W "
            "(Converted back: 48.81666000, -123.50887000)"
        )
        assert state.markers["dm"].tooltip.startswith("DM: 48° 48.99972' N, 123° 30.53238' W (Converted back: ")

    def test_visibility(self, report) -> None:
        state = render(report, LayerVisibility(dms=False))

        assert state.markers["dd"].visible
        assert not state.markers["dms"].visible

    def test_failed_format_keeps_previous_marker(self, report, monkeypatch) -> None:
        previous = render(report)

        def broken(*args, **kwargs):
            raise ParseError("bad")

        monkeypatch.setattr(pipeline, "format_dm_pair", broken)
        failed = round_trip(10.0, 20.0)

        state = render(failed, previous=previous)

        assert state.format_texts[CoordinateFormat.DM] == CONVERSION_ERROR_TEXT
        assert state.markers["dm"] == previous.markers["dm"]
        assert state.markers["dd"].position == (10.0, 20.0)

    def test_failed_format_without_previous_state(self, monkeypatch) -> None:
        def broken(*args, **kwargs):
            raise ParseError("bad")

        monkeypatch.setattr(pipeline, "format_dms_pair", broken)

        state = render(round_trip(10.0, 20.0))

        assert state.markers["dms"].position is None
        assert state.markers["dms"].tooltip == f"DMS: {CONVERSION_ERROR_TEXT}"

    def test_render_does_not_modify_previous(self, report) -> None:
        previous = render(report)
        snapshot = dict(previous.markers)

        render(round_trip(1.0, 2.0), previous=previous)

        assert previous.markers == snapshot


def test_with_visibility(report) -> None:
    state = render(report)

    hidden = with_visibility(state, LayerVisibility(input=False, dd=False))

    assert not hidden.markers[INPUT_LAYER].visible
    assert not hidden.markers["dd"].visible
    assert hidden.markers["dm"].visible
    assert hidden.markers["dd"].position == state.markers["dd"].position
    assert state.markers["dd"].visible
