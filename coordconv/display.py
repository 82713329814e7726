"""
Display state for a round trip.

The state a map front-end needs (display texts, marker positions, tooltips,
layer visibility) is built as an immutable value by render(). Callers keep
the previous DisplayState and pass it back in; nothing here is global.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from coordconv.coordinate_format import CoordinateFormat
from coordconv.pipeline import CONVERSION_ERROR_TEXT, RoundTripReport

INPUT_DECIMALS = 5
CONVERTED_BACK_DECIMALS = 8

INPUT_LAYER = "input"


@dataclass(frozen=True)
class LayerVisibility:
    """Which marker layers are shown."""

    input: bool = True
    dd: bool = True
    dm: bool = True
    dms: bool = True

    def is_visible(self, layer: str) -> bool:
        return getattr(self, layer)


@dataclass(frozen=True)
class MarkerState:
    """A marker on the map.

    Attributes:
        position: (lat, lon), or None if the marker has never been placed.
        tooltip: Hover text.
        visible: Whether the marker's layer is shown.
    """

    position: Optional[Tuple[float, float]]
    tooltip: str
    visible: bool


@dataclass(frozen=True)
class DisplayState:
    """Everything a front-end shows for one sample."""

    input_text: str
    format_texts: Dict[CoordinateFormat, str]
    markers: Dict[str, MarkerState]


def _input_marker(report: RoundTripReport, visible: bool) -> Tuple[str, MarkerState]:
    lat, lon = report.source
    text = f"{lat:.{INPUT_DECIMALS}f}, {lon:.{INPUT_DECIMALS}f}"
    marker = MarkerState(position=(lat, lon), tooltip=f"Input Location (DD): {text}", visible=visible)
    return text, marker


def render(
    report: RoundTripReport,
    visibility: Optional[LayerVisibility] = None,
    previous: Optional[DisplayState] = None,
) -> DisplayState:
    """Build the display state for a round trip report.

    Successful formats put their marker at the re-parsed position. A failed
    format shows the conversion error text and keeps its marker from
    `previous`.

    Args:
        report: Output of round_trip().
        visibility: Layer toggles (all shown by default).
        previous: The state this one replaces, if any.

    Returns:
        A new DisplayState.
    """
    visibility = visibility or LayerVisibility()
    input_text, input_marker = _input_marker(report, visibility.input)

    texts: Dict[CoordinateFormat, str] = {}
    markers: Dict[str, MarkerState] = {INPUT_LAYER: input_marker}

    for fmt, outcome in report.outcomes.items():
        layer = fmt.value
        visible = visibility.is_visible(layer)
        texts[fmt] = outcome.display_text

        if outcome.ok and outcome.reparsed is not None:
            lat_back, lon_back = outcome.reparsed
            tooltip = (
                f"{fmt.label}: {outcome.display_text} (Converted back: "
                f"{lat_back:.{CONVERTED_BACK_DECIMALS}f}, {lon_back:.{CONVERTED_BACK_DECIMALS}f})"
            )
            markers[layer] = MarkerState(position=outcome.reparsed, tooltip=tooltip, visible=visible)
        elif previous is not None and layer in previous.markers:
            markers[layer] = replace(previous.markers[layer], visible=visible)
        else:
            markers[layer] = MarkerState(
                position=None, tooltip=f"{fmt.label}: {CONVERSION_ERROR_TEXT}", visible=visible
            )

    return DisplayState(input_text=input_text, format_texts=texts, markers=markers)


def with_visibility(state: DisplayState, visibility: LayerVisibility) -> DisplayState:
    """Return `state` with layer toggles applied, without recomputing anything."""
    markers = {
        layer: replace(marker, visible=visibility.is_visible(layer))
        for layer, marker in state.markers.items()
    }
    return replace(state, markers=markers)
