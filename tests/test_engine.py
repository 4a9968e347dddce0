from __future__ import annotations

import doctest

import pytest

import parcelplot.services.engine as engine
from parcelplot.schemas.geometry import Coordinate
from parcelplot.services.engine import NO_CALLS_ERROR, parse
from parcelplot.services.parsing import normalize_description


def test_engine_docstring_examples() -> None:
    failures, _ = doctest.testmod(engine)
    assert failures == 0


@pytest.mark.parametrize("text", ["", "   ", "nothing to see here"])
def test_no_calls(text: str) -> None:
    result = parse(text)
    assert not result.is_valid
    assert result.coordinates == []
    assert result.errors[-1] == NO_CALLS_ERROR


def test_closed_triangle(gainesville: Coordinate) -> None:
    result = parse("N90E 300; S00E 400; N36.52.12W 500", gainesville)
    assert result.is_valid and result.is_closed
    assert result.errors == []
    assert result.closing_suggestion is None
    assert len(result.coordinates) == 4
    assert result.area_sq_ft == pytest.approx(60000.0, abs=60.0)
    assert result.perimeter_ft == pytest.approx(1200.0, abs=1.0)


def test_open_boundary_gets_suggestion(gainesville: Coordinate) -> None:
    result = parse("N90E 300\nS00E 400", gainesville)
    assert not result.is_valid
    assert not result.is_closed
    assert result.coordinates
    assert result.closing_suggestion is not None
    assert result.closing_suggestion.end_cardinal == "W"


def test_partial_success_keeps_plotted_calls(gainesville: Coordinate) -> None:
    result = parse("N45E 100\nthis is not a call\nS45W 100", gainesville)
    assert len(result.coordinates) == 3
    assert "line 2: unparseable" in result.errors
    assert not result.is_valid


def test_plss_reference_is_extracted() -> None:
    text = "/SW,20,2S,19W\nN90E 300; S00E 400; N36.52.12W 500"
    result = parse(text)
    ref = result.plss_reference
    assert (ref.aliquot, ref.section, ref.township, ref.range) == ("SW", 20, "2S", "19W")
    assert ref.key == "2S 19W"
    assert "19" not in normalize_description(text)
    assert result.is_closed


def test_default_start_is_origin() -> None:
    result = parse("N00E 100; S00E 100; N90E 1")
    assert result.coordinates[0] == Coordinate(lat=0.0, lng=0.0)


def test_default_start_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(engine.settings, "default_start_lat", 29.5)
    monkeypatch.setattr(engine.settings, "default_start_lng", -82.0)
    result = parse("N00E 100")
    assert result.coordinates[0] == Coordinate(lat=29.5, lng=-82.0)


def test_unexpected_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(engine, "plot_calls", boom)
    result = parse("N45E 100")
    assert not result.is_valid
    assert result.coordinates == []
    assert result.errors == ["internal error: kaboom"]
