from __future__ import annotations

import json
from pathlib import Path

import pytest

from parcelplot.schemas.geometry import Coordinate
from parcelplot.schemas.parsing import PLSSReference
from parcelplot.services import plss
from parcelplot.services.plss import (
    county_for_point,
    detect_county_from_reference,
    estimate_reference_location,
    estimate_township_center,
    extract_plss_reference,
    load_county_table,
)


def test_extract_reference_with_spaces_and_case() -> None:
    ref, prefix = extract_plss_reference(" /ne , 3 , 1n , 2e\nN45E 100")
    assert (ref.aliquot, ref.section, ref.township, ref.range) == ("NE", 3, "1N", "2E")
    assert prefix.endswith("2e")


def test_no_reference() -> None:
    assert extract_plss_reference("N45E 100") == (None, "")
    assert detect_county_from_reference("N45E 100") is None


def test_detect_county_from_grid_estimate() -> None:
    assert detect_county_from_reference("/SW,20,2S,19W", table={}) == "Walton"


def test_table_takes_precedence() -> None:
    assert detect_county_from_reference("/SW,20,2S,19W", table={"2S 19W": "Okaloosa"}) == "Okaloosa"


def test_table_from_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "plss.json"
    path.write_text(json.dumps({"2s  19w": "Holmes"}), encoding="utf-8")
    monkeypatch.setattr(plss.settings, "plss_county_table_path", str(path))
    assert detect_county_from_reference("/SW,20,2S,19W") == "Holmes"
    load_county_table.cache_clear()


def test_table_must_be_object(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_county_table(str(path))


def test_township_center_near_initial_point() -> None:
    c = estimate_township_center("1N", "1E")
    # three miles north and east of the initial point
    assert c.lat == pytest.approx(30.4776, abs=1e-3)
    assert c.lng == pytest.approx(-84.2271, abs=1e-3)
    assert county_for_point(c) == "Leon"


def test_sections_are_laid_out_boustrophedon() -> None:
    def loc(section: int) -> Coordinate:
        return estimate_reference_location(
            PLSSReference(aliquot="", section=section, township="2S", range="19W")
        )

    s1, s6, s7, s36 = loc(1), loc(6), loc(7), loc(36)
    # 1 is the north-east corner, 6 the north-west, 7 sits below 6, 36 the south-east
    assert s1.lng > s6.lng
    assert s1.lat == pytest.approx(s6.lat, abs=1e-5)
    assert s7.lat < s6.lat
    assert s7.lng == pytest.approx(s6.lng, abs=1e-4)
    assert s36.lat < s1.lat
    assert s36.lng == pytest.approx(s1.lng, abs=1e-3)


def test_aliquot_shifts_location() -> None:
    base = PLSSReference(aliquot="", section=20, township="2S", range="19W")
    sw = estimate_reference_location(base.model_copy(update={"aliquot": "SW"}))
    ne = estimate_reference_location(base.model_copy(update={"aliquot": "NE"}))
    assert sw.lat < ne.lat
    assert sw.lng < ne.lng
