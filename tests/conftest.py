from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from parcelplot.main import app
from parcelplot.schemas.geometry import Coordinate


@pytest.fixture
def origin() -> Coordinate:
    return Coordinate(lat=0.0, lng=0.0)


@pytest.fixture
def gainesville() -> Coordinate:
    return Coordinate(lat=29.6516, lng=-82.3248)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
