import pytest

from rentals.core.exceptions import InvalidGeometryError
from rentals.core.geo import parse_point, wkt_to_geojson
from rentals.schemas.property import Coordinates


def test_parse_point_returns_longitude_then_latitude() -> None:
    assert parse_point("POINT(-73.9857 40.7484)") == Coordinates(
        longitude=-73.9857, latitude=40.7484
    )


def test_parse_point_accepts_z_coordinates() -> None:
    assert parse_point("POINT Z (2.35 48.85 35)") == Coordinates(
        longitude=2.35, latitude=48.85
    )


@pytest.mark.parametrize("text", [None, "", "   ", "POINT EMPTY"])
def test_parse_point_without_position_is_none(text) -> None:
    assert parse_point(text) is None


@pytest.mark.parametrize("text", ["POINT(1", "garbage", "POINT(a b)"])
def test_parse_point_rejects_malformed_wkt(text) -> None:
    with pytest.raises(InvalidGeometryError):
        parse_point(text)


def test_parse_point_rejects_other_geometry_types() -> None:
    with pytest.raises(InvalidGeometryError, match="LineString"):
        parse_point("LINESTRING(0 0, 1 1)")


def test_wkt_to_geojson() -> None:
    geojson = wkt_to_geojson("POINT(10 20)")

    assert geojson["type"] == "Point"
    assert tuple(geojson["coordinates"]) == (10.0, 20.0)


def test_wkt_to_geojson_empty_geometry_has_no_coordinates() -> None:
    assert wkt_to_geojson("POINT EMPTY") == {"type": "Point", "coordinates": ()}
