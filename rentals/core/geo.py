"""
core/geo.py
-----------
Decoding of PostGIS geometries for transport.

Locations are read with ST_AsText(), so they arrive as well-known text
(e.g. "POINT(-122.42 37.77)"). The WKT is parsed with shapely, converted to a
GeoJSON mapping, and its first two coordinate values become the
longitude / latitude pair sent to clients.
"""

from typing import Any, Dict, Optional

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import mapping

from rentals.core.exceptions import InvalidGeometryError
from rentals.schemas.property import Coordinates


def wkt_to_geojson(text: str) -> Dict[str, Any]:
    """
    Parse WKT into a GeoJSON-like dict. Raises InvalidGeometryError.

    EMPTY geometries map to an empty coordinate sequence.
    """
    try:
        geometry = wkt.loads(text)
    except (ShapelyError, ValueError) as exc:
        raise InvalidGeometryError(f"invalid geometry {text!r}: {exc}") from exc

    if geometry.is_empty:
        return {"type": geometry.geom_type, "coordinates": ()}
    return dict(mapping(geometry))


def parse_point(text: Optional[str]) -> Optional[Coordinates]:
    """
    Decode a WKT point into Coordinates.

    NULL, blank and EMPTY geometries decode to None so a property without a
    position is still listed.
    """
    if text is None or not text.strip():
        return None

    geojson = wkt_to_geojson(text)
    if geojson["type"] != "Point":
        raise InvalidGeometryError(f"expected a Point geometry, got {geojson['type']}")

    coordinates = geojson["coordinates"]
    if len(coordinates) < 2:
        return None

    longitude, latitude = coordinates[0], coordinates[1]
    return Coordinates(longitude=longitude, latitude=latitude)
