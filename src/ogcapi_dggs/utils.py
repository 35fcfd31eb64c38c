import urllib.parse
from typing import Any, Mapping, NamedTuple, Optional, Union


class Unset:
    """Marker type for optional fields that are absent (where `None` could be a valid value)."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Unset = Unset()


CRS84 = "http://www.opengis.net/def/crs/OGC/1.3/CRS84"


class BoundingBox(NamedTuple):
    """Simple NamedTuple container for a (lon/lat) bounding box"""

    west: float
    south: float
    east: float
    north: float
    crs: str = CRS84

    @classmethod
    def from_lat_lon(cls, *, min_lat: float, max_lat: float, min_lon: float, max_lon: float) -> "BoundingBox":
        return cls(west=min_lon, south=min_lat, east=max_lon, north=max_lat)

    def as_list(self) -> list:
        """Bounding box as `[west, south, east, north]` list (OGC API / STAC style)"""
        return [self.west, self.south, self.east, self.north]


def strip_join(separator: str, *args: str) -> str:
    """
    Join multiple strings with given separator,
    but avoid repeated separators by first stripping it from the glue points
    """
    if len(args) > 1:
        args = [args[0].rstrip(separator)] + [a.strip(separator) for a in args[1:-1]] + [args[-1].lstrip(separator)]
    return separator.join(args)


def build_url(base_url: str, path: str, kvp: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build an absolute URL from a base URL, a (relative) path and query parameters.

    Query parameters are appended in given order, URL-encoded
    (except for slashes, to keep media types like "application/json" readable).
    """
    url = strip_join("/", base_url, path) if path else base_url
    if kvp:
        query = urllib.parse.urlencode([(k, str(v)) for k, v in kvp.items()], safe="/")
        url += ("&" if "?" in url else "?") + query
    return url


def smart_bool(value: Union[None, bool, int, str]) -> bool:
    """Convert given value (e.g. from environment variable) to a boolean"""
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "no", "n", "false", "off"}
    return bool(value)
