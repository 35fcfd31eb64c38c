class MEDIA_TYPE:
    # Poor-man's StrEnum
    JSON = "application/json"
    GEOJSON = "application/geo+json"
    XML = "application/xml"
    HTML = "text/html"


# Representations of the collection(s) description documents themselves.
DESCRIPTION_FORMATS = (MEDIA_TYPE.JSON, MEDIA_TYPE.XML, MEDIA_TYPE.HTML)

# Short names accepted in the `f` query parameter
FORMAT_ALIASES = {
    "json": MEDIA_TYPE.JSON,
    "geojson": MEDIA_TYPE.GEOJSON,
    "xml": MEDIA_TYPE.XML,
    "html": MEDIA_TYPE.HTML,
}

# Producible formats of "list zones of a collection" responses
ZONES_FORMATS_DEFAULT = (MEDIA_TYPE.GEOJSON, MEDIA_TYPE.JSON, MEDIA_TYPE.HTML)

API_BASE_PATH_DEFAULT = "ogc/dggs"

LINK_REL_ZONES = "zones"

MAP_PREVIEW_SERVICE = "WMS"
MAP_PREVIEW_PATH = "wms/reflect"
MAP_PREVIEW_FORMAT = "application/openlayers"
