"""
Assembly of collection description documents.
"""

import logging
import urllib.parse
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ogcapi_dggs.constants import (
    API_BASE_PATH_DEFAULT,
    DESCRIPTION_FORMATS,
    LINK_REL_ZONES,
    MAP_PREVIEW_FORMAT,
    MAP_PREVIEW_PATH,
    MEDIA_TYPE,
)
from ogcapi_dggs.dggs import GridSystem
from ogcapi_dggs.errors import MetadataUnavailableException
from ogcapi_dggs.metadata.models.collection import CollectionDocument
from ogcapi_dggs.metadata.models.extent import CollectionExtent
from ogcapi_dggs.metadata.models.link import Link
from ogcapi_dggs.metadata.schema import SchemaAvailable, SchemaResult
from ogcapi_dggs.utils import UNSET, BoundingBox, build_url

_log = logging.getLogger(__name__)


# API for the URL building callable: (base_url, path, query parameters) -> absolute URL
UrlBuilder = Callable[..., str]


class CollectionDescriptionBuilder:
    """
    Builds `CollectionDocument`s from collection metadata and deployment capabilities.

    Stateless: a single instance can be shared between requests and threads.
    """

    def __init__(
        self,
        *,
        base_path: str = API_BASE_PATH_DEFAULT,
        description_formats: Sequence[str] = DESCRIPTION_FORMATS,
        map_preview_format: str = MAP_PREVIEW_FORMAT,
        url_builder: UrlBuilder = build_url,
    ):
        self._base_path = base_path.strip("/")
        self._description_formats = tuple(description_formats)
        self._map_preview_format = map_preview_format
        self._url_builder = url_builder

    def collections_path(self, collection_id: Optional[str] = None) -> str:
        path = f"{self._base_path}/collections"
        if collection_id is not None:
            path += "/" + urllib.parse.quote(collection_id, safe=":")
        return path

    def build(
        self,
        collection_id: str,
        title: Optional[str],
        description: Optional[str],
        bounding_extent: Optional[BoundingBox],
        producible_formats: Iterable[str],
        base_url: str,
        map_preview_capable: bool,
        grid_store: Optional[GridSystem],
        *,
        schema: Optional[SchemaResult] = None,
        request_format: Optional[str] = None,
    ) -> CollectionDocument:
        """
        Build the description document of a single collection.

        :param collection_id: (prefixed) collection identifier, used in all derived URLs
        :param bounding_extent: lon/lat extent of the collection (`None`: extent is omitted)
        :param producible_formats: media types available for "list zones" responses,
            each one gives a "zones" link (in given order, duplicates are not removed)
        :param base_url: base URL of the service
        :param map_preview_capable: whether a map preview service is available in this deployment
        :param grid_store: grid system backing the collection
        :param schema: result of schema introspection (only a successful result is included)
        :param request_format: media type of the current request (for "self" vs "alternate" links)
        :return: the collection document
        :raises MetadataUnavailableException: when the grid system metadata can not be read
        """
        if not collection_id:
            raise ValueError("Collection id must be a non-empty string")
        _log.debug(f"Building collection document for {collection_id!r}")

        links = self.zones_links(collection_id=collection_id, producible_formats=producible_formats, base_url=base_url)
        links += self.self_links(
            path=self.collections_path(collection_id),
            base_url=base_url,
            request_format=request_format,
        )

        grid_identifier, resolutions = self.read_grid_metadata(collection_id=collection_id, grid_store=grid_store)

        return CollectionDocument(
            id=collection_id,
            title=title if title is not None else UNSET,
            description=description if description is not None else UNSET,
            extent=CollectionExtent(bbox=bounding_extent) if bounding_extent is not None else UNSET,
            grid_identifier=grid_identifier,
            resolutions=resolutions,
            links=tuple(links),
            map_preview_url=(
                self.map_preview_url(collection_id=collection_id, base_url=base_url) if map_preview_capable else UNSET
            ),
            schema=schema if isinstance(schema, SchemaAvailable) else UNSET,
        )

    def zones_links(self, collection_id: str, producible_formats: Iterable[str], base_url: str) -> List[Link]:
        path = self.collections_path(collection_id) + "/zones"
        return [
            Link(
                href=self._url_builder(base_url, path, {"f": media_type}),
                rel=LINK_REL_ZONES,
                type=media_type,
                title=f"{collection_id} items as {media_type}",
                classification=LINK_REL_ZONES,
            )
            for media_type in producible_formats
        ]

    def self_links(self, path: str, base_url: str, request_format: Optional[str] = None) -> List[Link]:
        """Links to all representations of the document at given path: "self" for the requested one."""
        request_format = request_format or MEDIA_TYPE.JSON
        return [
            Link(
                href=self._url_builder(base_url, path, {"f": media_type}),
                rel="self" if media_type == request_format else "alternate",
                type=media_type,
                title=f"This document as {media_type}",
                classification="self",
            )
            for media_type in self._description_formats
        ]

    def map_preview_url(self, collection_id: str, base_url: str) -> str:
        return self._url_builder(
            base_url,
            MAP_PREVIEW_PATH,
            {"LAYERS": collection_id, "FORMAT": self._map_preview_format},
        )

    @staticmethod
    def read_grid_metadata(collection_id: str, grid_store: Optional[GridSystem]) -> Tuple[str, Tuple[int, ...]]:
        """Read grid identifier and (sorted, unique) resolutions from the grid store."""
        if not isinstance(grid_store, GridSystem):
            raise MetadataUnavailableException(collection_id, reason=f"invalid grid store {grid_store!r}")
        try:
            identifier = grid_store.identifier()
            levels = list(grid_store.resolutions())
            resolutions = tuple(sorted(set(int(r) for r in levels)))
        except Exception as e:
            _log.error(f"Failed to read grid metadata of collection {collection_id!r}: {e!r}")
            raise MetadataUnavailableException(collection_id, reason=repr(e)) from e
        if not identifier:
            raise MetadataUnavailableException(collection_id, reason="empty grid identifier")
        non_integral = [r for r in levels if r != int(r)]
        if non_integral:
            raise MetadataUnavailableException(collection_id, reason=f"non-integer resolutions {non_integral!r}")
        return identifier, resolutions
