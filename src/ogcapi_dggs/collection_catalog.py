"""
Wiring between the catalog, the deployment's service registry and the collection document builder.
"""

import logging
from typing import List, Optional, Sequence

from ogcapi_dggs.catalog import Catalog, FeatureTypeInfo
from ogcapi_dggs.config import DggsApiConfig, get_config
from ogcapi_dggs.constants import MAP_PREVIEW_SERVICE
from ogcapi_dggs.dggs import DataStoreException, GridSystem
from ogcapi_dggs.errors import (
    CollectionNotFoundException,
    MetadataUnavailableException,
)
from ogcapi_dggs.metadata.builder import CollectionDescriptionBuilder
from ogcapi_dggs.metadata.models.collection import (
    CollectionDocument,
    CollectionsDocument,
)
from ogcapi_dggs.metadata.schema import describe_schema
from ogcapi_dggs.services import ServiceRegistry

_log = logging.getLogger(__name__)


class DggsCollectionCatalog:
    """Builds collection (listing) documents for the DGGS backed feature types of a catalog."""

    def __init__(
        self,
        catalog: Catalog,
        services: ServiceRegistry,
        builder: Optional[CollectionDescriptionBuilder] = None,
        map_preview_service: str = MAP_PREVIEW_SERVICE,
    ):
        self._catalog = catalog
        self._services = services
        self._builder = builder or CollectionDescriptionBuilder()
        self._map_preview_service = map_preview_service

    @classmethod
    def from_config(cls, config: Optional[DggsApiConfig] = None) -> "DggsCollectionCatalog":
        config = config or get_config()
        return cls(
            catalog=config.catalog,
            services=ServiceRegistry(config.services),
            builder=CollectionDescriptionBuilder(
                base_path=config.base_path,
                map_preview_format=config.map_preview_format,
            ),
            map_preview_service=config.map_preview_service,
        )

    def _get_feature_type(self, collection_id: str) -> FeatureTypeInfo:
        feature_type = self._catalog.get_feature_type(collection_id)
        if feature_type is None or not self._catalog.is_dggs(feature_type):
            raise CollectionNotFoundException(collection_id)
        return feature_type

    def _get_grid_system(self, feature_type: FeatureTypeInfo) -> GridSystem:
        try:
            return self._catalog.get_grid_source(feature_type).grid_system
        except DataStoreException as e:
            raise MetadataUnavailableException(feature_type.prefixed_name, reason=str(e)) from e

    def _build(
        self,
        feature_type: FeatureTypeInfo,
        *,
        base_url: str,
        producible_formats: Sequence[str],
        request_format: Optional[str],
    ) -> CollectionDocument:
        grid_system = self._get_grid_system(feature_type)
        return self._builder.build(
            collection_id=feature_type.prefixed_name,
            title=feature_type.title,
            description=feature_type.abstract,
            bounding_extent=feature_type.lat_lon_bbox,
            producible_formats=producible_formats,
            base_url=base_url,
            map_preview_capable=self._services.is_available(self._map_preview_service),
            grid_store=grid_system,
            schema=describe_schema(self._catalog, feature_type),
            request_format=request_format,
        )

    def get_collection_document(
        self,
        collection_id: str,
        *,
        base_url: str,
        producible_formats: Sequence[str],
        request_format: Optional[str] = None,
    ) -> CollectionDocument:
        feature_type = self._get_feature_type(collection_id)
        return self._build(
            feature_type,
            base_url=base_url,
            producible_formats=producible_formats,
            request_format=request_format,
        )

    def get_collections_document(
        self,
        *,
        base_url: str,
        producible_formats: Sequence[str],
        request_format: Optional[str] = None,
    ) -> CollectionsDocument:
        """
        Listing of all DGGS collections.
        Collections with unavailable grid metadata are left out, instead of failing the whole listing.
        """
        collections: List[CollectionDocument] = []
        for feature_type in self._catalog.get_dggs_feature_types():
            try:
                collection = self._build(
                    feature_type,
                    base_url=base_url,
                    producible_formats=producible_formats,
                    request_format=request_format,
                )
            except MetadataUnavailableException as e:
                _log.warning(f"Skipping collection {feature_type.prefixed_name!r} from listing: {e}")
                continue
            collections.append(collection)

        links = self._builder.self_links(
            path=self._builder.collections_path(),
            base_url=base_url,
            request_format=request_format,
        )
        return CollectionsDocument(collections=tuple(collections), links=tuple(links))
