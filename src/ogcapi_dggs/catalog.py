"""
Catalog of published feature types (collections) and the data stores backing them.
"""

import logging
from typing import Iterable, List, Optional, Tuple

import attrs

from ogcapi_dggs.dggs import AttributeDescriptor, DataStoreException, DggsDataStore, DggsFeatureSource
from ogcapi_dggs.utils import BoundingBox

_log = logging.getLogger(__name__)


STORE_TYPE_DGGS = "DGGS"


@attrs.frozen(kw_only=True)
class StoreInfo:
    """
    Catalog entry for a data store.

    A `data_store` of `None` models a misconfigured store (e.g. failing connection parameters):
    it is still listed in the catalog, but any data access fails.
    """

    name: str
    type: str = STORE_TYPE_DGGS
    data_store: Optional[DggsDataStore] = None


@attrs.frozen(kw_only=True)
class FeatureTypeInfo:
    """Catalog entry for a published feature type."""

    name: str
    store: str
    workspace: Optional[str] = None
    # Name of the feature type in the data store (defaults to published name)
    native_name: Optional[str] = None
    title: Optional[str] = None
    abstract: Optional[str] = None
    lat_lon_bbox: Optional[BoundingBox] = None

    @property
    def prefixed_name(self) -> str:
        return f"{self.workspace}:{self.name}" if self.workspace else self.name

    @property
    def source_name(self) -> str:
        return self.native_name or self.name


class Catalog:
    """Read-only lookup of feature types and stores."""

    def __init__(self, stores: Iterable[StoreInfo] = (), feature_types: Iterable[FeatureTypeInfo] = ()):
        self._stores = {s.name: s for s in stores}
        self._feature_types = list(feature_types)

    def __repr__(self):
        return f"<{type(self).__name__} stores={list(self._stores)} feature_types={len(self._feature_types)}>"

    def get_feature_types(self) -> List[FeatureTypeInfo]:
        return list(self._feature_types)

    def get_feature_type(self, prefixed_name: str) -> Optional[FeatureTypeInfo]:
        for feature_type in self._feature_types:
            if feature_type.prefixed_name == prefixed_name:
                return feature_type
        return None

    def get_store(self, feature_type: FeatureTypeInfo) -> StoreInfo:
        try:
            return self._stores[feature_type.store]
        except KeyError:
            raise DataStoreException(
                f"Store {feature_type.store!r} of feature type {feature_type.prefixed_name!r} not found"
            ) from None

    def is_dggs(self, feature_type: FeatureTypeInfo) -> bool:
        """Is given feature type backed by a DGGS store?"""
        store = self._stores.get(feature_type.store)
        return store is not None and store.type == STORE_TYPE_DGGS

    def get_dggs_feature_types(self) -> List[FeatureTypeInfo]:
        return [ft for ft in self._feature_types if self.is_dggs(ft)]

    def get_grid_source(self, feature_type: FeatureTypeInfo) -> DggsFeatureSource:
        """Resolve the DGGS feature source backing given feature type."""
        store = self.get_store(feature_type)
        _log.debug(f"Resolving grid source {feature_type.source_name!r} from store {store.name!r}")
        if store.type != STORE_TYPE_DGGS:
            raise DataStoreException(f"Store {store.name!r} is not a DGGS store (type {store.type!r})")
        if store.data_store is None:
            raise DataStoreException(f"Store {store.name!r} is not available")
        return store.data_store.get_feature_source(feature_type.source_name)

    def get_feature_schema(self, feature_type: FeatureTypeInfo) -> Tuple[AttributeDescriptor, ...]:
        return self.get_grid_source(feature_type).get_schema()
