"""
Best-effort introspection of the attribute schema of a collection.

Unlike the grid system metadata, the schema is descriptive only:
failure to determine it is reported as a `SchemaUnavailable` result
(and logged), not raised.
"""

import logging
from typing import List, Tuple, Union

import attr

from ogcapi_dggs.catalog import Catalog, FeatureTypeInfo
from ogcapi_dggs.dggs import AttributeDescriptor, DataStoreException

_log = logging.getLogger(__name__)


@attr.s(auto_attribs=True, frozen=True)
class SchemaAvailable:
    attributes: Tuple[AttributeDescriptor, ...]

    def to_list(self) -> List[dict]:
        return [a.to_dict() for a in self.attributes]


@attr.s(auto_attribs=True, frozen=True)
class SchemaUnavailable:
    reason: str


SchemaResult = Union[SchemaAvailable, SchemaUnavailable]


def describe_schema(catalog: Catalog, feature_type: FeatureTypeInfo) -> SchemaResult:
    try:
        attributes = catalog.get_feature_schema(feature_type)
    except DataStoreException as e:
        _log.info(f"Failed to compute feature type of {feature_type.prefixed_name!r}: {e!r}", exc_info=True)
        return SchemaUnavailable(reason=str(e))
    return SchemaAvailable(attributes=tuple(attributes))
