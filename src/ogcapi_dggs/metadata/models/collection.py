from typing import Any, Dict, List, Tuple, Union

import attr

from ogcapi_dggs.metadata.models.extent import CollectionExtent
from ogcapi_dggs.metadata.models.link import Link
from ogcapi_dggs.metadata.schema import SchemaAvailable
from ogcapi_dggs.utils import UNSET, Unset


@attr.s(auto_attribs=True, frozen=True)
class CollectionDocument:
    """Description of a single DGGS collection, to be serialized as JSON/XML/HTML.

    Optional fields are `UNSET` when absent, and omitted (not `null`) from the serialization.

    Attributes:
        id (str): collection identifier, used in all derived URLs.
        grid_identifier (str): identifier of the DGGS variant (serialized as "dggs-id").
        resolutions (Tuple[int, ...]): supported resolution levels, ascending.
        links (Tuple[Link, ...]): zones links (in order of the producible formats), then self/alternate links.
        title (Union[Unset, str]): display title.
        description (Union[Unset, str]): display description.
        extent (Union[Unset, CollectionExtent]): spatial extent.
        map_preview_url (Union[Unset, str]): URL of a map preview (when a map rendering service is available).
        schema (Union[Unset, SchemaAvailable]): attribute schema (when it could be determined).
    """

    id: str
    grid_identifier: str
    resolutions: Tuple[int, ...]
    links: Tuple[Link, ...]
    title: Union[Unset, str] = UNSET
    description: Union[Unset, str] = UNSET
    extent: Union[Unset, CollectionExtent] = UNSET
    map_preview_url: Union[Unset, str] = UNSET
    schema: Union[Unset, SchemaAvailable] = UNSET

    def to_dict(self) -> Dict[str, Any]:
        field_dict: Dict[str, Any] = {"id": self.id}
        if self.title is not UNSET:
            field_dict["title"] = self.title
        if self.description is not UNSET:
            field_dict["description"] = self.description
        if self.extent is not UNSET:
            field_dict["extent"] = self.extent.to_dict()
        field_dict["dggs-id"] = self.grid_identifier
        field_dict["resolutions"] = list(self.resolutions)
        field_dict["links"] = [link.to_dict() for link in self.links]
        if self.map_preview_url is not UNSET:
            field_dict["mapPreviewUrl"] = self.map_preview_url
        if self.schema is not UNSET:
            field_dict["schema"] = self.schema.to_list()
        return field_dict

    def get_links(self, rel: str) -> List[Link]:
        return [link for link in self.links if link.rel == rel]


@attr.s(auto_attribs=True, frozen=True)
class CollectionsDocument:
    """Listing of all DGGS collections."""

    collections: Tuple[CollectionDocument, ...]
    links: Tuple[Link, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collections": [c.to_dict() for c in self.collections],
            "links": [link.to_dict() for link in self.links],
        }
