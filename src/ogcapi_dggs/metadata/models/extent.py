from typing import Any, Dict

import attr

from ogcapi_dggs.utils import BoundingBox


@attr.s(auto_attribs=True, frozen=True)
class CollectionExtent:
    """The spatial extent of the data in the collection.

    Attributes:
        bbox (BoundingBox): lon/lat bounding box describing the overall spatial extent.
    """

    bbox: BoundingBox

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spatial": {
                "bbox": [self.bbox.as_list()],
                "crs": self.bbox.crs,
            }
        }
