"""
Dummy/example config
"""

from ogcapi_dggs.catalog import Catalog, FeatureTypeInfo, StoreInfo
from ogcapi_dggs.config import DggsApiConfig
from ogcapi_dggs.dggs import AttributeDescriptor, DggsDataStore, StaticGridSystem
from ogcapi_dggs.utils import BoundingBox

h3_store = DggsDataStore(
    name="h3",
    grid_system=StaticGridSystem(id="H3", levels=range(16)),
    feature_types={
        "landcover": [
            AttributeDescriptor(name="zoneId", type="String"),
            AttributeDescriptor(name="resolution", type="Integer"),
            AttributeDescriptor(name="class", type="String"),
        ],
    },
)

config = DggsApiConfig(
    id="ogcapi-dggs-dummy",
    title="DGGS API Dummy",
    description="DGGS API Dummy instance.",
    catalog=Catalog(
        stores=[StoreInfo(name="h3", data_store=h3_store)],
        feature_types=[
            FeatureTypeInfo(
                workspace="dggs",
                name="landcover",
                store="h3",
                title="Land cover",
                abstract="Land cover classes on the H3 grid.",
                lat_lon_bbox=BoundingBox(west=-180, south=-90, east=180, north=90),
            ),
        ],
    ),
    services=["WMS"],
)
