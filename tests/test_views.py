import xml.etree.ElementTree as ElementTree

import pytest

from ogcapi_dggs.testing import approx_str_contains


class TestCollection:
    def test_get_collection(self, client):
        resp = client.get("/ogc/dggs/collections/landcover")
        assert resp.status_code == 200
        assert resp.mimetype == "application/json"
        data = resp.json
        assert data == {
            "id": "landcover",
            "title": "Land cover",
            "description": "Land cover classes",
            "extent": {
                "spatial": {
                    "bbox": [[-20, -10, 20, 10]],
                    "crs": "http://www.opengis.net/def/crs/OGC/1.3/CRS84",
                }
            },
            "dggs-id": "isea3h",
            "resolutions": [0, 1, 2, 3],
            "links": [
                {
                    "href": "http://dggs.test/ogc/dggs/collections/landcover/zones?f=application/json",
                    "rel": "zones",
                    "type": "application/json",
                    "title": "landcover items as application/json",
                },
                {
                    "href": "http://dggs.test/ogc/dggs/collections/landcover/zones?f=text/html",
                    "rel": "zones",
                    "type": "text/html",
                    "title": "landcover items as text/html",
                },
                {
                    "href": "http://dggs.test/ogc/dggs/collections/landcover?f=application/json",
                    "rel": "self",
                    "type": "application/json",
                    "title": "This document as application/json",
                },
                {
                    "href": "http://dggs.test/ogc/dggs/collections/landcover?f=application/xml",
                    "rel": "alternate",
                    "type": "application/xml",
                    "title": "This document as application/xml",
                },
                {
                    "href": "http://dggs.test/ogc/dggs/collections/landcover?f=text/html",
                    "rel": "alternate",
                    "type": "text/html",
                    "title": "This document as text/html",
                },
            ],
            "mapPreviewUrl": "http://dggs.test/wms/reflect?LAYERS=landcover&FORMAT=application/openlayers",
            "schema": [{"name": "zoneId", "type": "String"}, {"name": "class", "type": "String"}],
        }

    def test_get_collection_key_order(self, client):
        resp = client.get("/ogc/dggs/collections/landcover")
        assert resp.get_data(as_text=True).startswith('{"id":"landcover","title":"Land cover"')

    def test_get_collection_optional_fields_omitted(self, client):
        resp = client.get("/ogc/dggs/collections/dggs:population")
        assert resp.status_code == 200
        data = resp.json
        assert data["id"] == "dggs:population"
        assert "extent" not in data
        assert "title" not in data
        assert "schema" not in data
        assert data["mapPreviewUrl"] == approx_str_contains("LAYERS=dggs%3Apopulation")

    def test_get_collection_html(self, client):
        resp = client.get("/ogc/dggs/collections/landcover?f=html")
        assert resp.status_code == 200
        assert resp.mimetype == "text/html"
        html = resp.get_data(as_text=True)
        assert "<h2>Land cover</h2>" in html
        assert "isea3h" in html
        assert "0, 1, 2, 3" in html
        assert "http://dggs.test/wms/reflect?LAYERS=landcover&amp;FORMAT=application/openlayers" in html
        assert "<td>zoneId</td><td>String</td>" in html
        assert 'rel="self">This document as text/html</a>' in html

    def test_get_collection_html_accept_header(self, client):
        resp = client.get("/ogc/dggs/collections/landcover", headers={"Accept": "text/html,*/*;q=0.8"})
        assert resp.status_code == 200
        assert resp.mimetype == "text/html"

    def test_get_collection_xml(self, client):
        resp = client.get("/ogc/dggs/collections/landcover?f=application/xml")
        assert resp.status_code == 200
        assert resp.mimetype == "application/xml"
        root = ElementTree.fromstring(resp.data)
        assert root.tag == "Collection"
        assert root.find("dggs-id").text == "isea3h"
        assert [r.text for r in root.findall("resolutions/resolution")] == ["0", "1", "2", "3"]
        self_links = [link for link in root.findall("links/link") if link.find("rel").text == "self"]
        assert [link.find("type").text for link in self_links] == ["application/xml"]

    def test_get_collection_unsupported_format(self, client):
        resp = client.get("/ogc/dggs/collections/landcover?f=image/png")
        assert resp.status_code == 400
        assert resp.json == {
            "code": "InvalidParameterValue",
            "description": "Unsupported output format 'image/png',"
            " should be one of ['application/json', 'application/xml', 'text/html'].",
        }

    @pytest.mark.parametrize("collection_id", ["nope", "topp:states"])
    def test_get_collection_not_found(self, client, collection_id):
        resp = client.get(f"/ogc/dggs/collections/{collection_id}")
        assert resp.status_code == 404
        assert resp.json == {"code": "NotFound", "description": f"Collection {collection_id!r} does not exist."}

    def test_get_collection_broken_store(self, client):
        resp = client.get("/ogc/dggs/collections/dggs:rivers")
        assert resp.status_code == 500
        assert resp.json == {
            "code": "MetadataUnavailable",
            "description": "Grid system metadata of collection 'dggs:rivers' is unavailable:"
            " Store 'broken' is not available",
        }

    def test_unknown_path(self, client):
        resp = client.get("/ogc/dggs/nope")
        assert resp.status_code == 404


class TestCollections:
    def test_get_collections(self, client):
        resp = client.get("/ogc/dggs/collections")
        assert resp.status_code == 200
        data = resp.json
        assert [c["id"] for c in data["collections"]] == ["landcover", "dggs:population"]
        assert [(link["rel"], link["type"]) for link in data["links"]] == [
            ("self", "application/json"),
            ("alternate", "application/xml"),
            ("alternate", "text/html"),
        ]

    def test_get_collections_html(self, client):
        resp = client.get("/ogc/dggs/collections?f=html")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "<h2>Land cover</h2>" in html
        assert "<h2>dggs:population</h2>" in html
        assert "rivers" not in html
        assert '<a href="http://dggs.test/ogc/dggs/collections/landcover?f=text/html">Details</a>' in html

    def test_get_collections_xml(self, client):
        resp = client.get("/ogc/dggs/collections?f=xml")
        assert resp.status_code == 200
        root = ElementTree.fromstring(resp.data)
        assert root.tag == "Collections"
        assert [c.find("id").text for c in root.findall("collections/collection")] == ["landcover", "dggs:population"]


class TestErrorHandling:
    def test_unexpected_error(self, flask_app, client, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("ogcapi_dggs.views.render", broken)
        resp = client.get("/ogc/dggs/collections/landcover")
        assert resp.status_code == 500
        assert resp.json == {"code": "Internal", "description": "Server error: RuntimeError('boom')"}
