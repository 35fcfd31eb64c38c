"""
Content negotiation and serialization of description documents (JSON, XML, HTML).
"""

import logging
import xml.etree.ElementTree as ElementTree
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

import flask
from werkzeug.datastructures import MIMEAccept

from ogcapi_dggs.constants import DESCRIPTION_FORMATS, FORMAT_ALIASES, MEDIA_TYPE
from ogcapi_dggs.errors import UnsupportedFormatException
from ogcapi_dggs.metadata.models.collection import CollectionDocument, CollectionsDocument
from ogcapi_dggs.metadata.models.link import Link

_log = logging.getLogger(__name__)


# Element names for items of list valued fields in XML output
XML_ITEM_NAMES = {
    "collections": "collection",
    "links": "link",
    "resolutions": "resolution",
    "schema": "attribute",
}


def negotiate_format(
    f: Optional[str],
    accept: Optional[MIMEAccept] = None,
    supported: Sequence[str] = DESCRIPTION_FORMATS,
    default: str = MEDIA_TYPE.JSON,
) -> str:
    """
    Determine response media type:
    explicit `f` query parameter (short name or media type) first,
    then best match with the `Accept` header, otherwise the default.
    """
    if f:
        media_type = FORMAT_ALIASES.get(f.lower(), f)
        if media_type not in supported:
            raise UnsupportedFormatException(requested=f, supported=list(supported))
        return media_type
    if accept:
        best = accept.best_match(supported)
        if best:
            return best
    return default


def to_xml(data: Dict[str, Any], root: str) -> bytes:
    element = ElementTree.Element(root)
    for key, value in data.items():
        _append_xml(element, key, value)
    return ElementTree.tostring(element, encoding="utf-8", xml_declaration=True)


def _append_xml(parent: ElementTree.Element, tag: str, value: Any):
    child = ElementTree.SubElement(parent, tag)
    if isinstance(value, dict):
        for k, v in value.items():
            _append_xml(child, k, v)
    elif isinstance(value, (list, tuple)):
        item_tag = XML_ITEM_NAMES.get(tag, "item")
        for v in value:
            _append_xml(child, item_tag, v)
    else:
        child.text = str(value)


def group_links(links: Iterable[Link]) -> Dict[str, List[Link]]:
    """Group links by classification (in order of first appearance)."""
    groups: Dict[str, List[Link]] = {}
    for link in links:
        groups.setdefault(link.classification or "other", []).append(link)
    return groups


def render(
    document: Union[CollectionDocument, CollectionsDocument],
    media_type: str,
    *,
    template: str,
    xml_root: str,
) -> flask.Response:
    _log.debug(f"Rendering {type(document).__name__} as {media_type}")
    if media_type == MEDIA_TYPE.HTML:
        body = flask.render_template(
            template,
            document=document,
            link_groups=group_links(document.links),
        )
        return flask.Response(body, mimetype=MEDIA_TYPE.HTML)
    elif media_type == MEDIA_TYPE.XML:
        return flask.Response(to_xml(document.to_dict(), root=xml_root), mimetype=MEDIA_TYPE.XML)
    else:
        return flask.jsonify(document.to_dict())
