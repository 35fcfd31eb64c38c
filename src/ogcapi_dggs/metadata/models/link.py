from typing import Any, Dict, Union

import attr

from ogcapi_dggs.utils import UNSET, Unset


@attr.s(auto_attribs=True, frozen=True)
class Link:
    """A hyperlink in a collection description document.

    Attributes:
        href (str): absolute URL of the link target.
        rel (str): relation type (e.g. "self", "alternate", "zones").
        type (Union[Unset, str]): media type of the link target.
        title (Union[Unset, str]): human readable title.
        classification (Union[Unset, str]): grouping key for HTML rendering,
            not part of the JSON/XML representation.
    """

    href: str
    rel: str
    type: Union[Unset, str] = UNSET
    title: Union[Unset, str] = UNSET
    classification: Union[Unset, str] = UNSET

    def to_dict(self) -> Dict[str, Any]:
        field_dict: Dict[str, Any] = {
            "href": self.href,
            "rel": self.rel,
        }
        if self.type is not UNSET:
            field_dict["type"] = self.type
        if self.title is not UNSET:
            field_dict["title"] = self.title
        return field_dict
