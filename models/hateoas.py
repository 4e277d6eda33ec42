from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class Link(BaseModel):
    href: str           # absolute URL


class HALModel(BaseModel):
    """
    Base for representations carrying hypermedia links.
    Links are rendered as a HAL `_links` object keyed by relation name,
    always after the representation's own fields.
    """
    links: Dict[str, Link] = Field(
        default_factory=dict,
        alias="_links",
        description="HAL links keyed by relation name",
    )

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def links_last(self, handler):
        data = handler(self)
        for key in ("_links", "links"):
            if key in data:
                data[key] = data.pop(key)
        return data

    def add_link(self, rel: str, href: str) -> "HALModel":
        """Register a link under `rel`. An existing relation is overwritten in place."""
        self.links[rel] = Link(href=href)
        return self

    def link(self, rel: str) -> Optional[Link]:
        return self.links.get(rel)
