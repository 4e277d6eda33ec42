from __future__ import annotations

from pydantic import ConfigDict, Field

from models.hateoas import HALModel


class Greeting(HALModel):
    """Greeting returned to clients"""
    content: str = Field(
        ...,
        description="Formatted greeting message",
        examples=["Hello, World!"]
    )

    # content is fixed once built; links stay appendable through add_link
    model_config = ConfigDict(frozen=True, populate_by_name=True)
