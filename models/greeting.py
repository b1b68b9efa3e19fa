from __future__ import annotations
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from models.hateoas import HATEOASLink


# -----------------------------------------------------------------------------
# Pydantic Schemas
# -----------------------------------------------------------------------------
class Greeting(BaseModel):
    """Greeting representation returned to clients"""
    links: List[HATEOASLink] = Field(
        default_factory=list,
        description="HATEOAS links for this representation"
    )
    content: str = Field(
        ...,
        description="Rendered greeting text",
        examples=["Hello, World!"]
    )

    model_config = ConfigDict(frozen=True)
