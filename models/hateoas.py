from pydantic import BaseModel, ConfigDict

class HATEOASLink(BaseModel):
    rel: str          # "self"
    href: str         # absolute URL

    model_config = ConfigDict(frozen=True)
