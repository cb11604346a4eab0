from pydantic import BaseModel, Field, ConfigDict
from typing import List


class RedirectBase(BaseModel):
    # Plain strings: the registry's own validator owns the alias/url rules
    # so that every violated rule can be reported at once.
    alias: str = Field(..., description="Short unique name for the redirect")
    url: str = Field(..., description="Target URL the alias redirects to")


class RedirectCreate(RedirectBase):
    pass


class RedirectResponse(RedirectBase):
    """Serializes the SQLAlchemy Redirect model (ORM mode)"""

    model_config = ConfigDict(from_attributes=True)


class RedirectList(BaseModel):
    redirects: List[RedirectResponse]


class UpdateUrl(BaseModel):
    url: str = Field(..., description="New target URL")


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response: the offending field and every violated rule"""
    on_item: str
    errors: List[str]
