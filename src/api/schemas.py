"""Response Pydantic models."""

from pydantic import BaseModel


class StaticParam(BaseModel):
    id: str


class StaticParamsResponse(BaseModel):
    params: list[StaticParam]
