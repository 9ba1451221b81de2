# app/models.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Union

from app.timestamps import is_canonical_timestamp


class ProductUpdated(BaseModel):
  model_config = ConfigDict(strict=True, frozen=True)

  id: str
  name: str
  price_pence: int = Field(alias="pricePence", ge=0)
  description: str
  updated_at: str = Field(alias="updatedAt")

  @field_validator("id", "name")
  @classmethod
  def not_blank(cls, value: str) -> str:
    if not value.strip():
      raise ValueError("must not be blank")
    return value

  @field_validator("price_pence", mode="before")
  @classmethod
  def integral_number(cls, value):
    # JSON has a single number type, 500.0 is the same value as 500
    if isinstance(value, float) and value.is_integer():
      return int(value)
    return value

  @field_validator("updated_at")
  @classmethod
  def canonical_timestamp(cls, value: str) -> str:
    if not is_canonical_timestamp(value):
      raise ValueError("not a canonical timestamp")
    return value


class Accepted(BaseModel):
  ok: Literal[True] = True
  event: ProductUpdated


class Rejected(BaseModel):
  ok: Literal[False] = False
  errors: List[str]


ValidationResult = Union[Accepted, Rejected]
