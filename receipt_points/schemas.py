
from pydantic import BaseModel, ConfigDict, Field
from typing import List

# Decoded receipts are read-only for the rest of the request
class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str

class Receipt(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    total: str
    items: List[Item]

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int

class ErrorResponse(BaseModel):
    detail: str
    error: str

class HealthResponse(BaseModel):
    ok: bool
    receipts: int
