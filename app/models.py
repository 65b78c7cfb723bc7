# app/models.py
from decimal import Decimal
from typing import Annotated, List

from pydantic import BaseModel, Field, PlainSerializer

# prices go over the wire as JSON numbers, not strings
Price = Annotated[Decimal, Field(gt=0), PlainSerializer(float, return_type=float, when_used="json")]


class Category(BaseModel):
    id: int
    name: str = Field(min_length=1, max_length=50)
    description: str = Field("", max_length=200)


class Product(BaseModel):
    id: int
    name: str = Field(min_length=1, max_length=100)
    price: Price
    stock: int = Field(ge=0)
    category: Category


class ProductResponse(BaseModel):
    data: List[Product] = []
    count: int = 0
