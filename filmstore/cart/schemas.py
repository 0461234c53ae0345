from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CartLine(BaseModel):
    cart_id: int = Field(alias="cartId")
    name: str
    image: str
    price: int
    category: str
    rating: float
    year: int
    director: str
    description: str
    order_amount: int = Field(alias="orderAmount")
    user_name: str = Field(alias="userName")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CartListResponse(BaseModel):
    movie_cart: List[CartLine]


class CartGroup(BaseModel):
    """Cart lines of the same movie at the same price, shown as one row."""

    key: str
    name: str
    image: str
    price: int
    total_amount: int
    cart_ids: List[int] = Field(default_factory=list)

    @property
    def subtotal(self) -> int:
        return self.price * self.total_amount


class APIMessageResponse(BaseModel):
    success: Optional[int] = None
    message: Optional[str] = None
