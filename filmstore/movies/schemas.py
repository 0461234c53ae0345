from typing import List

from pydantic import BaseModel, ConfigDict


class Movie(BaseModel):
    id: int
    name: str
    image: str
    price: int
    category: str
    rating: float
    year: int
    director: str
    description: str

    model_config = ConfigDict(frozen=True)


class MovieListResponse(BaseModel):
    movies: List[Movie]
