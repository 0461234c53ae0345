import logging
from typing import Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ..cart.schemas import APIMessageResponse, CartLine, CartListResponse
from ..config.settings import settings
from ..movies.schemas import Movie, MovieListResponse
from . import endpoints
from .exceptions import DecodingError, InvalidResponse, NetworkError, ServerError


logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def form_body(params: Dict[str, str]) -> bytes:
    """Percent-encode keys and values into an ``application/x-www-form-urlencoded`` body.

    Everything outside the RFC 3986 unreserved set is escaped, spaces included
    (``%20``, never ``+``), so values containing ``&`` or ``=`` survive intact.
    """
    pairs = [
        f"{quote(str(key), safe='')}={quote(str(value), safe='')}"
        for key, value in params.items()
    ]
    return "&".join(pairs).encode("utf-8")


class APIClient:
    """Client for the storefront's PHP backend.

    Four fixed operations, no retries and no timeouts beyond the transport's
    defaults. Failures are raised as :class:`~filmstore.api.exceptions.APIError`
    subclasses.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        images_base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.images_base_url = images_base_url or settings.IMAGES_BASE_URL
        self._client = client or httpx.AsyncClient(base_url=base_url or settings.BASE_URL)

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def image_url(self, image: str) -> str:
        return f"{self.images_base_url}{image}"

    async def list_movies(self) -> List[Movie]:
        response = await self._send("GET", endpoints.ALL_MOVIES)
        return self._decode(response, MovieListResponse).movies

    async def add_to_cart(self, movie: Movie, amount: int, user_name: str) -> None:
        params = {
            "name": movie.name,
            "image": movie.image,
            "price": str(movie.price),
            "category": movie.category,
            "rating": str(movie.rating),
            "year": str(movie.year),
            "director": movie.director,
            "description": movie.description,
            "orderAmount": str(amount),
            "userName": user_name,
        }
        response = await self._send("POST", endpoints.INSERT_MOVIE, params)
        message = self._message(response)

        if message is not None and message.success == 1:
            logger.info(f"Added {amount} x '{movie.name}' to cart of {user_name}")
            return

        reason = message.message if message is not None else None
        logger.warning(f"Insert of '{movie.name}' rejected: {reason or 'no success flag'}")
        raise ServerError(reason or "Insert failed")

    async def list_cart(self, user_name: str) -> List[CartLine]:
        response = await self._send("POST", endpoints.GET_CART, {"userName": user_name})
        return self._decode(response, CartListResponse).movie_cart

    async def remove_cart_line(self, cart_id: int, user_name: str) -> bool:
        params = {"cartId": str(cart_id), "userName": user_name}
        response = await self._send("POST", endpoints.DELETE_MOVIE, params)
        message = self._message(response)

        if message is None or message.success is None:
            reason = message.message if message is not None else None
            logger.warning(f"Delete of cart line {cart_id} returned no success flag")
            raise ServerError(reason or "Delete failed")

        return message.success == 1

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        logger.debug(f"{method} {path}")
        try:
            if params is None:
                response = await self._client.request(method, path)
            else:
                response = await self._client.request(
                    method,
                    path,
                    content=form_body(params),
                    headers={"Content-Type": FORM_CONTENT_TYPE},
                )
        except httpx.RequestError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise NetworkError(e) from e

        if not response.is_success:
            logger.warning(f"{method} {path} returned HTTP {response.status_code}")
            raise InvalidResponse(response.status_code)

        return response

    @staticmethod
    def _decode(response: httpx.Response, schema: Type[SchemaT]) -> SchemaT:
        try:
            return schema.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Unexpected body from {response.request.url}: {e.error_count()} error(s)")
            raise DecodingError() from e

    @staticmethod
    def _message(response: httpx.Response) -> Optional[APIMessageResponse]:
        try:
            return APIMessageResponse.model_validate_json(response.content)
        except ValidationError:
            return None
