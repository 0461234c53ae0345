import logging
from typing import Awaitable, Callable, List, Optional

from ..api.client import APIClient
from ..api.exceptions import APIError
from ..config.settings import settings
from ..utils.state import StateContainer
from .schemas import Movie
from .service import filter_movies


logger = logging.getLogger(__name__)


class CatalogSession:
    """Movie list fetch plus client-side search."""

    def __init__(self, client: APIClient):
        self.client = client
        self.state: StateContainer[List[Movie]] = StateContainer()

    @property
    def movies(self) -> List[Movie]:
        if not self.state.is_loaded:
            return []
        return self.state.data or []

    async def load(self) -> None:
        self.state.set_loading()
        try:
            movies = await self.client.list_movies()
        except APIError as e:
            logger.error(f"Failed to load movies: {e.description}")
            self.state.set_failed(e.description)
            return

        self.state.set_loaded(list(movies))

    def filter(self, query: str) -> List[Movie]:
        return filter_movies(self.movies, query)


class MovieDetailSession:
    """Quantity selection and add-to-cart for a single movie.

    ``on_added`` is awaited after a successful insert so the cart can be
    reloaded.
    """

    ADDED_MESSAGE = "Added to cart"

    def __init__(
        self,
        client: APIClient,
        movie: Movie,
        user_name: Optional[str] = None,
        max_amount: Optional[int] = None,
        on_added: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        self.client = client
        self.movie = movie
        self.user_name = user_name or settings.USER_NAME
        self.max_amount = settings.MAX_ORDER_AMOUNT if max_amount is None else max_amount
        self.on_added = on_added

        self.amount = 1
        self.is_adding = False
        self.info: Optional[str] = None
        self.did_add = False

    @property
    def line_total(self) -> int:
        return self.movie.price * self.amount

    def increase(self) -> None:
        self.amount = min(self.amount + 1, self.max_amount)

    def decrease(self) -> None:
        self.amount = max(self.amount - 1, 1)

    async def add_to_cart(self) -> bool:
        if self.is_adding:
            return False

        self.is_adding = True
        try:
            await self.client.add_to_cart(self.movie, self.amount, self.user_name)
        except APIError as e:
            logger.error(f"Could not add '{self.movie.name}' to cart: {e.description}")
            self.info = f"Error: {e.description}"
            self.did_add = False
            return False
        finally:
            self.is_adding = False

        self.info = self.ADDED_MESSAGE
        self.did_add = True
        if self.on_added is not None:
            await self.on_added()
        return True
