import asyncio
import logging
from typing import Optional

from .api.client import APIClient
from .cart.session import CartSession
from .config.settings import settings
from .movies.schemas import Movie
from .movies.session import CatalogSession, MovieDetailSession
from .utils.formatting import format_price


logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


class StoreApp:
    """One gateway shared by the catalog, cart and detail sessions."""

    def __init__(self, client: APIClient, user_name: Optional[str] = None):
        self.client = client
        self.user_name = user_name or settings.USER_NAME
        self.catalog = CatalogSession(client)
        self.cart = CartSession(client, self.user_name)

    def detail_for(self, movie: Movie) -> MovieDetailSession:
        return MovieDetailSession(
            self.client,
            movie,
            user_name=self.user_name,
            on_added=self.cart.load
        )

    async def aclose(self) -> None:
        await self.client.aclose()


def create_app(client: Optional[APIClient] = None, user_name: Optional[str] = None) -> StoreApp:
    return StoreApp(client or APIClient(), user_name)


async def main() -> None:
    configure_logging()
    app = create_app()
    try:
        await app.catalog.load()
        if app.catalog.state.is_failed:
            logger.error(f"Catalog unavailable: {app.catalog.state.error}")
        else:
            logger.info(f"{settings.PROJECT_NAME}: {len(app.catalog.movies)} movies")

        await app.cart.load()
        if app.cart.state.is_failed:
            logger.error(f"Cart unavailable: {app.cart.error}")
        else:
            for group in app.cart.groups:
                logger.info(f"{group.name} x{group.total_amount} {format_price(group.subtotal)}")
            logger.info(f"Cart total: {format_price(app.cart.total)}")
    finally:
        await app.aclose()


if __name__ == "__main__":
    asyncio.run(main())
