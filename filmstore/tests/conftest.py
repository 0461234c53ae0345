from typing import AsyncGenerator, List, Optional

import httpx
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.pool import StaticPool

from filmstore.api.client import APIClient
from filmstore.cart.schemas import CartLine
from filmstore.config.database import init_db
from filmstore.movies.models import FavoriteFlag  # noqa: F401
from filmstore.movies.schemas import Movie
from filmstore.tests.fakes import (
    SAMPLE_MOVIES,
    TEST_BASE_URL,
    TEST_IMAGES_BASE_URL,
    TEST_USER,
    FakeBackend,
    create_backend_app
)


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend(SAMPLE_MOVIES)


@pytest.fixture
async def api_client(backend: FakeBackend) -> AsyncGenerator[APIClient, None]:
    """APIClient talking to the fake backend in-process."""
    transport = httpx.ASGITransport(app=create_backend_app(backend))
    client = APIClient(
        images_base_url=TEST_IMAGES_BASE_URL,
        client=httpx.AsyncClient(transport=transport, base_url=TEST_BASE_URL)
    )
    yield client
    await client.aclose()


@pytest.fixture
def sample_movies() -> List[Movie]:
    return [Movie(**data) for data in SAMPLE_MOVIES]


@pytest.fixture
def make_line():
    """Factory for CartLine values with sensible defaults."""
    counter = {"next_id": 1}

    def _make_line(
        name: str = "Inception",
        price: int = 12,
        order_amount: int = 1,
        image: Optional[str] = None,
        cart_id: Optional[int] = None,
    ) -> CartLine:
        if cart_id is None:
            cart_id = counter["next_id"]
        counter["next_id"] = max(counter["next_id"], cart_id) + 1
        return CartLine(
            cart_id=cart_id,
            name=name,
            image=image or f"{name.lower().replace(' ', '')}.png",
            price=price,
            category="Action",
            rating=8.0,
            year=2010,
            director="Christopher Nolan",
            description="",
            order_amount=order_amount,
            user_name=TEST_USER,
        )

    return _make_line


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory local storage per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    await init_db(engine)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    await engine.dispose()
