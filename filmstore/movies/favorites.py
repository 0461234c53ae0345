from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import FavoriteFlag


FAVORITE_KEY_PREFIX = "fav_"


def favorite_key(movie_id: int) -> str:
    return f"{FAVORITE_KEY_PREFIX}{movie_id}"


async def get_favorite(db: AsyncSession, movie_id: int) -> bool:
    flag = await db.get(FavoriteFlag, favorite_key(movie_id))
    return bool(flag and flag.value)


async def set_favorite(db: AsyncSession, movie_id: int, value: bool) -> None:
    key = favorite_key(movie_id)
    flag = await db.get(FavoriteFlag, key)

    if flag:
        flag.value = value
    else:
        db.add(FavoriteFlag(key=key, value=value))

    await db.commit()


async def toggle_favorite(db: AsyncSession, movie_id: int) -> bool:
    value = not await get_favorite(db, movie_id)
    await set_favorite(db, movie_id, value)
    return value


async def list_favorite_ids(db: AsyncSession) -> List[int]:
    result = await db.execute(
        select(FavoriteFlag.key).where(
            FavoriteFlag.key.startswith(FAVORITE_KEY_PREFIX),
            FavoriteFlag.value.is_(True)
        )
    )
    ids = []
    for key in result.scalars().all():
        suffix = key[len(FAVORITE_KEY_PREFIX):]
        if suffix.isdigit():
            ids.append(int(suffix))
    return sorted(ids)
