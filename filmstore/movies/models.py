from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from ..config.database import Base


class FavoriteFlag(Base):
    __tablename__ = "favorite_flags"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __str__(self):
        return f"{self.key}={self.value}"
