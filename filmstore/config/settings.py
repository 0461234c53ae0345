from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


load_dotenv()

class Settings(BaseSettings):
    # Project
    PROJECT_NAME: str = "Film Store"
    LOG_LEVEL: str = "INFO"

    # Backend
    BASE_URL: str = "http://kasimadalan.pe.hu/movies/"
    IMAGES_BASE_URL: str = "http://kasimadalan.pe.hu/movies/images/"

    # Account shared by every device
    USER_NAME: str = "malis_movie"

    # Storefront
    MAX_ORDER_AMOUNT: int = 20
    CURRENCY_SYMBOL: str = "₺"

    # Local storage (favorite flags)
    FAVORITES_DATABASE_URL: str = "sqlite+aiosqlite:///./filmstore.db"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


settings = Settings()
