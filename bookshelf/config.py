import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Bookshelf")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Shelves
    default_capacity: int = int(os.getenv("SHELF_DEFAULT_CAPACITY", "10"))
    # Capacity the interactive UI uses for newly created shelves
    ui_max_books: int = int(os.getenv("SHELF_UI_MAX_BOOKS", "4"))


settings = Settings()
