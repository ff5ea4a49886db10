import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./posts.db")
    PER_PAGE: int = int(os.getenv("PER_PAGE", 10))
    MAX_PER_PAGE: int = 100
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", 4000))


settings = Settings()
