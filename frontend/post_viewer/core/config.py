import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Base URL of the post store API
    POST_STORE_URL: str = os.getenv("POST_STORE_URL", "http://localhost:4000").rstrip("/")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", 5.0))

    # Presentation
    SITE_TITLE: str = os.getenv("SITE_TITLE", "GoOnRails")
    SITE_AUTHOR: str = os.getenv("SITE_AUTHOR", "Bin Joy")
    # 0 shows full post content on the list screen
    EXCERPT_LENGTH: int = int(os.getenv("EXCERPT_LENGTH", 0))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", 3000))


settings = Settings()
