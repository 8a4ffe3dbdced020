import os
from typing import List

class Settings:
    GITHUB_API: str = os.getenv("GITHUB_API", "https://api.github.com").rstrip("/")
    GITHUB_TIMEOUT: float = float(os.getenv("GITHUB_TIMEOUT", "20"))
    CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
