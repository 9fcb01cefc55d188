import os

class Settings:
    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # Scraping
    BASE_URL: str = os.getenv("BASE_URL", "https://www.futbol24.com/")
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (compatible; RSBS-Scraper/1.0; +https://yourdomain.example)"
    )
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Courtesy pause before every network fetch, in milliseconds
    COURTESY_DELAY_MIN_MS: int = int(os.getenv("COURTESY_DELAY_MIN_MS", "250"))
    COURTESY_DELAY_MAX_MS: int = int(os.getenv("COURTESY_DELAY_MAX_MS", "500"))

    # Cache TTL in seconds
    CACHE_TTL_SECONDS: float = float(os.getenv("CACHE_TTL_SECONDS", "30"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

settings = Settings()
