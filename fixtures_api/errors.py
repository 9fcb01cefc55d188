from typing import Optional


class ScrapeError(Exception):
    """Base class for errors raised by the scraping pipeline."""


class ValidationError(ScrapeError):
    """Request input is missing or unusable."""


class FetchError(ScrapeError):
    """Page could not be retrieved (network failure or non-2xx status)."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
