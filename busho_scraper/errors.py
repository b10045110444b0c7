# -*- coding: utf-8 -*-

"""
Exceptions raised by the scraper.

Fetch errors fall into two groups: RateLimited is retried by the client,
everything else under FetchError fails the current item right away.
RetriesExhausted and BatchAborted stop a whole batch.
"""

from typing import Any, Dict, List, Optional


class ScraperError(Exception):
    """Base exception for all scraper errors."""

    def __init__(
        self,
        message: str,
        *,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"details: {self.details}")
        if self.cause:
            parts.append(f"caused by: {self.cause}")
        return " | ".join(parts)


class ConfigError(ScraperError):
    """Invalid configuration value (usually from the environment)."""

    def __init__(self, message: str, *, key: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        if key:
            self.details["key"] = key


class SourceError(ScraperError):
    """The list of characters to scrape could not be loaded."""


# -----------------------------
# Fetch
# -----------------------------

class FetchError(ScraperError):
    """A single page could not be fetched or parsed."""

    def __init__(self, message: str, *, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.url = url
        if url:
            self.details["url"] = url


class RequestConstructionError(FetchError):
    """The request could not be built (bad URL, missing scheme...)."""


class TransportError(FetchError):
    """Network-level failure: DNS, connection reset, timeout."""


class RateLimited(FetchError):
    """HTTP 429 or a response/error mentioning a rate-limit marker. Retryable."""


class HTTPStatusError(FetchError):
    """Any other non-200 status. Not retried."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.reason = reason
        self.details["status_code"] = status_code


class ParseError(FetchError):
    """The response body could not be parsed as HTML."""


class RetriesExhausted(FetchError):
    """Still rate limited after the last allowed attempt."""

    def __init__(self, message: str, *, attempts: int, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts
        self.details["attempts"] = attempts


# -----------------------------
# Batch
# -----------------------------

class ProcessingError(ScraperError):
    """One batch item failed; the batch moves on to the next one."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"failed to process {url}", cause=cause)
        self.url = url


class BatchAborted(ScraperError):
    """The remote source keeps throttling us; remaining items are not attempted."""

    def __init__(self, message: str, *, records: Optional[List[Any]] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.records = records or []
