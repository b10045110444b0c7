# -*- coding: utf-8 -*-

"""
HTTP access to the wiki.

wikiwiki.jp throttles aggressively. A throttled page is retried with a
linear backoff (base_delay * attempt); once the last attempt is throttled
too, RetriesExhausted is raised so the batch can stop instead of hammering
the server. Every other failure is raised immediately.
"""

import time
from typing import Optional

import requests

from .config import Config
from .dom import Document
from .errors import (
    HTTPStatusError,
    ParseError,
    RateLimited,
    RequestConstructionError,
    RetriesExhausted,
    TransportError,
)
from .log import get_logger
from .rules import DEFAULT_RULES, ParsingRules

logger = get_logger(__name__)

CONSTRUCTION_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.URLRequired,
    requests.exceptions.InvalidHeader,
)


class WikiClient:
    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
        rules: ParsingRules = DEFAULT_RULES,
    ) -> None:
        self.config = config or Config()
        self.rules = rules
        self.s = session or requests.Session()
        self.s.headers.update(
            {
                "User-Agent": self.config.user_agent,
                "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
            }
        )

    def get_html(self, url: str) -> str:
        """One GET. Returns the UTF-8 body of a 200 response."""
        try:
            r = self.s.get(url, timeout=self.config.http_timeout)
        except CONSTRUCTION_ERRORS as e:
            raise RequestConstructionError("could not build request", url=url, cause=e) from e
        except requests.RequestException as e:
            if self.is_throttled_exception(e):
                raise RateLimited("rate limited (transport)", url=url, cause=e) from e
            raise TransportError("HTTP request failed", url=url, cause=e) from e

        # non-200 bodies are never inspected, the status alone decides
        if r.status_code == self.rules.rate_limit_status:
            raise RateLimited("429 Too Many Requests", url=url)
        if r.status_code != 200:
            raise HTTPStatusError(
                f"HTTP error: {r.status_code} {r.reason or ''}".rstrip(),
                status_code=r.status_code,
                reason=r.reason or "",
                url=url,
            )
        return r.content.decode("utf-8", errors="replace")

    def is_throttled_exception(self, e: requests.RequestException) -> bool:
        response = getattr(e, "response", None)
        if response is not None and getattr(response, "status_code", None) == self.rules.rate_limit_status:
            return True
        return self.rules.is_rate_limit_phrase(str(e))

    def parse(self, html: str, url: Optional[str] = None) -> Document:
        try:
            return Document.from_html(html, url=url)
        except Exception as e:
            raise ParseError("HTML parse error", url=url, cause=e) from e

    def fetch_document(self, url: str) -> Document:
        """
        Fetch and parse `url`, retrying while rate limited.

        Attempt n (0-based) that gets throttled waits base_delay * (n + 1)
        before the next one; the last attempt raises RetriesExhausted.
        """
        attempts = self.config.max_attempts
        for attempt in range(attempts):
            try:
                return self.parse(self.get_html(url), url=url)
            except RateLimited as e:
                if attempt < attempts - 1:
                    delay = self.config.base_delay * (attempt + 1)
                    logger.warning(
                        "429: retrying in %.1fs (attempt %d/%d): %s", delay, attempt + 2, attempts, url
                    )
                    time.sleep(delay)
                    continue
                raise RetriesExhausted(
                    "max retries reached while rate limited", attempts=attempts, url=url, cause=e
                ) from e

        raise RetriesExhausted("no attempts allowed", attempts=attempts, url=url)
