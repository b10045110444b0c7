# -*- coding: utf-8 -*-

"""
fetch -> parse -> extract, for one character or for a list of them.

Items are processed strictly one after another. A single broken page is
logged and skipped; persistent throttling aborts the whole batch.
"""

import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import quote_plus

from .errors import BatchAborted, ProcessingError, RateLimited, RetriesExhausted, ScraperError
from .extract import CharacterExtractor
from .fetch import WikiClient
from .log import get_logger
from .models import Character
from .rules import ParsingRules

logger = get_logger(__name__)


@dataclass
class BatchResult:
    records: List[Character] = field(default_factory=list)
    failures: List[ProcessingError] = field(default_factory=list)


def resolve_url(identifier: str, base_url: str) -> str:
    """A full URL is kept, a character name is appended (form-encoded) to base_url."""
    identifier = identifier.strip()
    if identifier.startswith(("http://", "https://")):
        return identifier
    return base_url + quote_plus(identifier)


def is_rate_limit_error(err: BaseException, rules: ParsingRules) -> bool:
    """Typed throttling errors, or an error whose own message names it. Causes are not inspected."""
    if isinstance(err, (RetriesExhausted, RateLimited)):
        return True
    return rules.is_rate_limit_text(getattr(err, "message", None) or str(err))


def scrape_character(client: WikiClient, extractor: CharacterExtractor, identifier: str) -> Character:
    url = resolve_url(identifier, client.config.base_url)
    doc = client.fetch_document(url)
    return extractor.extract(doc)


def scrape_batch(
    identifiers: Iterable[str],
    client: WikiClient,
    extractor: CharacterExtractor,
    request_delay: Optional[float] = None,
) -> BatchResult:
    """
    Scrape every identifier in order.

    After each successful item (except the last one) the batch waits
    `request_delay` seconds. Raises BatchAborted when the wiki keeps
    answering 429; the records collected so far travel with the exception.
    """
    items = list(identifiers)
    delay = client.config.request_delay if request_delay is None else request_delay
    result = BatchResult()

    for i, identifier in enumerate(items):
        url = resolve_url(identifier, client.config.base_url)
        logger.info("[%d/%d] %s", i + 1, len(items), url)

        try:
            record = scrape_character(client, extractor, identifier)
        except ScraperError as e:
            err = ProcessingError(url, e)
            if is_rate_limit_error(e, client.rules):
                raise BatchAborted(
                    "rate limit reached; wait a while before running again",
                    records=result.records,
                    cause=err,
                ) from e
            logger.error("%s", err)
            result.failures.append(err)
            continue

        result.records.append(record)
        if i < len(items) - 1 and delay > 0:
            time.sleep(delay)

    return result
