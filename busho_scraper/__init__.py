# -*- coding: utf-8 -*-

"""
busho_scraper – character sheets from the Sangokushi VIII Remake wiki.

Fetches a character page (by name or URL), locates the right tables among
many near-identical ones and turns them into a flat, typed record:
stats, personality, fame/greed/strategy, talent, interests, tactics, skills.

Usage:
  from busho_scraper import Config, WikiClient, CharacterExtractor, scrape_character

  cfg = Config.from_env()
  record = scrape_character(WikiClient(cfg), CharacterExtractor(), "曹操")
"""

from .classify import TableClassifier, TableRole
from .config import Config
from .errors import (
    BatchAborted,
    ConfigError,
    FetchError,
    HTTPStatusError,
    ParseError,
    ProcessingError,
    RateLimited,
    RequestConstructionError,
    RetriesExhausted,
    ScraperError,
    SourceError,
    TransportError,
)
from .extract import CharacterExtractor
from .fetch import WikiClient
from .models import Character
from .pipeline import BatchResult, resolve_url, scrape_batch, scrape_character
from .rules import DEFAULT_RULES, ParsingRules

__version__ = "1.0.0"

__all__ = [
    "BatchAborted",
    "BatchResult",
    "Character",
    "CharacterExtractor",
    "Config",
    "ConfigError",
    "DEFAULT_RULES",
    "FetchError",
    "HTTPStatusError",
    "ParseError",
    "ParsingRules",
    "ProcessingError",
    "RateLimited",
    "RequestConstructionError",
    "RetriesExhausted",
    "ScraperError",
    "SourceError",
    "TableClassifier",
    "TableRole",
    "TransportError",
    "WikiClient",
    "resolve_url",
    "scrape_batch",
    "scrape_character",
]
