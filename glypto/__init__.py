"""
glypto

Webpage metadata scraping with pluggable, priority-ordered providers.
- Providers: recognize markup patterns and extract key/value pairs
- Registry:  orders providers, dispatches nodes, resolves fields
- Scraper:   walks a parsed document and fills a Metadata accumulator

Public API surface:
  Entry points: create_scraper, create_scraper_with_providers,
                scrape_metadata, scrape_html, scrape_file
  Core classes: Scraper, ProviderRegistry, Metadata, ProviderLoader
  Providers:    MetadataProvider and the five built-ins
  Data models:  Feed, MetadataSummary
  Error types:  GlyptoError, DocumentError, ProviderError, ParserError
"""

# --- Core classes ---
from .scraper import Scraper
from .registry import ProviderRegistry, Extraction
from .metadata import Metadata
from .loader import ProviderLoader, BuiltinProvider, is_provider

# --- Providers ---
from .providers import (
    MetadataProvider,
    OpenGraphProvider,
    TwitterProvider,
    StandardMetaProvider,
    OtherElementsProvider,
    JsonLdProvider,
)

# --- Entry points ---
from .main import (
    create_scraper,
    create_scraper_with_providers,
    scrape_metadata,
    scrape_html,
    scrape_file,
)

# --- Data models ---
from .schemas import Feed, MetadataSummary

# --- Exceptions ---
from .exceptions import GlyptoError, DocumentError, ProviderError, ParserError

__version__ = "1.0.0"
__all__ = [
    "Scraper",
    "ProviderRegistry",
    "Extraction",
    "Metadata",
    "ProviderLoader",
    "BuiltinProvider",
    "is_provider",
    "MetadataProvider",
    "OpenGraphProvider",
    "TwitterProvider",
    "StandardMetaProvider",
    "OtherElementsProvider",
    "JsonLdProvider",
    "create_scraper",
    "create_scraper_with_providers",
    "scrape_metadata",
    "scrape_html",
    "scrape_file",
    "Feed",
    "MetadataSummary",
    "GlyptoError",
    "DocumentError",
    "ProviderError",
    "ParserError",
]
