"""
Entry points for glypto.

Wires ProviderLoader → ProviderRegistry → Scraper and offers one-call
helpers for parsed documents, raw markup and local files.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from .dom import parse_html
from .loader import ProviderLoader
from .metadata import Metadata
from .providers import MetadataProvider
from .registry import ProviderRegistry
from .scraper import Scraper
from .logger import get_module_logger

logger = get_module_logger("main")


def create_scraper(
    provider_names: Optional[Iterable[str]] = None,
    scan_structured_data: bool = False
) -> Scraper:
    """
    Create a Scraper with built-in providers.

    Args:
        provider_names: Registry names to load (e.g. ["jsonLd", "openGraph"]).
                        Defaults to GLYPTO_PROVIDERS, then the four defaults.
        scan_structured_data: Also dispatch <script type="application/ld+json">

    Returns:
        Configured Scraper
    """
    loader = ProviderLoader()

    if provider_names is not None:
        providers = loader.load_from_names(provider_names)
        if not providers:
            logger.warning("No known providers requested, using defaults")
            providers = loader.load_defaults()
    else:
        providers = loader.load_from_env()

    return Scraper(ProviderRegistry(providers), scan_structured_data=scan_structured_data)


def create_scraper_with_providers(
    providers: Iterable[MetadataProvider],
    scan_structured_data: bool = False
) -> Scraper:
    """Create a Scraper around caller-supplied providers (an empty list is allowed)."""
    validated = ProviderLoader().validate(providers)
    return Scraper(ProviderRegistry(validated), scan_structured_data=scan_structured_data)


def scrape_metadata(document) -> Metadata:
    """Scrape an already parsed document with the default configuration."""
    return create_scraper().scrape(document)


def scrape_html(
    markup: Union[str, bytes],
    parser: str = "html5lib",
    providers: Optional[Iterable[MetadataProvider]] = None,
    scan_structured_data: bool = False
) -> Metadata:
    """
    Parse markup and scrape it.

    Args:
        markup: HTML text or bytes
        parser: BeautifulSoup tree builder ("html5lib" or "lxml")
        providers: Custom providers; defaults to create_scraper()'s choice
        scan_structured_data: Also dispatch JSON-LD script blocks

    Returns:
        Metadata
    """
    document = parse_html(markup, parser=parser)
    if providers is None:
        scraper = create_scraper(scan_structured_data=scan_structured_data)
    else:
        scraper = create_scraper_with_providers(providers, scan_structured_data=scan_structured_data)
    return scraper.scrape(document)


def scrape_file(
    file_path: Union[str, Path],
    parser: str = "html5lib",
    providers: Optional[Iterable[MetadataProvider]] = None,
    scan_structured_data: bool = False
) -> Metadata:
    """Scrape a local HTML file."""
    file_path = Path(file_path)
    logger.info(f"Scraping file: {file_path}")
    # Raw bytes: BeautifulSoup works out the encoding from the document itself
    return scrape_html(
        file_path.read_bytes(),
        parser=parser,
        providers=providers,
        scan_structured_data=scan_structured_data
    )
