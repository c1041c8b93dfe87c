"""
Traversal driver.

Walks a parsed document in fixed phases and routes each interesting node
through the ProviderRegistry:

  1. every <meta>
  2. the first <title>
  3. the first <h1>
  4. every <link> with a rel attribute
  5. every <link rel="alternate"> -> Feed records (bypasses providers)

Optionally, between 4 and 5, every <script type="application/ld+json">
is dispatched too (see scan_structured_data).

Input:  a queryable document (BeautifulSoup or any bs4 Tag)
Output: Metadata
"""

from .dom import is_document, get_attribute
from .exceptions import DocumentError
from .metadata import Metadata
from .registry import ProviderRegistry
from .schemas import Feed
from .logger import get_module_logger

logger = get_module_logger("scraper")


class Scraper:
    """Scrapes one document at a time into a fresh Metadata."""

    def __init__(self, registry: ProviderRegistry, scan_structured_data: bool = False):
        self.registry = registry
        self.scan_structured_data = scan_structured_data

    def scrape(self, document) -> Metadata:
        """
        Scrape metadata from a parsed document.

        Args:
            document: BeautifulSoup document (or any element exposing find/find_all)

        Returns:
            Metadata bound to this scraper's registry

        Raises:
            DocumentError: document cannot be queried
        """
        if not is_document(document):
            raise DocumentError(
                "DOM Document expected.",
                details={"received": type(document).__name__}
            )

        result = Metadata(self.registry)

        # --- Phase 1: <meta> tags (Open Graph, Twitter, standard) ---
        for tag in document.find_all("meta"):
            self._scrape_element(tag, result)

        # --- Phase 2/3: first <title> and first <h1> ---
        for name in ("title", "h1"):
            tag = document.find(name)
            if tag is not None:
                self._scrape_element(tag, result)

        # --- Phase 4: <link rel=...> (icons) ---
        for tag in document.find_all("link", rel=True):
            self._scrape_element(tag, result)

        # --- Optional: embedded JSON-LD ---
        if self.scan_structured_data:
            for tag in document.find_all("script"):
                if get_attribute(tag, "type") == "application/ld+json":
                    self._scrape_element(tag, result)

        # --- Phase 5: feeds ---
        result.feeds.extend(self._find_feeds(document))

        value_count = sum(
            len(values)
            for fields in result.provider_data.values()
            for values in fields.values()
        )
        logger.info(f"Scraped {value_count} values and {len(result.feeds)} feeds")
        return result

    def _scrape_element(self, element, result: Metadata) -> None:
        extraction = self.registry.dispatch(element)
        if extraction is None:
            logger.debug(f"No provider extracted from <{element.name}>")
            return
        result.add_data(extraction.provider.name, extraction.key, extraction.value)

    def _find_feeds(self, document) -> list[Feed]:
        """
        <link rel="alternate"> elements with an href, in document order.

        rel must be exactly "alternate"; "alternate stylesheet" and friends
        are not feeds.  Links without href are skipped.
        """
        feeds = []
        for tag in document.find_all("link", rel=True):
            if get_attribute(tag, "rel") != "alternate":
                continue
            href = get_attribute(tag, "href")
            if not href:
                continue
            feeds.append(Feed(
                title=get_attribute(tag, "title") or None,
                type=get_attribute(tag, "type") or "",
                href=href
            ))
        return feeds
