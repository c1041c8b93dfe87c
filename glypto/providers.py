"""
Metadata providers.

Each provider recognizes one family of markup (Open Graph tags, Twitter
Card tags, plain <meta> tags, structural elements, JSON-LD blocks),
extracts a single key/value pair from a node it recognizes, and picks the
best value for a field out of the lists it produced earlier.

Providers are stateless.  The ProviderRegistry orders them by priority
(lower number = consulted first), so the Scraper and Metadata never need
to know which concrete classes exist.
"""

import json
from abc import ABC, abstractmethod
from typing import Optional

from .dom import tag_name, get_attribute, get_text_content
from .logger import get_module_logger

logger = get_module_logger("providers")

# Field name -> values in the order they were observed
FieldData = dict[str, list[str]]


class MetadataProvider(ABC):
    """Abstract base class for metadata providers."""

    # Namespace key in the Metadata accumulator
    name: str = ""
    # Lower is consulted first; fractions are fine (0.5 sits before 1)
    priority: float = 0

    @abstractmethod
    def can_handle(self, element) -> bool:
        """
        Decide whether this provider recognizes a markup node.

        Must be side-effect free and must return False (never raise) for
        nodes that lack the attributes it looks at.
        """
        pass

    @abstractmethod
    def extract(self, element) -> Optional[tuple[str, str]]:
        """
        Extract one (key, value) pair from a node.

        Returns None for nodes this provider does not recognize, or when a
        required attribute or text is missing.
        """
        pass

    def get_value(self, key: str, data: FieldData) -> Optional[str]:
        """Return the first value observed for key, or None."""
        values = data.get(key)
        return values[0] if values else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority!r})"


class _PrefixedMetaProvider(MetadataProvider):
    """
    Shared logic for <meta> families identified by a prefix on
    property= or name= (og:, twitter:).
    """

    prefix: str = ""

    def _prefixed_attribute(self, element) -> Optional[str]:
        # property= is checked before name=; whichever carries the prefix wins
        for attr in ("property", "name"):
            value = get_attribute(element, attr)
            if value and value.startswith(self.prefix):
                return value
        return None

    def can_handle(self, element) -> bool:
        return tag_name(element) == "meta" and self._prefixed_attribute(element) is not None

    def extract(self, element) -> Optional[tuple[str, str]]:
        if not self.can_handle(element):
            return None

        content = get_attribute(element, "content")
        if not content:
            return None

        key = self._prefixed_attribute(element)[len(self.prefix):]
        return key, content


class OpenGraphProvider(_PrefixedMetaProvider):
    """<meta property="og:*"> tags."""

    name = "openGraph"
    priority = 1
    prefix = "og:"


class TwitterProvider(_PrefixedMetaProvider):
    """<meta name="twitter:*"> tags."""

    name = "twitter"
    priority = 2
    prefix = "twitter:"


# Prefixes owned by higher-priority providers
RESERVED_PREFIXES = (OpenGraphProvider.prefix, TwitterProvider.prefix)


class StandardMetaProvider(MetadataProvider):
    """
    Plain <meta name=... content=...> tags that are neither Open Graph nor
    Twitter.  When both name= and property= are present, name= is the key.
    """

    name = "meta"
    priority = 3

    def can_handle(self, element) -> bool:
        if tag_name(element) != "meta":
            return False

        content = get_attribute(element, "content")
        name = get_attribute(element, "name")
        prop = get_attribute(element, "property")

        if not content or not (name or prop):
            return False

        for value in (name, prop):
            if value and value.startswith(RESERVED_PREFIXES):
                return False
        return True

    def extract(self, element) -> Optional[tuple[str, str]]:
        if not self.can_handle(element):
            return None

        key = get_attribute(element, "name") or get_attribute(element, "property")
        return key, get_attribute(element, "content")


class OtherElementsProvider(MetadataProvider):
    """
    Structural fallbacks: <title>, the first <h1>, and icon <link>s.

    Text is trimmed but an all-whitespace element still yields "" (it did
    have text); only an element with no text at all is skipped.
    """

    name = "other"
    priority = 4

    # rel value -> field key
    ICON_RELS = {
        "icon": "icon",
        "shortcut icon": "shortcut icon",
    }

    def can_handle(self, element) -> bool:
        tag = tag_name(element)
        if tag in ("title", "h1"):
            return True
        return tag == "link" and bool(get_attribute(element, "rel"))

    def extract(self, element) -> Optional[tuple[str, str]]:
        if not self.can_handle(element):
            return None

        tag = tag_name(element)

        if tag in ("title", "h1"):
            text = get_text_content(element)
            if text is None:
                return None
            key = "title" if tag == "title" else "firstHeading"
            return key, text.strip()

        # link
        key = self.ICON_RELS.get(get_attribute(element, "rel"))
        href = get_attribute(element, "href")
        if key is None or not href:
            return None
        return key, href


class JsonLdProvider(MetadataProvider):
    """
    <script type="application/ld+json"> blocks describing an Article or
    WebPage.

    One block yields one pair: headline (as title), else description, else
    image.url.  Broken JSON is treated as "nothing here".
    """

    name = "jsonLd"
    priority = 0.5

    MIME_TYPE = "application/ld+json"
    SUPPORTED_TYPES = ("Article", "WebPage")

    def can_handle(self, element) -> bool:
        return (
            tag_name(element) == "script"
            and get_attribute(element, "type") == self.MIME_TYPE
        )

    def extract(self, element) -> Optional[tuple[str, str]]:
        if not self.can_handle(element):
            return None

        content = get_text_content(element)
        if not content:
            return None

        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            logger.debug(f"Ignoring malformed JSON-LD block: {e}")
            return None

        if not isinstance(data, dict) or data.get("@type") not in self.SUPPORTED_TYPES:
            return None

        headline = data.get("headline")
        if headline and isinstance(headline, str):
            return "title", headline

        description = data.get("description")
        if description and isinstance(description, str):
            return "description", description

        image = data.get("image")
        if isinstance(image, dict):
            url = image.get("url")
            if url and isinstance(url, str):
                return "image", url

        return None
