"""
Accumulator for everything the Scraper observed on one document.

Raw values are kept per provider and per field, in observation order,
duplicates included.  The convenience properties (title, description,
...) are computed on every access by asking the registry to resolve the
field across providers.
"""

from typing import Optional

from .registry import ProviderRegistry, ProviderData
from .providers import FieldData
from .schemas import Feed, MetadataSummary

DEFAULT_FAVICON = "/favicon.ico"


class Metadata:
    """Per-document scrape result."""

    def __init__(self, registry: Optional[ProviderRegistry] = None):
        self.registry = registry if registry is not None else ProviderRegistry()
        self.provider_data: ProviderData = {}
        # Not priority-resolved; consumers may append to it
        self.feeds: list[Feed] = []

        # Pre-seed a namespace for every known provider so lookups by
        # provider name see an empty mapping instead of nothing
        for provider in self.registry.get_providers():
            self.provider_data[provider.name] = {}

    def add_data(self, provider_name: str, key: str, value: str) -> None:
        """Append value under provider_name/key (no dedup, no overwrite)."""
        fields = self.provider_data.setdefault(provider_name, {})
        fields.setdefault(key, []).append(value)

    def resolve_value(self, key: str) -> Optional[str]:
        return self.registry.resolve_value(key, self.provider_data)

    # --- Resolved fields ---

    @property
    def favicon(self) -> str:
        return (
            self.resolve_value("icon")
            or self.resolve_value("shortcut icon")
            or DEFAULT_FAVICON
        )

    @property
    def title(self) -> Optional[str]:
        return self.resolve_value("title") or self.resolve_value("firstHeading")

    @property
    def description(self) -> Optional[str]:
        return self.resolve_value("description")

    @property
    def image(self) -> Optional[str]:
        return self.resolve_value("image")

    @property
    def url(self) -> Optional[str]:
        return self.resolve_value("url")

    @property
    def site_name(self) -> Optional[str]:
        # Twitter calls it "site", Open Graph "site_name"
        return self.resolve_value("site_name") or self.resolve_value("site")

    # --- Per-provider namespaces ---

    def get_provider_data(self, provider_name: str) -> FieldData:
        """Raw field lists for one provider, or {} if it never contributed."""
        return self.provider_data.get(provider_name, {})

    @property
    def open_graph(self) -> FieldData:
        return self.get_provider_data("openGraph")

    @property
    def twitter_card(self) -> FieldData:
        return self.get_provider_data("twitter")

    @property
    def meta(self) -> FieldData:
        return self.get_provider_data("meta")

    @property
    def other(self) -> FieldData:
        return self.get_provider_data("other")

    @property
    def json_ld(self) -> FieldData:
        return self.get_provider_data("jsonLd")

    def to_summary(self) -> MetadataSummary:
        """Snapshot of the resolved values, ready for model_dump()."""
        return MetadataSummary(
            title=self.title,
            description=self.description,
            image=self.image,
            url=self.url,
            site_name=self.site_name,
            favicon=self.favicon,
            feeds=list(self.feeds),
            open_graph=self.open_graph,
            twitter_card=self.twitter_card,
        )
