"""
Priority-ordered collection of metadata providers.

The registry answers two questions:
  dispatch()      - which provider owns this markup node, and what did it extract?
  resolve_value() - across everything accumulated, what is the best value for a field?

Both walk providers in ascending priority.  Equal priorities keep their
registration order (list.sort is stable).
"""

from typing import NamedTuple, Optional

from .providers import MetadataProvider, FieldData

# Provider name -> that provider's field data
ProviderData = dict[str, FieldData]


class Extraction(NamedTuple):
    """One successful dispatch: who extracted what."""
    provider: MetadataProvider
    key: str
    value: str


class ProviderRegistry:
    """Ordered set of providers."""

    def __init__(self, providers: Optional[list[MetadataProvider]] = None):
        self._providers: list[MetadataProvider] = []
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: MetadataProvider) -> None:
        """Add a provider and restore priority order."""
        self._providers.append(provider)
        self._providers.sort(key=lambda p: p.priority)

    def get_providers(self) -> list[MetadataProvider]:
        """Providers in priority order (a copy; mutating it has no effect here)."""
        return list(self._providers)

    def get_provider(self, name: str) -> Optional[MetadataProvider]:
        """First provider registered under name, or None."""
        for provider in self._providers:
            if provider.name == name:
                return provider
        return None

    def dispatch(self, element) -> Optional[Extraction]:
        """
        Route a markup node to the first provider that both recognizes it
        and extracts something from it.

        A provider that recognizes the node but extracts nothing does not
        stop the scan: the next provider in priority order gets its turn.
        """
        for provider in self._providers:
            if not provider.can_handle(element):
                continue
            result = provider.extract(element)
            if result:
                key, value = result
                return Extraction(provider, key, value)
        return None

    def resolve_value(self, key: str, provider_data: ProviderData) -> Optional[str]:
        """
        Ask each provider, in priority order, for its pick for key.

        Providers with no entry in provider_data are skipped.  The first
        non-empty answer wins.
        """
        for provider in self._providers:
            data = provider_data.get(provider.name)
            if data is None:
                continue
            value = provider.get_value(key, data)
            if value:
                return value
        return None
