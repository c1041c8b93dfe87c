"""
Provider loading.

Providers are wired explicitly: the BuiltinProvider enum is the plugin
registry, and configuration (GLYPTO_PROVIDERS or an explicit list) picks
names out of it.  Objects that come from elsewhere are checked with
is_provider() before the registry trusts them.
"""

import os
from enum import Enum
from numbers import Real
from typing import Iterable, Optional

from .providers import (
    MetadataProvider,
    OpenGraphProvider,
    TwitterProvider,
    StandardMetaProvider,
    OtherElementsProvider,
    JsonLdProvider,
)
from .exceptions import ProviderError
from .logger import get_module_logger

logger = get_module_logger("loader")

PROVIDERS_ENV_VAR = "GLYPTO_PROVIDERS"


class BuiltinProvider(Enum):
    """Providers shipped with glypto, keyed by their registry name."""
    OPEN_GRAPH = "openGraph"
    TWITTER = "twitter"
    META = "meta"
    OTHER = "other"
    JSON_LD = "jsonLd"

    @property
    def provider_class(self) -> type:
        return _BUILTIN_CLASSES[self]


_BUILTIN_CLASSES = {
    BuiltinProvider.OPEN_GRAPH: OpenGraphProvider,
    BuiltinProvider.TWITTER: TwitterProvider,
    BuiltinProvider.META: StandardMetaProvider,
    BuiltinProvider.OTHER: OtherElementsProvider,
    BuiltinProvider.JSON_LD: JsonLdProvider,
}

# JSON-LD is opt-in
DEFAULT_PROVIDERS = (
    BuiltinProvider.OPEN_GRAPH,
    BuiltinProvider.TWITTER,
    BuiltinProvider.META,
    BuiltinProvider.OTHER,
)


def is_provider(obj) -> bool:
    """Capability check: does obj look like a MetadataProvider?"""
    if isinstance(obj, type):
        return False
    if isinstance(obj, MetadataProvider):
        return True
    priority = getattr(obj, "priority", None)
    return (
        isinstance(getattr(obj, "name", None), str)
        and isinstance(priority, Real)
        and not isinstance(priority, bool)
        and callable(getattr(obj, "can_handle", None))
        and callable(getattr(obj, "extract", None))
        and callable(getattr(obj, "get_value", None))
    )


class ProviderLoader:
    """
    Builds provider lists.

    Usage:
        # The four default providers
        providers = ProviderLoader().load_defaults()

        # Explicit selection
        providers = ProviderLoader().load_from_names(["jsonLd", "openGraph"])

        # Whatever GLYPTO_PROVIDERS says, defaults if unset
        providers = ProviderLoader().load_from_env()
    """

    def load_defaults(self) -> list[MetadataProvider]:
        """Fresh instances of OpenGraph, Twitter, StandardMeta and OtherElements."""
        return [builtin.provider_class() for builtin in DEFAULT_PROVIDERS]

    def load_from_names(self, names: Iterable[str]) -> list[MetadataProvider]:
        """
        Instantiate built-in providers by registry name.

        Unknown names are logged and skipped; blank entries are ignored.
        """
        providers = []
        for raw_name in names:
            name = raw_name.strip()
            if not name:
                continue
            try:
                builtin = BuiltinProvider(name)
            except ValueError:
                logger.warning(f"Unknown provider '{name}', skipping")
                continue
            providers.append(builtin.provider_class())
        return providers

    def load_from_env(self, environ: Optional[dict] = None) -> list[MetadataProvider]:
        """
        Providers named in GLYPTO_PROVIDERS (comma-separated).

        Falls back to load_defaults() when the variable is unset or names
        nothing usable.
        """
        environ = os.environ if environ is None else environ
        configured = environ.get(PROVIDERS_ENV_VAR)

        if configured:
            providers = self.load_from_names(configured.split(","))
            if providers:
                logger.info(f"Loaded providers from {PROVIDERS_ENV_VAR}: {[p.name for p in providers]}")
                return providers
            logger.warning(f"{PROVIDERS_ENV_VAR} named no known providers, using defaults")

        return self.load_defaults()

    def validate(self, objects: Iterable) -> list[MetadataProvider]:
        """
        Check each object with is_provider().

        Returns the objects as a list; raises ProviderError on the first
        object that fails.
        """
        providers = []
        for obj in objects:
            if not is_provider(obj):
                raise ProviderError(
                    f"Object does not implement the provider interface: {obj!r}",
                    provider=repr(obj),
                    details={
                        "required": ["name", "priority", "can_handle", "extract", "get_value"]
                    }
                )
            providers.append(obj)
        return providers
