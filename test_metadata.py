"""Unit tests for the Metadata accumulator."""

from glypto.metadata import Metadata
from glypto.loader import ProviderLoader
from glypto.registry import ProviderRegistry
from glypto.schemas import Feed, MetadataSummary
from glypto.providers import StandardMetaProvider


def default_metadata() -> Metadata:
    return Metadata(ProviderRegistry(ProviderLoader().load_defaults()))


class TestAddData:
    """Accumulating raw values."""

    def test_adds_value(self):
        metadata = Metadata(ProviderRegistry([StandardMetaProvider()]))
        metadata.add_data("meta", "title", "Test Title")
        assert metadata.meta == {"title": ["Test Title"]}

    def test_appends_in_call_order_without_dedup(self):
        metadata = default_metadata()
        for value in ["First", "Second", "First"]:
            metadata.add_data("meta", "title", value)
        assert metadata.meta["title"] == ["First", "Second", "First"]

    def test_creates_unknown_namespace(self):
        metadata = default_metadata()
        metadata.add_data("newProvider", "key", "value")
        assert metadata.get_provider_data("newProvider") == {"key": ["value"]}

    def test_namespaces_preseeded_from_registry(self):
        metadata = default_metadata()
        assert set(metadata.provider_data) == {"openGraph", "twitter", "meta", "other"}
        assert all(fields == {} for fields in metadata.provider_data.values())

    def test_without_registry(self):
        metadata = Metadata()
        metadata.add_data("meta", "title", "T")
        assert metadata.provider_data == {"meta": {"title": ["T"]}}
        # No providers to resolve through
        assert metadata.title is None


class TestResolvedFields:
    """Convenience properties backed by registry resolution."""

    def test_all_missing(self):
        metadata = default_metadata()
        assert metadata.title is None
        assert metadata.description is None
        assert metadata.image is None
        assert metadata.url is None
        assert metadata.site_name is None

    def test_favicon_default(self):
        assert default_metadata().favicon == "/favicon.ico"

    def test_favicon_prefers_icon_over_shortcut_icon(self):
        metadata = default_metadata()
        metadata.add_data("other", "shortcut icon", "/legacy.ico")
        assert metadata.favicon == "/legacy.ico"
        metadata.add_data("other", "icon", "/icon.png")
        assert metadata.favicon == "/icon.png"

    def test_favicon_from_any_provider(self):
        metadata = default_metadata()
        metadata.add_data("meta", "icon", "custom-icon.png")
        assert metadata.favicon == "custom-icon.png"

    def test_title_priority(self):
        metadata = default_metadata()
        metadata.add_data("meta", "title", "T2")
        metadata.add_data("twitter", "title", "T1")
        metadata.add_data("openGraph", "description", "D")
        assert metadata.title == "T1"

    def test_title_falls_back_to_first_heading(self):
        metadata = default_metadata()
        metadata.add_data("other", "firstHeading", "Heading")
        assert metadata.title == "Heading"
        metadata.add_data("other", "title", "Document Title")
        assert metadata.title == "Document Title"

    def test_blank_title_falls_back_to_first_heading(self):
        metadata = default_metadata()
        metadata.add_data("other", "title", "")
        metadata.add_data("other", "firstHeading", "Heading")
        assert metadata.title == "Heading"

    def test_description_image_url(self):
        metadata = default_metadata()
        metadata.add_data("meta", "description", "Plain")
        metadata.add_data("openGraph", "description", "Rich")
        metadata.add_data("openGraph", "image", "/og.png")
        metadata.add_data("twitter", "image", "/tw.png")
        metadata.add_data("openGraph", "url", "https://example.com/a")
        assert metadata.description == "Rich"
        assert metadata.image == "/og.png"
        assert metadata.url == "https://example.com/a"

    def test_site_name_prefers_site_name_field(self):
        metadata = default_metadata()
        metadata.add_data("twitter", "site", "@example")
        assert metadata.site_name == "@example"
        metadata.add_data("openGraph", "site_name", "Example")
        assert metadata.site_name == "Example"


class TestNamespaces:
    """Per-provider accessors."""

    def test_empty_for_unknown_providers(self):
        metadata = Metadata()
        assert metadata.open_graph == {}
        assert metadata.twitter_card == {}
        assert metadata.meta == {}
        assert metadata.other == {}
        assert metadata.json_ld == {}
        assert metadata.get_provider_data("nope") == {}

    def test_named_accessors(self):
        metadata = default_metadata()
        metadata.add_data("openGraph", "title", "OG")
        metadata.add_data("twitter", "card", "summary")
        metadata.add_data("other", "title", "Doc")
        metadata.add_data("jsonLd", "title", "LD")
        assert metadata.open_graph == {"title": ["OG"]}
        assert metadata.twitter_card == {"card": ["summary"]}
        assert metadata.other == {"title": ["Doc"]}
        assert metadata.json_ld == {"title": ["LD"]}


class TestFeedsAndSummary:
    """Feed list and JSON summary."""

    def test_feeds_start_empty_and_are_mutable(self):
        metadata = default_metadata()
        assert metadata.feeds == []
        metadata.feeds.append(Feed(title="RSS Feed", type="application/rss+xml", href="/feed.xml"))
        assert len(metadata.feeds) == 1
        assert metadata.feeds[0].title == "RSS Feed"

    def test_summary(self):
        metadata = default_metadata()
        metadata.add_data("openGraph", "title", "OG")
        metadata.add_data("twitter", "site", "@ex")
        metadata.feeds.append(Feed(href="/feed.xml"))

        summary = metadata.to_summary()

        assert isinstance(summary, MetadataSummary)
        assert summary.title == "OG"
        assert summary.site_name == "@ex"
        assert summary.favicon == "/favicon.ico"
        assert summary.open_graph == {"title": ["OG"]}
        assert summary.model_dump()["feeds"] == [
            {"title": None, "type": "", "href": "/feed.xml"}
        ]
