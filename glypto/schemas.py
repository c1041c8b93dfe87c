"""
Pydantic models for data that leaves the scraper.

Feed:            a syndication link found via <link rel="alternate">
MetadataSummary: flattened, JSON-ready view of a Metadata result
"""

from typing import Optional
from pydantic import BaseModel, Field


class Feed(BaseModel):
    """An RSS/Atom/JSON feed advertised by the page."""
    title: Optional[str] = None
    type: str = ""      # Declared MIME type, "" when the link has none
    href: str           # Taken as written; relative URLs are not resolved


class MetadataSummary(BaseModel):
    """Resolved values plus the raw Open Graph / Twitter namespaces."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    site_name: Optional[str] = None
    favicon: str = "/favicon.ico"
    feeds: list[Feed] = Field(default_factory=list)
    open_graph: dict[str, list[str]] = Field(default_factory=dict)
    twitter_card: dict[str, list[str]] = Field(default_factory=dict)
