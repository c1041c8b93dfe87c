"""
Thin read-only view over BeautifulSoup elements.

Providers and the Scraper never touch bs4 APIs directly; they go through
these helpers so that "attribute absent" and "attribute present but empty"
(and likewise "no text" and "whitespace text") stay distinguishable.
"""

from typing import Optional, Union
from bs4 import BeautifulSoup, Comment, NavigableString

from .exceptions import ParserError

# Tree builders BeautifulSoup is allowed to use.
# html5lib parses the way browsers do; lxml is the fast path for large batches.
PARSERS = ("html5lib", "lxml")


def tag_name(element) -> Optional[str]:
    """Lower-cased tag name, or None for objects without one."""
    name = getattr(element, "name", None)
    if not isinstance(name, str):
        return None
    return name.lower()


def get_attribute(element, name: str) -> Optional[str]:
    """
    Read an attribute as a string.

    Returns None when the attribute is absent.  BeautifulSoup keeps
    multi-valued attributes (rel, class, ...) as lists; they are joined
    back with single spaces, so rel="shortcut icon" reads "shortcut icon".
    """
    attrs = getattr(element, "attrs", None)
    if not attrs:
        return None
    value = attrs.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def get_text_content(element) -> Optional[str]:
    """
    Concatenated text of all descendant text nodes.

    Returns None when the element has no text nodes at all, and the
    (untrimmed) text otherwise, so an empty <title></title> differs from
    <title>   </title>.
    """
    strings = [
        s for s in element.descendants
        if isinstance(s, NavigableString) and not isinstance(s, Comment)
    ]
    if not strings:
        return None
    text = "".join(str(s) for s in strings)
    # An element whose only text node is "" has no text content either
    return text if text else None


def is_document(obj) -> bool:
    """True if obj can be queried for elements (find / find_all)."""
    return callable(getattr(obj, "find_all", None)) and callable(getattr(obj, "find", None))


def parse_html(markup: Union[str, bytes], parser: str = "html5lib") -> BeautifulSoup:
    """
    Build a queryable document from raw markup.

    Args:
        markup: HTML as text or raw bytes (bytes are decoded by BeautifulSoup)
        parser: Tree builder, one of PARSERS

    Returns:
        BeautifulSoup document
    """
    if parser not in PARSERS:
        raise ParserError(
            f"Unsupported parser: {parser}",
            parser=parser,
            details={"supported": list(PARSERS)}
        )
    return BeautifulSoup(markup, parser)
