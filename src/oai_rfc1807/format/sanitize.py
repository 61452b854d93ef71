"""Text cleanup shared by every element written to an OAI response."""

import re
import warnings
from xml.sax.saxutils import escape

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

# Anything outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def prep_output(value: str | None) -> str:
    """Escape markup characters and drop characters XML 1.0 cannot carry."""
    if not value:
        return ""
    return escape(_ILLEGAL_XML_CHARS.sub("", value))


def strip_tags(html: str | None) -> str:
    """Return the text content of an HTML fragment."""
    if not html:
        return ""
    # License terms are often a bare URL, which bs4 would warn about per record
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(html, "html.parser").get_text()
