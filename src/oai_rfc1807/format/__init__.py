"""
RFC 1807 metadata format.

This package turns a bibliographic record into the RFC 1807 document served
to OAI-PMH harvesters:
- extractor: selects and derives the logical fields in element order
- serializer: renders one field as escaped, tab-indented XML elements
- rfc1807: wraps the fields in the fixed root element and exposes the
  metadata format descriptor
"""

from .extractor import extract_fields, merge_terms
from .fields import Field, Many, Single
from .rfc1807 import RFC1807_FORMAT, MetadataFormat, serialize
from .serializer import format_element

__all__ = [
    "RFC1807_FORMAT",
    "Field",
    "Many",
    "MetadataFormat",
    "Single",
    "extract_fields",
    "format_element",
    "merge_terms",
    "serialize",
]
