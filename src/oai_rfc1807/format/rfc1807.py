"""RFC 1807 metadata format for OAI-PMH repositories."""

from dataclasses import dataclass

from ..core.models import BibliographicRecord
from ..utils.log import get_logger
from .extractor import extract_fields
from .serializer import format_element

log = get_logger(__name__)

METADATA_PREFIX = "rfc1807"
NAMESPACE = "http://info.internet.isi.edu:80/in-notes/rfc/files/rfc1807.txt"
SCHEMA = "http://www.openarchives.org/OAI/1.1/rfc1807.xsd"

_PREAMBLE = (
    "<rfc1807\n"
    f'\txmlns="{NAMESPACE}"\n'
    '\txmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"\n'
    f'\txsi:schemaLocation="{NAMESPACE}\n'
    f'\t{SCHEMA}">\n'
    "\t<bib-version>v2</bib-version>\n"
)
_CLOSING = "</rfc1807>\n"


@dataclass(frozen=True)
class MetadataFormat:
    """Descriptor a hosting OAI layer lists under ListMetadataFormats."""

    prefix: str
    schema: str
    namespace: str


RFC1807_FORMAT = MetadataFormat(prefix=METADATA_PREFIX, schema=SCHEMA, namespace=NAMESPACE)


def serialize(record: BibliographicRecord, access_url: str, include_access_url: bool) -> str:
    """Render a record as an RFC 1807 XML document.

    Args:
        record: The article with its journal, issue and section context
        access_url: Resolved URL of the article landing page
        include_access_url: Whether the URL may be exposed as other_access

    Returns:
        The document as a string, ending with a newline.
    """
    fields = extract_fields(record, access_url, include_access_url)
    body = "".join(format_element(f) for f in fields if f is not None)
    log.debug("rfc1807_serialized", article_id=record.article.id, size=len(body))
    return _PREAMBLE + body + _CLOSING
