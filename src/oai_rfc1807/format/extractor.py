"""Field selection for RFC 1807 records.

Walks a `BibliographicRecord` and produces the logical fields of one
RFC 1807 document in element order. Optional elements come back as `None`
so the envelope can skip them; every localized value is resolved to a plain
string here, never in the serializer.
"""

from collections.abc import Mapping

from ..core.models import BibliographicRecord, Publication
from ..utils.log import get_logger
from .fields import Field, Many, Single
from .sanitize import strip_tags

log = get_logger(__name__)


def publisher_name(record: BibliographicRecord) -> str:
    """Publisher institution when configured, otherwise the journal name."""
    journal = record.journal
    if journal.publisher_institution:
        return journal.publisher_institution
    return record.journal_localized(journal.name)


def source_string(record: BibliographicRecord) -> str:
    """Issue identification followed by the page range, when there is one."""
    source = record.issue.identification
    pages = record.publication.pages
    if pages:
        source += f"; {pages}"
    return source


def creators(record: BibliographicRecord) -> list[str]:
    publication = record.publication
    names = []
    for author in publication.authors:
        name = author.full_name(publication.locale, family_first=True)
        affiliation = author.localized_affiliation(
            record.locale, publication.locale, record.journal.primary_locale
        )
        if affiliation:
            name += f"; {affiliation}"
        names.append(name)
    return names


def merge_terms(
    keywords: Mapping[str, list[str]],
    subjects: Mapping[str, list[str]],
    locales: list[str] | None = None,
) -> dict[str, list[str]]:
    """Combine keyword and subject vocabularies per locale.

    Keyword terms come first, then subject terms. When `locales` is given,
    only those locales are kept.
    """
    merged: dict[str, list[str]] = {}
    for vocab in (keywords, subjects):
        for locale, terms in vocab.items():
            if locales is not None and locale not in locales:
                continue
            merged.setdefault(locale, []).extend(terms)
    return merged


def subject_terms(record: BibliographicRecord) -> Field:
    journal = record.journal
    supported = journal.supported_locales or [journal.primary_locale]
    terms = merge_terms(record.keywords, record.subjects, supported).get(journal.primary_locale)
    if not terms:
        return Single("keyword", "")
    return Many("keyword", tuple(terms))


def extract_fields(
    record: BibliographicRecord, access_url: str, include_access_url: bool
) -> list[Field | None]:
    """Return the RFC 1807 fields for a record in document order.

    Raises:
        ValueError: if the article has no current publication.
    """
    publication: Publication = record.publication
    journal = record.journal

    fields: list[Field | None] = [
        Single("id", access_url),
        Single("entry", record.datestamp),
        Single("organization", publisher_name(record)),
        Single("organization", source_string(record)),
        Single("title", publication.localized_title()),
        Single("type", record.journal_localized(record.section.identify_type)),
        Many("author", tuple(creators(record))),
        Single("date", publication.date_published) if publication.date_published else None,
        Single("copyright", strip_tags(record.journal_localized(journal.license_terms))),
        Single("other_access", f"url:{access_url}") if include_access_url else None,
        subject_terms(record),
        Single("period", publication.locale_coverage()),
        Single("monitoring", publication.localized_sponsor()),
        Single("language", publication.locale),
        Single("abstract", strip_tags(publication.localized_abstract())),
    ]

    log.debug(
        "rfc1807_fields_extracted",
        article_id=record.article.id,
        publication_id=publication.id,
        authors=len(publication.authors),
        has_date=bool(publication.date_published),
        include_access_url=include_access_url,
    )
    return fields
