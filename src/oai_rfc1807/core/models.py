from typing import Literal

from pydantic import BaseModel, Field

from ..utils.log import get_logger
from .localization import LocalizedStr, in_locale, localized, resolve_locale

log = get_logger(__name__)

PublishingMode = Literal["open", "subscription", "none"]


class Author(BaseModel):
    given_name: LocalizedStr = Field(default_factory=dict)
    family_name: LocalizedStr = Field(default_factory=dict)
    affiliation: LocalizedStr = Field(default_factory=dict)

    def full_name(self, locale: str | None = None, family_first: bool = True) -> str:
        """Format the author's name, "Family, Given" by default."""
        given = localized(self.given_name, locale)
        family = localized(self.family_name, locale)
        if family_first:
            return f"{family}, {given}" if family else given
        return f"{given} {family}".strip()

    def localized_affiliation(self, *locales: str | None) -> str:
        return localized(self.affiliation, *locales)


class Publication(BaseModel):
    id: int
    locale: str
    title: LocalizedStr = Field(default_factory=dict)
    prefix: LocalizedStr = Field(default_factory=dict)
    abstract: LocalizedStr = Field(default_factory=dict)
    pages: str | None = None
    date_published: str | None = None
    coverage: LocalizedStr = Field(default_factory=dict)
    sponsor: LocalizedStr = Field(default_factory=dict)
    authors: list[Author] = Field(default_factory=list)

    def localized_title(self) -> str:
        """Title in the publication's locale, with its prefix when set."""
        # The prefix is read in whichever locale the title was found in
        used = resolve_locale(self.title, self.locale)
        title = in_locale(self.title, used)
        prefix = in_locale(self.prefix, used)
        return f"{prefix} {title}".strip() if prefix else title

    def localized_abstract(self) -> str:
        return localized(self.abstract, self.locale)

    def localized_sponsor(self) -> str:
        return localized(self.sponsor, self.locale)

    def locale_coverage(self) -> str:
        # Coverage is read for the publication locale only, no fallback
        return in_locale(self.coverage, self.locale)


class Article(BaseModel):
    id: int
    best_id: str
    current_publication_id: int
    publications: list[Publication] = Field(default_factory=list)

    @property
    def current_publication(self) -> Publication:
        for publication in self.publications:
            if publication.id == self.current_publication_id:
                return publication
        log.error(
            "current_publication_missing",
            article_id=self.id,
            current_publication_id=self.current_publication_id,
        )
        raise ValueError(
            f"Article {self.id} has no publication with id {self.current_publication_id}"
        )


class Issue(BaseModel):
    id: int
    identification: str


class Journal(BaseModel):
    id: int
    path: str
    name: LocalizedStr = Field(default_factory=dict)
    publisher_institution: str | None = None
    primary_locale: str
    supported_locales: list[str] = Field(default_factory=list)
    publishing_mode: PublishingMode = "open"
    license_terms: LocalizedStr = Field(default_factory=dict)


class Section(BaseModel):
    id: int
    identify_type: LocalizedStr = Field(default_factory=dict)


class BibliographicRecord(BaseModel):
    """One harvestable item: an article with its journal context.

    `keywords` and `subjects` map locale codes to the controlled-vocabulary
    terms attached to the article's current publication.
    """

    article: Article
    journal: Journal
    section: Section
    issue: Issue
    datestamp: str

    keywords: dict[str, list[str]] = Field(default_factory=dict)
    subjects: dict[str, list[str]] = Field(default_factory=dict)

    # Requested UI locale for journal-level labels; primary locale when unset
    locale: str | None = None

    @property
    def publication(self) -> Publication:
        return self.article.current_publication

    def journal_localized(self, values: LocalizedStr) -> str:
        """Resolve a journal-level localized value for the requested locale."""
        return localized(values, self.locale, self.journal.primary_locale)
