"""Caller-side helpers that prepare the URL context for a record."""

from .models import Article, Journal


def include_access_urls(journal: Journal, subscribed: bool = False) -> bool:
    """URLs are exposed unless the journal publishes nothing openly.

    A journal with publishing mode "none" still exposes the URL to a user
    who holds a subscription to the article.
    """
    return journal.publishing_mode != "none" or subscribed


def article_url(base_url: str, journal: Journal, article: Article) -> str:
    """Landing page URL of an article: {base}/{journal}/article/view/{id}."""
    return f"{base_url.rstrip('/')}/{journal.path}/article/view/{article.best_id}"
