"""Locale-aware lookup for multilingual metadata values."""

# Localized values are stored as {locale_code: value}
LocalizedStr = dict[str, str]


def resolve_locale(values: LocalizedStr | None, *locales: str | None) -> str | None:
    """Return the locale whose value a localized lookup would use.

    Locales are tried in order; empty values are skipped. When none of the
    preferred locales has a value, the first locale with a non-empty value in
    the map is used, and None when there is none at all.
    """
    if not values:
        return None
    for locale in locales:
        if locale and values.get(locale):
            return locale
    for locale, value in values.items():
        if value:
            return locale
    return None


def localized(values: LocalizedStr | None, *locales: str | None) -> str:
    """Return the value for the first preferred locale that has one."""
    used = resolve_locale(values, *locales)
    return values[used] if values and used is not None else ""


def in_locale(values: LocalizedStr | None, locale: str | None) -> str:
    """Return the value for exactly one locale, without fallback."""
    if not values or not locale:
        return ""
    return values.get(locale) or ""
