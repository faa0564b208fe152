"""Cookie types."""

from re import Pattern

CookieJar = dict[str, str]
# A str selects a cookie by its exact name, a compiled pattern by `pattern.search(name)`.
CookieSelector = str | Pattern[str]
