"""URL helpers built on furl."""

from furl import furl


def add_query_param(url: str, key: str, value: str) -> str:
    """Enrich the URL adding a new query param and return the new url."""
    f = furl(url)
    f.add({key: value})
    return f.url


def append_path(url: str, path: str) -> str:
    """
    Append ``path`` to the path of ``url``.

    Unlike ``urljoin``, a base path is always kept: ``append_path("https://h/api", "contacts")``
    gives ``https://h/api/contacts``.
    """
    f = furl(url)
    f.path.segments = [s for s in f.path.segments if s] + [s for s in path.split("/") if s]
    return f.url
