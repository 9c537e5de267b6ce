"""
Wikipedia article links for resolved place names.
"""

from urllib.parse import quote

DEFAULT_WIKI_HOST = "ja.wikipedia.org"

# Characters JavaScript's encodeURIComponent leaves alone on top of
# the alphanumerics and "-_.~" that quote() always keeps.
_COMPONENT_SAFE = "!*'()"


def title_to_url(title: str, host: str = DEFAULT_WIKI_HOST) -> str:
    """
    Build the article URL for a title.

    The title is percent-encoded as a single URL component (UTF-8 bytes,
    ``/`` and ``?`` included), matching ``encodeURIComponent``. No check is
    made on the title: an empty string gives ``https://<host>/wiki/``.

    Examples:
        >>> title_to_url("渋谷区")
        'https://ja.wikipedia.org/wiki/%E6%B8%8B%E8%B0%B7%E5%8C%BA'
    """
    return f"https://{host}/wiki/{quote(title, safe=_COMPONENT_SAFE)}"


def article_url(title: str | None, host: str = DEFAULT_WIKI_HOST) -> str:
    """Article URL for a title, or the encyclopedia home page when the title is blank."""
    stripped = (title or "").strip()
    if not stripped:
        return f"https://{host}"
    return title_to_url(stripped, host=host)
