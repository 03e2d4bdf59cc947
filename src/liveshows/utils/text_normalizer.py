"""Display-title extraction for upstream video titles.

Recorded shows are uploaded with titles following a
``"<Series> - <Date> - <Topic>"`` convention.  Only the trailing segment is
useful on a listing page, so everything up to and including the last
hyphen is dropped.  Titles that do not follow the convention (fewer than
two hyphens) yield an empty display title rather than a guess.
"""

_SEPARATOR = "-"
_MIN_SEPARATORS = 2


def extract_display_title(raw_title: str) -> str:
    """Return the segment after the last hyphen of *raw_title*.

    The segment is stripped of surrounding whitespace, so
    ``"A - B - Real Title"`` becomes ``"Real Title"``.  Returns ``""`` when
    the title contains fewer than two hyphens.

    Args:
        raw_title: Title string exactly as returned by upstream.

    Returns:
        The display title, possibly empty.
    """
    if raw_title.count(_SEPARATOR) < _MIN_SEPARATORS:
        return ""

    _, _, tail = raw_title.rpartition(_SEPARATOR)
    return tail.strip()
