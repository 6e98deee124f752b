"""Reorder search results so the likeliest matches come first.

Results whose name starts with the query's first character (ignoring
case) come before the rest; each group is sorted alphabetically using
the active collation locale. Under the default C locale that is plain
code-point order, so the comparison is case-sensitive. Programs that
want the user's collation call ``locale.setlocale(locale.LC_COLLATE, "")``
at startup, as the console front end does.
"""

import locale
from typing import Iterable, List, Tuple

from ..domain.models import Destination


def _sort_key(destination: Destination, lead: str) -> Tuple[bool, str]:
    starts_with_lead = destination.name.casefold().startswith(lead)
    # False sorts before True, so matches go first
    return (not starts_with_lead, locale.strxfrm(destination.name))


def prioritize(results: Iterable[Destination], query: str) -> List[Destination]:
    """Return a new ordering of ``results`` for ``query``.

    Parameters
    ----------
    results:
        Destinations as returned by the store or the cache.
    query:
        The non-empty query text that produced ``results``.

    Returns
    -------
    list[Destination]
        Entries starting with ``query[0]`` first, then the others, each
        group in alphabetical order. Ties keep their input order.

    Raises
    ------
    ValueError
        If ``query`` is empty.
    """
    if not query:
        raise ValueError("Cannot prioritize results for an empty query")

    lead = query[0].casefold()
    return sorted(results, key=lambda destination: _sort_key(destination, lead))
