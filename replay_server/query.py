"""Query-string parsing for the spectator upgrade request."""
from __future__ import annotations

from typing import Dict


def parse_query(query: str) -> Dict[str, str]:
    """Split *query* into a flat ``key -> value`` mapping.

    Segments are ``&``-delimited and split on ``=``. A bare key maps to an
    empty string; a segment holding more than one ``=`` is dropped. Values
    are taken verbatim (no percent-decoding) and later keys win.
    """
    result: Dict[str, str] = {}
    if not query:
        return result

    for segment in query.split("&"):
        parts = segment.split("=")
        if len(parts) == 2:
            result[parts[0]] = parts[1]
        elif len(parts) == 1:
            result[parts[0]] = ""
    return result


__all__ = ["parse_query"]
