"""Reply annotation parsing.

Splits chat replies into display text and citation labels, and pulls the
embedded URL out of a label for rendering.
"""

from src.parsing.annotations import (
    extract_citation_url,
    parse_response,
    split_marker,
    split_sources,
)

__all__ = ["extract_citation_url", "parse_response", "split_marker", "split_sources"]
