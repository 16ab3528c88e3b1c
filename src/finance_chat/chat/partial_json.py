"""Best-effort parsing of JSON text that may be cut off mid-document.

The chat endpoint streams a single JSON document. While the stream is in
flight, or when the generator stops early, the text received so far is a
prefix of that document. ``parse_partial`` returns whatever structure that
prefix already determines:

    >>> parse_partial('{"title": "Budget", "tips": ["Track sp').value
    {'title': 'Budget', 'tips': ['Track sp']}
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import partial_json_parser

logger = logging.getLogger(__name__)


class MalformedJSON(ValueError):
    """The text is not a prefix of any JSON document."""


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parse_partial.

    ``complete`` is True when the text was a whole JSON document and False
    when ``value`` was reconstructed from a truncated prefix.
    """
    value: Any
    complete: bool


def parse_partial(text: str) -> ParseOutcome:
    """Parse ``text`` strictly, or as a truncated prefix if that fails.

    Raises:
        MalformedJSON: If ``text`` is not a prefix of any JSON document.
    """
    try:
        return ParseOutcome(json.loads(text), complete=True)
    except json.JSONDecodeError:
        pass
    # The parser raises MalformedJSON (a ValueError) or PartialJSON (a TypeError).
    try:
        value = partial_json_parser.loads(text)
    except (ValueError, TypeError) as e:
        raise MalformedJSON(str(e)) from e
    return ParseOutcome(value, complete=False)


def recover_json(text: str) -> Any:
    """Return the best structured value for ``text``, never raising.

    Text that cannot be read as a JSON prefix at all recovers to ``{}``.
    """
    if not text.strip():
        return {}
    try:
        return parse_partial(text).value
    except MalformedJSON as e:
        logger.warning("Could not recover JSON from %d chars of text: %s", len(text), e)
        return {}
