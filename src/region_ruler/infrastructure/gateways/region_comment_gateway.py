"""Finds ``# region`` markers in Python comments using the tokenizer."""

import logging
import re
import tokenize
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionMarker:
    """A region comment: its trimmed name and where the comment starts."""

    name: str
    line: int
    col_offset: int

    @property
    def location(self) -> tuple[int, int]:
        return (self.line, self.col_offset)


class RegionCommentGateway:
    """
    Extracts region markers from a byte stream.

    Recognized forms are ``# region Name`` and ``#region Name`` (any spacing
    after ``#``); the name is whatever follows the keyword, trimmed, and may be
    empty. ``# endregion`` and words merely starting with "region" are ignored.
    """

    REGION_COMMENT = re.compile(r"^#\s*region\b(?P<name>.*)$")

    def extract_markers(self, readline: Callable[[], bytes]) -> list[RegionMarker]:
        markers: list[RegionMarker] = []
        try:
            for token in tokenize.tokenize(readline):
                if token.type != tokenize.COMMENT:
                    continue
                marker = self.parse_comment(token.string, *token.start)
                if marker is not None:
                    markers.append(marker)
        except (tokenize.TokenError, SyntaxError) as exc:
            # pylint reports the syntax error itself; keep what was found.
            logger.debug("Stopped scanning for region markers: %s", exc)
        return markers

    def parse_comment(self, comment: str, line: int, col_offset: int) -> RegionMarker | None:
        """Return a marker if ``comment`` is a region comment, else None."""
        match = self.REGION_COMMENT.match(comment.rstrip())
        if match is None:
            return None
        return RegionMarker(name=match.group("name").strip(), line=line, col_offset=col_offset)
