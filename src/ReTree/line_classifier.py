"""Per-line extraction of node anchor and data columns."""

from __future__ import annotations

import logging

from ReTree.models import NodeLine, TreeConfig

logger = logging.getLogger(__name__)


class LineClassifier:
    """Applies the configured node pattern to a single cleaned line."""

    def __init__(self, config: TreeConfig) -> None:
        self._regex = config.compile()
        self._anchor_group = config.anchor_group
        self._data_group = config.data_group

        for name, group in (("anchor", self._anchor_group), ("data", self._data_group)):
            if group is not None and group > self._regex.groups:
                logger.warning(
                    "%s group %d not in pattern `%s` (%d groups); no line will match",
                    name,
                    group,
                    config.pattern,
                    self._regex.groups,
                )

    def classify(self, line: str) -> NodeLine | None:
        """Return the NodeLine for *line*, or None if it is not a node line.

        Offsets on ``str`` are code points, so multi-byte connector glyphs
        count as one column each.
        """
        match = self._regex.search(line)
        if match is None:
            return None

        anchor_start, anchor_end = self._span(match, self._anchor_group)
        if anchor_start < 0:
            logger.debug("anchor group %d missing in %r", self._anchor_group, line)
            return None

        if self._data_group is None:
            return NodeLine(anchor_start, anchor_end, line[anchor_end:])

        data_start, data_end = self._span(match, self._data_group)
        if data_start < 0:
            logger.debug("data group %d missing in %r", self._data_group, line)
            return None
        return NodeLine(anchor_start, data_start, line[data_start:data_end])

    @staticmethod
    def _span(match, group: int) -> tuple[int, int]:
        # (-1, -1) when the group does not exist or did not participate
        try:
            return match.span(group)
        except IndexError:
            return -1, -1
