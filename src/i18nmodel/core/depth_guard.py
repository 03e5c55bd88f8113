"""Nesting limit for tag-pair recursion.

Both the naming pass and placeholder iteration recurse once per nested tag
pair. A DepthGuard bounds that recursion so a runaway parts tree fails with
a diagnostic instead of a RecursionError.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from i18nmodel.constants import MAX_DEPTH
from i18nmodel.diagnostics import MessageModelError
from i18nmodel.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(MessageModelError):
    """Tag pairs nest deeper than the configured limit."""


@dataclass(slots=True)
class DepthGuard:
    """Counts nested tag pairs entered with ``with guard:``.

    One guard is shared by a whole walk; each ``with`` block covers the
    children of one tag pair.

    Attributes:
        max_depth: Deepest nesting allowed, clamped below the interpreter
            recursion limit
        current_depth: Tag pairs currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # __exit__ does not run when __enter__ raises, so check first.
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    def check(self) -> None:
        """Raise if one more tag pair would exceed max_depth.

        Raises:
            DepthLimitExceededError: If current_depth has reached max_depth
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(self.max_depth))


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower requested_depth to fit under sys.getrecursionlimit().

    reserve_frames are kept free for the frames around the walk itself.
    """
    max_safe_depth = sys.getrecursionlimit() - reserve_frames
    if requested_depth <= max_safe_depth:
        return requested_depth
    logger.warning(
        "Requested depth %d exceeds Python recursion limit (%d); using %d",
        requested_depth,
        sys.getrecursionlimit(),
        max_safe_depth,
    )
    return max_safe_depth
