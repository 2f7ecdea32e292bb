"""
Stage Position Mapper

Maps a stage's effective date interval onto the horizontal track of the
visible window, as percentages of the track width. Intervals overlapping
the window partially are clipped at the edge they cross; intervals fully
outside it produce no bar.
"""

import logging

from ...shared.exceptions import InvalidDateError
from ..entities.stage_entry import StageEntry
from ..value_objects.date_interval import DateInterval, PendingEdit
from ..value_objects.stage_codes import FALLBACK_STAGE_DURATION, default_duration
from ..value_objects.time_units import add_days, days_between, parse_iso_date
from ..value_objects.view_window import StagePosition, ViewWindow

logger = logging.getLogger(__name__)

MIN_BAR_WIDTH_PERCENT = 0.5


class StagePositionMapper:
    """Domain service translating stage intervals into bar geometry."""

    def __init__(
        self,
        min_width_percent: float = MIN_BAR_WIDTH_PERCENT,
        fallback_duration_days: int = FALLBACK_STAGE_DURATION,
    ) -> None:
        """
        Initialize the mapper.

        Args:
            min_width_percent: Narrowest bar rendered, so every bar stays clickable
            fallback_duration_days: Length used for stage codes without a default
        """
        self._min_width_percent = min_width_percent
        self._fallback_duration_days = fallback_duration_days

    def effective_interval(
        self, stage: StageEntry, pending: PendingEdit | None = None
    ) -> DateInterval | None:
        """
        Interval the board shows for a stage.

        A pending edit wins outright. Otherwise each end prefers the actual
        date and falls back to the planned one; a missing end is synthesized
        from the stage code's default duration.

        Returns:
            The interval, or None if the stage has no start date at all

        Raises:
            InvalidDateError: If a stored date is present but unparsable
        """
        if pending is not None:
            return pending.interval

        raw_start = stage.effective_start_raw()
        if raw_start is None:
            return None
        start = parse_iso_date(raw_start)

        raw_end = stage.effective_end_raw()
        if raw_end is None:
            end = add_days(start, default_duration(stage.stage, self._fallback_duration_days))
        else:
            end = parse_iso_date(raw_end)
        return DateInterval(start=start, end=end)

    def position(
        self,
        stage: StageEntry,
        window: ViewWindow,
        pending: PendingEdit | None = None,
    ) -> StagePosition | None:
        """
        Bar geometry for a stage, or None when nothing should be drawn.

        A malformed stored date hides the stage and is logged; it never
        interrupts rendering of the rest of the board.
        """
        try:
            interval = self.effective_interval(stage, pending)
        except InvalidDateError as e:
            logger.warning(f"Stage {stage.id} ({stage.stage.value}) hidden: {e.message}")
            return None
        if interval is None:
            return None
        return self.position_for_interval(interval, window)

    def position_for_interval(
        self, interval: DateInterval, window: ViewWindow
    ) -> StagePosition | None:
        """
        Clip an interval to the window and convert it to percentages.

        Args:
            interval: Inclusive stage interval
            window: Visible window

        Returns:
            Bar geometry, or None if the interval lies entirely outside
        """
        total_days = window.total_days
        offset = days_between(window.start, interval.start)
        duration = days_between(interval.start, interval.end) + 1

        # A bar touching either edge still renders as a floored sliver
        if offset + duration < 0 or offset > total_days:
            return None

        visible_start = max(offset, 0)
        visible_end = min(offset + duration, total_days)

        left = visible_start / total_days * 100
        width = (visible_end - visible_start) / total_days * 100
        width = min(width, 100 - left)
        width = max(width, self._min_width_percent)
        if left + width > 100:
            # Keep floored bars inside the track
            left = max(0.0, 100 - width)

        return StagePosition(
            left_percent=left,
            width_percent=width,
            start=interval.start,
            end=interval.end,
            clipped_left=offset < 0,
            clipped_right=offset + duration > total_days,
        )
