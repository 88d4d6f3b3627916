"""Builds the per-frame render output for a match state."""

from ..models import (
    MatchState, ScoreboardView, TimeOut, available_actions, display_timer,
    needs_redraw, phase_title
)
from ..utils import fmt_clock


def build_view(state: MatchState, now: float) -> ScoreboardView:
    """
    Describe what the host should draw for ``state`` at clock reading ``now``.

    Awaiting players shows a still ``0:00``. A time-out shows its own
    countdown on the main clock and the held set clock as ``set_time_text``.
    """
    timer = display_timer(state)
    set_time_text = None
    if isinstance(state, TimeOut):
        set_time_text = state.set_duration.display(now)

    return ScoreboardView(
        phase=state.phase.value,
        title=phase_title(state),
        time_text=timer.display(now) if timer else fmt_clock(0),
        expired=timer.expired(now) if timer else False,
        needs_redraw=needs_redraw(state),
        counting_down=timer.is_countdown if timer else False,
        running=timer.is_running if timer else False,
        set_time_text=set_time_text,
        available_actions=[a.value for a in available_actions(state)],
    )
