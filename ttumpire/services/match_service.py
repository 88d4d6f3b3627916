"""Match service owning the single match state of one umpiring session."""

import logging
from typing import Callable, Iterable, Optional, Union

from ..models import (
    Action, AwaitingPlayers, DEFAULT_TIMINGS, MatchState, MatchTimings, Phase,
    ScoreboardView, clock_toggle_action, resolve_action, transition
)
from ..utils import now_ts
from .display_service import build_view

logger = logging.getLogger(__name__)


class MatchService:
    """
    Service for driving the match phase machine from host input.

    The host calls ``dispatch`` (at most once per frame) for user actions and
    ``get_view`` to render. Each call reads the clock exactly once and hands
    that reading to the models.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        timings: Optional[MatchTimings] = None,
    ):
        self._clock = clock or now_ts
        self.timings = timings or DEFAULT_TIMINGS
        self.timings.validate()
        self._state: MatchState = AwaitingPlayers()

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def dispatch(self, action: Union[Action, str]) -> bool:
        """
        Apply one action to the match.

        Returns:
            True if the phase machine moved, False if the action is not
            defined for the current phase

        Raises:
            ValueError: If ``action`` is not a known action name
        """
        action = Action.parse(action)
        now = self._clock()
        previous = self._state
        self._state = transition(previous, action, now, self.timings)

        if self._state is previous:
            logger.debug("Ignored %s in phase %s", action.value, previous.phase.value)
            return False

        logger.info(
            "%s -> %s on %s at %.3f",
            previous.phase.value, self._state.phase.value, action.value, now,
        )
        return True

    def dispatch_triggers(self, triggers: Iterable[Union[Action, str]]) -> Optional[Action]:
        """
        Apply exactly one of several simultaneous triggers.

        Returns:
            The action applied, or None when no trigger applies to the phase
        """
        triggers = list(triggers)
        action = resolve_action(self._state, triggers)
        if action is None:
            logger.debug(
                "No applicable trigger among %s in phase %s",
                [Action.parse(t).value for t in triggers], self.phase.value,
            )
            return None
        if len(triggers) > 1:
            logger.info("Resolved simultaneous triggers to %s", action.value)
        self.dispatch(action)
        return action

    def toggle_clock(self) -> bool:
        """Pause while playing, play while paused; no effect in other phases."""
        action = clock_toggle_action(self._state)
        if action is None:
            return False
        return self.dispatch(action)

    def reset(self) -> None:
        """Drop the match and wait for players again."""
        logger.info("Match reset from phase %s", self.phase.value)
        self._state = AwaitingPlayers()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_view(self) -> ScoreboardView:
        return build_view(self._state, self._clock())
