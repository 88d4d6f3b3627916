"""
Match phase model for the TT Umpire application.

The match state is a closed set of phase variants, each a dataclass carrying
exactly the timers that phase needs:

    AwaitingPlayers                      no timer
    WarmUp(timer)                        running countdown
    Playing(timer)                       running stopwatch (set clock)
    Paused(timer)                        paused stopwatch (same set clock)
    TimeOut(timer, set_duration, kind)   running countdown + paused set clock
    BetweenSets(timer)                   running countdown

``transition`` is the only way to move between them. It handles one action per
call; any action not defined for the current phase returns the state unchanged.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .timer import Timer
from ..utils import (
    WARM_UP_SECONDS, TACTICAL_TIME_OUT_SECONDS, MEDICAL_TIME_OUT_SECONDS,
    BETWEEN_SETS_SECONDS, PHASE_TITLES, TIME_OUT_TITLES
)


class Phase(str, Enum):
    """Match phase names."""
    AWAITING_PLAYERS = "awaiting_players"
    WARM_UP = "warm_up"
    PLAYING = "playing"
    PAUSED = "paused"
    TIME_OUT = "time_out"
    BETWEEN_SETS = "between_sets"


class Action(str, Enum):
    """User actions delivered by the host."""
    START_WARM_UP = "start-warm-up"
    START_MATCH = "start-match"
    PAUSE = "pause"
    PLAY = "play"
    TIME_OUT = "time-out"
    MEDICAL_TIME_OUT = "medical-time-out"
    SET_FINISHED = "set-finished"
    MATCH_FINISHED = "match-finished"

    @classmethod
    def parse(cls, value: Union["Action", str]) -> "Action":
        """
        Convert an action name to an Action.

        Raises:
            ValueError: If the name is not a known action
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown action '{value}'. Valid actions are: {valid}") from None


class TimeOutKind(str, Enum):
    """Kind of time-out, which decides its duration."""
    TACTICAL = "tactical"
    MEDICAL = "medical"


# When several triggers arrive in one call, the first defined one wins.
ACTION_PRIORITY: Tuple[Action, ...] = (
    Action.START_WARM_UP,
    Action.START_MATCH,
    Action.PLAY,
    Action.PAUSE,
    Action.MEDICAL_TIME_OUT,
    Action.TIME_OUT,
    Action.SET_FINISHED,
    Action.MATCH_FINISHED,
)


@dataclass(frozen=True)
class MatchTimings:
    """
    Durations (seconds) for the countdown phases.

    Defaults come from the named constants; pass a different instance to
    shorten phases in tests or to follow local competition rules.
    """
    warm_up: float = WARM_UP_SECONDS
    tactical_time_out: float = TACTICAL_TIME_OUT_SECONDS
    medical_time_out: float = MEDICAL_TIME_OUT_SECONDS
    between_sets: float = BETWEEN_SETS_SECONDS

    def validate(self) -> None:
        """Raise ValueError if any duration is not positive."""
        for name in ("warm_up", "tactical_time_out", "medical_time_out", "between_sets"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be a positive number of seconds")

    def time_out_seconds(self, kind: TimeOutKind) -> float:
        if kind is TimeOutKind.MEDICAL:
            return self.medical_time_out
        return self.tactical_time_out


DEFAULT_TIMINGS = MatchTimings()


# ----------------------------------------------------------------------
# Phase variants
# ----------------------------------------------------------------------
@dataclass
class AwaitingPlayers:
    phase = Phase.AWAITING_PLAYERS


@dataclass
class WarmUp:
    timer: Timer
    phase = Phase.WARM_UP


@dataclass
class Playing:
    timer: Timer
    phase = Phase.PLAYING


@dataclass
class Paused:
    timer: Timer
    phase = Phase.PAUSED


@dataclass
class TimeOut:
    """Time-out countdown, holding the interrupted set clock paused."""
    timer: Timer
    set_duration: Timer
    kind: TimeOutKind
    phase = Phase.TIME_OUT


@dataclass
class BetweenSets:
    timer: Timer
    phase = Phase.BETWEEN_SETS


MatchState = Union[AwaitingPlayers, WarmUp, Playing, Paused, TimeOut, BetweenSets]

_ACTIONS_BY_PHASE = {
    Phase.AWAITING_PLAYERS: (Action.START_WARM_UP,),
    Phase.WARM_UP: (Action.START_MATCH,),
    Phase.PLAYING: (
        Action.PAUSE, Action.MEDICAL_TIME_OUT, Action.TIME_OUT, Action.SET_FINISHED,
    ),
    Phase.PAUSED: (Action.PLAY, Action.MEDICAL_TIME_OUT, Action.TIME_OUT),
    Phase.TIME_OUT: (Action.PLAY,),
    Phase.BETWEEN_SETS: (Action.PLAY, Action.MATCH_FINISHED),
}


# ----------------------------------------------------------------------
# Transition
# ----------------------------------------------------------------------
def transition(
    state: MatchState,
    action: Action,
    now: float,
    timings: MatchTimings = DEFAULT_TIMINGS,
) -> MatchState:
    """
    Apply one action to the match state.

    Timers created here start at ``now``. Timers carried over are paused or
    resumed in place. Undefined (state, action) pairs return ``state`` itself.
    """
    action = Action.parse(action)

    if isinstance(state, AwaitingPlayers):
        if action is Action.START_WARM_UP:
            return WarmUp(Timer.new_countdown(timings.warm_up, True, now))

    elif isinstance(state, WarmUp):
        if action is Action.START_MATCH:
            return Playing(Timer.new_stopwatch(True, now))

    elif isinstance(state, Playing):
        if action is Action.PAUSE:
            state.timer.pause(now)
            return Paused(state.timer)
        if action in (Action.TIME_OUT, Action.MEDICAL_TIME_OUT):
            state.timer.pause(now)
            return _start_time_out(state.timer, action, now, timings)
        if action is Action.SET_FINISHED:
            return BetweenSets(Timer.new_countdown(timings.between_sets, True, now))

    elif isinstance(state, Paused):
        if action is Action.PLAY:
            state.timer.resume(now)
            return Playing(state.timer)
        if action in (Action.TIME_OUT, Action.MEDICAL_TIME_OUT):
            return _start_time_out(state.timer, action, now, timings)

    elif isinstance(state, TimeOut):
        if action is Action.PLAY:
            state.set_duration.resume(now)
            return Playing(state.set_duration)

    elif isinstance(state, BetweenSets):
        if action is Action.PLAY:
            return Playing(Timer.new_stopwatch(True, now))
        if action is Action.MATCH_FINISHED:
            return AwaitingPlayers()

    return state


def _start_time_out(set_duration: Timer, action: Action, now: float,
                    timings: MatchTimings) -> TimeOut:
    kind = TimeOutKind.MEDICAL if action is Action.MEDICAL_TIME_OUT else TimeOutKind.TACTICAL
    countdown = Timer.new_countdown(timings.time_out_seconds(kind), True, now)
    return TimeOut(countdown, set_duration, kind)


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------
def available_actions(state: MatchState) -> Tuple[Action, ...]:
    """Actions defined for the current phase, highest priority first."""
    return _ACTIONS_BY_PHASE[state.phase]


def resolve_action(state: MatchState, triggers: Iterable[Union[Action, str]]) -> Optional[Action]:
    """
    Pick the one action to honour when several triggers fire together.

    Returns the highest-priority trigger defined for the current phase, or
    None if none of them is. Inside ``Paused`` this means
    play > medical-time-out > time-out.
    """
    fired = {Action.parse(t) for t in triggers}
    allowed = available_actions(state)
    for action in ACTION_PRIORITY:
        if action in fired and action in allowed:
            return action
    return None


def clock_toggle_action(state: MatchState) -> Optional[Action]:
    """Action performed by clicking the clock: pause while playing, play while paused."""
    if isinstance(state, Playing):
        return Action.PAUSE
    if isinstance(state, Paused):
        return Action.PLAY
    return None


def phase_title(state: MatchState) -> str:
    if isinstance(state, TimeOut):
        return TIME_OUT_TITLES[state.kind.value]
    return PHASE_TITLES[state.phase.value]


def display_timer(state: MatchState) -> Optional[Timer]:
    """The timer shown on the main clock, or None while awaiting players."""
    if isinstance(state, AwaitingPlayers):
        return None
    return state.timer


def needs_redraw(state: MatchState) -> bool:
    """Every phase except AwaitingPlayers has a clock that must keep advancing."""
    return not isinstance(state, AwaitingPlayers)
