"""
Unit tests for the match phase machine.

Covers every row of the transition table, totality over all phase/action
pairs, the timer mode carried by each phase, trigger priority and the
render-facing queries.
"""
import dataclasses
import unittest

from ttumpire.models import (
    DEFAULT_TIMINGS, Action, AwaitingPlayers, BetweenSets, MatchTimings, Paused,
    Phase, Playing, TimeOut, TimeOutKind, Timer, WarmUp, available_actions, clock_toggle_action,
    display_timer, needs_redraw, phase_title, resolve_action, transition
)

VARIANTS = (AwaitingPlayers, WarmUp, Playing, Paused, TimeOut, BetweenSets)


def sample_states(now: float = 0.0):
    """One instance of every phase, with timers in the mode the phase requires."""
    return [
        AwaitingPlayers(),
        WarmUp(Timer.new_countdown(120, True, now)),
        Playing(Timer.new_stopwatch(True, now)),
        Paused(Timer.new_stopwatch(False, now)),
        TimeOut(Timer.new_countdown(60, True, now), Timer.new_stopwatch(False, now),
                TimeOutKind.TACTICAL),
        TimeOut(Timer.new_countdown(600, True, now), Timer.new_stopwatch(False, now),
                TimeOutKind.MEDICAL),
        BetweenSets(Timer.new_countdown(60, True, now)),
    ]


def playing_with_elapsed(elapsed: float, now: float) -> Playing:
    return Playing(Timer.new_stopwatch(True, now - elapsed))


class TimerModeMixin:
    def assertTimerModes(self, state) -> None:
        if isinstance(state, (WarmUp, BetweenSets)):
            self.assertTrue(state.timer.is_countdown)
            self.assertTrue(state.timer.is_running)
        elif isinstance(state, Playing):
            self.assertFalse(state.timer.is_countdown)
            self.assertTrue(state.timer.is_running)
        elif isinstance(state, Paused):
            self.assertFalse(state.timer.is_countdown)
            self.assertFalse(state.timer.is_running)
        elif isinstance(state, TimeOut):
            self.assertTrue(state.timer.is_countdown)
            self.assertTrue(state.timer.is_running)
            self.assertFalse(state.set_duration.is_countdown)
            self.assertFalse(state.set_duration.is_running)


class TransitionTableTests(TimerModeMixin, unittest.TestCase):
    def test_start_warm_up(self) -> None:
        state = transition(AwaitingPlayers(), Action.START_WARM_UP, 5.0)
        self.assertIsInstance(state, WarmUp)
        self.assertEqual(state.timer.target_duration, 120.0)
        self.assertEqual(state.timer.running_since, 5.0)

    def test_start_match_discards_warm_up(self) -> None:
        warm_up = WarmUp(Timer.new_countdown(120, True, 0.0))
        state = transition(warm_up, Action.START_MATCH, 120.0)
        self.assertIsInstance(state, Playing)
        self.assertIsNot(state.timer, warm_up.timer)
        self.assertEqual(state.timer.elapsed(120.0), 0.0)

    def test_pause_keeps_same_timer(self) -> None:
        playing = playing_with_elapsed(30.0, 100.0)
        state = transition(playing, Action.PAUSE, 100.0)
        self.assertIsInstance(state, Paused)
        self.assertIs(state.timer, playing.timer)
        self.assertEqual(state.timer.elapsed(200.0), 30.0)

    def test_play_from_paused_resumes(self) -> None:
        paused = Paused(Timer(accumulated=30.0))
        state = transition(paused, Action.PLAY, 50.0)
        self.assertIsInstance(state, Playing)
        self.assertIs(state.timer, paused.timer)
        self.assertEqual(state.timer.elapsed(60.0), 40.0)

    def test_time_out_from_playing(self) -> None:
        playing = playing_with_elapsed(37.0, 100.0)
        state = transition(playing, Action.TIME_OUT, 100.0)
        self.assertIsInstance(state, TimeOut)
        self.assertEqual(state.kind, TimeOutKind.TACTICAL)
        self.assertIs(state.set_duration, playing.timer)
        self.assertEqual(state.timer.target_duration, 60.0)
        self.assertTimerModes(state)

    def test_medical_time_out_from_playing(self) -> None:
        state = transition(playing_with_elapsed(10.0, 50.0), Action.MEDICAL_TIME_OUT, 50.0)
        self.assertIsInstance(state, TimeOut)
        self.assertEqual(state.kind, TimeOutKind.MEDICAL)
        self.assertEqual(state.timer.target_duration, 600.0)
        self.assertTimerModes(state)

    def test_time_outs_from_paused(self) -> None:
        for action, kind in [(Action.TIME_OUT, TimeOutKind.TACTICAL),
                             (Action.MEDICAL_TIME_OUT, TimeOutKind.MEDICAL)]:
            paused = Paused(Timer(accumulated=12.0))
            state = transition(paused, action, 80.0)
            self.assertIsInstance(state, TimeOut)
            self.assertEqual(state.kind, kind)
            self.assertIs(state.set_duration, paused.timer)
            self.assertEqual(state.set_duration.elapsed(80.0), 12.0)
            self.assertTimerModes(state)

    def test_play_after_time_out_resumes_set_clock(self) -> None:
        time_out = transition(playing_with_elapsed(37.0, 100.0), Action.TIME_OUT, 100.0)
        state = transition(time_out, Action.PLAY, 160.0)
        self.assertIsInstance(state, Playing)
        self.assertIs(state.timer, time_out.set_duration)
        self.assertTrue(state.timer.is_running)
        self.assertEqual(state.timer.elapsed(160.0), 37.0)
        self.assertEqual(state.timer.elapsed(170.0), 47.0)

    def test_set_finished_starts_break(self) -> None:
        playing = playing_with_elapsed(600.0, 700.0)
        state = transition(playing, Action.SET_FINISHED, 700.0)
        self.assertIsInstance(state, BetweenSets)
        self.assertIsNot(state.timer, playing.timer)
        self.assertEqual(state.timer.elapsed(700.0), 0.0)
        self.assertEqual(state.timer.display(700.0), "1:00")
        self.assertNotIn(playing.timer, vars(state).values())

    def test_play_after_break_starts_fresh_set_clock(self) -> None:
        between = BetweenSets(Timer.new_countdown(60, True, 0.0))
        state = transition(between, Action.PLAY, 75.0)
        self.assertIsInstance(state, Playing)
        self.assertEqual(state.timer.elapsed(75.0), 0.0)

    def test_match_finished_after_break(self) -> None:
        between = BetweenSets(Timer.new_countdown(60, True, 0.0))
        state = transition(between, Action.MATCH_FINISHED, 30.0)
        self.assertIsInstance(state, AwaitingPlayers)

    def test_match_finished_while_awaiting_is_noop(self) -> None:
        awaiting = AwaitingPlayers()
        self.assertIs(transition(awaiting, Action.MATCH_FINISHED, 0.0), awaiting)

    def test_action_names_are_accepted(self) -> None:
        state = transition(AwaitingPlayers(), "start-warm-up", 0.0)
        self.assertIsInstance(state, WarmUp)

    def test_unknown_action_name_raises(self) -> None:
        with self.assertRaises(ValueError):
            transition(AwaitingPlayers(), "serve", 0.0)

    def test_substituted_timings(self) -> None:
        timings = MatchTimings(warm_up=5, tactical_time_out=2, medical_time_out=3, between_sets=4)
        warm_up = transition(AwaitingPlayers(), Action.START_WARM_UP, 0.0, timings)
        self.assertEqual(warm_up.timer.target_duration, 5.0)
        playing = transition(warm_up, Action.START_MATCH, 1.0, timings)
        time_out = transition(playing, Action.MEDICAL_TIME_OUT, 2.0, timings)
        self.assertEqual(time_out.timer.target_duration, 3.0)
        playing = transition(time_out, Action.PLAY, 3.0, timings)
        between = transition(playing, Action.SET_FINISHED, 4.0, timings)
        self.assertEqual(between.timer.target_duration, 4.0)

    def test_timings_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            MatchTimings(tactical_time_out=0).validate()
        MatchTimings().validate()

    def test_default_timings_cannot_be_changed(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_TIMINGS.warm_up = 5
        self.assertEqual(MatchTimings().warm_up, 120)


class TotalityTests(TimerModeMixin, unittest.TestCase):
    def test_every_phase_action_pair_is_defined(self) -> None:
        for action in Action:
            for state in sample_states(0.0):
                with self.subTest(phase=state.phase, action=action):
                    result = transition(state, action, 10.0)
                    self.assertIsInstance(result, VARIANTS)
                    self.assertTimerModes(result)
                    if action not in available_actions(state):
                        self.assertIs(result, state)
                    else:
                        self.assertIsNot(result, state)

    def test_undefined_action_leaves_timers_untouched(self) -> None:
        playing = playing_with_elapsed(20.0, 20.0)
        result = transition(playing, Action.START_MATCH, 50.0)
        self.assertIs(result, playing)
        self.assertTrue(playing.timer.is_running)
        self.assertEqual(playing.timer.elapsed(50.0), 50.0)


class ScenarioTests(unittest.TestCase):
    def test_warm_up_to_play(self) -> None:
        state = transition(AwaitingPlayers(), Action.START_WARM_UP, 0.0)
        self.assertEqual(state.timer.display(10.0), "1:50")
        state = transition(state, Action.START_MATCH, 120.0)
        self.assertIsInstance(state, Playing)
        self.assertEqual(state.timer.elapsed(120.0), 0.0)

    def test_time_out_round_trip(self) -> None:
        state = transition(playing_with_elapsed(37.0, 100.0), Action.TIME_OUT, 100.0)
        self.assertEqual(state.set_duration.elapsed(130.0), 37.0)
        self.assertFalse(state.timer.expired(160.0))
        self.assertTrue(state.timer.expired(161.0))
        state = transition(state, Action.PLAY, 161.0)
        self.assertEqual(state.timer.elapsed(161.0), 37.0)

    def test_full_match_cycle(self) -> None:
        state = AwaitingPlayers()
        steps = [
            (Action.START_WARM_UP, WarmUp),
            (Action.START_MATCH, Playing),
            (Action.PAUSE, Paused),
            (Action.TIME_OUT, TimeOut),
            (Action.PLAY, Playing),
            (Action.SET_FINISHED, BetweenSets),
            (Action.PLAY, Playing),
            (Action.SET_FINISHED, BetweenSets),
            (Action.MATCH_FINISHED, AwaitingPlayers),
        ]
        for i, (action, expected) in enumerate(steps):
            state = transition(state, action, float(i * 10))
            self.assertIsInstance(state, expected)


class QueryTests(unittest.TestCase):
    def test_resolve_action_priority_in_paused(self) -> None:
        paused = Paused(Timer())
        triggers = [Action.TIME_OUT, Action.MEDICAL_TIME_OUT, Action.PLAY]
        self.assertEqual(resolve_action(paused, triggers), Action.PLAY)
        self.assertEqual(resolve_action(paused, ["time-out", "medical-time-out"]),
                         Action.MEDICAL_TIME_OUT)
        self.assertEqual(resolve_action(paused, ["time-out"]), Action.TIME_OUT)

    def test_resolve_action_skips_undefined_triggers(self) -> None:
        playing = Playing(Timer.new_stopwatch(True, 0.0))
        self.assertEqual(resolve_action(playing, ["play", "set-finished"]), Action.SET_FINISHED)
        self.assertIsNone(resolve_action(playing, ["play", "start-match"]))
        self.assertIsNone(resolve_action(playing, []))

    def test_clock_toggle_action(self) -> None:
        self.assertEqual(clock_toggle_action(Playing(Timer.new_stopwatch(True, 0.0))), Action.PAUSE)
        self.assertEqual(clock_toggle_action(Paused(Timer())), Action.PLAY)
        self.assertIsNone(clock_toggle_action(AwaitingPlayers()))
        self.assertIsNone(clock_toggle_action(BetweenSets(Timer.new_countdown(60, True, 0.0))))

    def test_phase_titles(self) -> None:
        titles = [phase_title(state) for state in sample_states()]
        self.assertEqual(titles, [
            "Awaiting Players", "Warm-Up", "Playing", "Paused",
            "Tactical Time-Out", "Medical Time-Out", "Between Sets",
        ])

    def test_display_timer_and_redraw(self) -> None:
        for state in sample_states():
            with self.subTest(phase=state.phase):
                if state.phase is Phase.AWAITING_PLAYERS:
                    self.assertIsNone(display_timer(state))
                    self.assertFalse(needs_redraw(state))
                else:
                    self.assertIs(display_timer(state), state.timer)
                    self.assertTrue(needs_redraw(state))

    def test_available_actions(self) -> None:
        self.assertEqual(available_actions(AwaitingPlayers()), (Action.START_WARM_UP,))
        self.assertEqual(
            available_actions(Paused(Timer())),
            (Action.PLAY, Action.MEDICAL_TIME_OUT, Action.TIME_OUT),
        )
        self.assertEqual(
            available_actions(BetweenSets(Timer.new_countdown(60, True, 0.0))),
            (Action.PLAY, Action.MATCH_FINISHED),
        )


if __name__ == "__main__":
    unittest.main()
