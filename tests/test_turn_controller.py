"""
Turn Controller Tests

End-to-end turn flow against the mock engine: initialize, breach recording
from action frames, and the per-turn planner sequence.

Run with: python -m pytest tests/test_turn_controller.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import logging

import pytest

from algo.game_types import BreachEvent
from algo.match_session import MatchSession
from algo.offensive_planner import LINE_PUSH, SWARM
from algo.strategy_config import DEFAULT_CONFIG_PATH, DEFAULT_LAYOUTS, StrategyConfig
from algo.turn_controller import TurnController
from mock_game import MockTurnSnapshot


@pytest.fixture
def controller():
    ctrl = TurnController(seed=1234, strategy_config=StrategyConfig(str(DEFAULT_CONFIG_PATH)))
    ctrl.initialize()
    return ctrl


def frame(*breaches) -> MockTurnSnapshot:
    return MockTurnSnapshot(breaches=[BreachEvent(location=loc, unit_owner=owner)
                                      for loc, owner in breaches])


class TestInitialize:

    def test_injected_seed(self, caplog):
        ctrl = TurnController(seed=99, strategy_config=StrategyConfig(str(DEFAULT_CONFIG_PATH)))
        with caplog.at_level(logging.INFO):
            ctrl.initialize()
        assert ctrl.session.seed == 99
        assert "Set random seed to: 99" in caplog.text

    def test_generated_seed_when_none_given(self, monkeypatch):
        from algo import turn_controller
        monkeypatch.setattr(turn_controller.app_config, "RANDOM_SEED", None)
        ctrl = TurnController(strategy_config=StrategyConfig(str(DEFAULT_CONFIG_PATH)))
        ctrl.initialize()
        assert isinstance(ctrl.session.seed, int)
        assert ctrl.session.seed >= 0

    def test_initialize_resets_history(self, controller):
        controller.on_action_frame(frame(((10, 3), 2)))
        controller.initialize()
        assert controller.session.scored_on_locations == []

    def test_same_seed_same_random_stream(self):
        cfg = StrategyConfig(str(DEFAULT_CONFIG_PATH))
        first = TurnController(seed=5, strategy_config=cfg)
        second = TurnController(seed=5, strategy_config=cfg)
        first.initialize()
        second.initialize()
        assert [first.session.rng.random() for _ in range(3)] == \
               [second.session.rng.random() for _ in range(3)]

    def test_callbacks_before_initialize_rejected(self):
        ctrl = TurnController(seed=1, strategy_config=StrategyConfig(str(DEFAULT_CONFIG_PATH)))
        with pytest.raises(RuntimeError):
            ctrl.on_turn(MockTurnSnapshot())
        with pytest.raises(RuntimeError):
            ctrl.on_action_frame(frame())


class TestActionFrames:

    def test_only_opponent_breaches_recorded(self, controller):
        added = controller.on_action_frame(frame(((10, 3), 2), ((20, 6), 1), ((4, 9), 2)))
        assert added == 2
        assert controller.session.scored_on_locations == [(10, 3), (4, 9)]

    def test_duplicates_preserved_across_frames(self, controller):
        controller.on_action_frame(frame(((10, 3), 2)))
        controller.on_action_frame(frame(((10, 3), 2)))
        controller.on_action_frame(frame())
        assert controller.session.scored_on_locations == [(10, 3), (10, 3)]

    def test_own_breaches_never_recorded(self, controller):
        assert controller.on_action_frame(frame(((13, 27), 1), ((14, 27), 1))) == 0
        assert controller.session.scored_on_locations == []

    def test_session_record_breaches_directly(self):
        session = MatchSession(seed=0, my_player_id=2)
        count = session.record_breaches([BreachEvent((1, 12), 1), BreachEvent((2, 11), 2)])
        assert count == 1
        assert session.scored_on_locations == [(1, 12)]


class TestOnTurn:

    @pytest.mark.parametrize("turn", [0, 1, 5, 9, 10, 11, 20, 25])
    def test_exactly_one_offensive_branch(self, controller, turn):
        snapshot = MockTurnSnapshot(turn_number=turn)
        branch = controller.on_turn(snapshot)

        pings = snapshot.spawns_of("PI")
        emps = snapshot.spawns_of("EI")
        if turn % 10 == 0:
            assert branch == SWARM
            assert len(pings) == 100
            assert emps == []
        else:
            assert branch == LINE_PUSH
            assert pings == []
            assert len(emps) == 22

    def test_defenses_before_offense(self, controller):
        snapshot = MockTurnSnapshot(turn_number=3)
        controller.on_turn(snapshot)
        n_destructors = len(DEFAULT_LAYOUTS["destructors"])
        assert [t for t, _ in snapshot.spawn_calls[:n_destructors]] == ["DF"] * n_destructors
        assert snapshot.spawn_calls[-1] == ("EI", (24, 10))

    def test_filter_cadence_through_controller(self, controller):
        on_five = MockTurnSnapshot(turn_number=15)
        off_five = MockTurnSnapshot(turn_number=16)
        controller.on_turn(on_five)
        controller.on_turn(off_five)
        # Line push also uses filters; the layout cells only appear on turn 15
        layout = set(DEFAULT_LAYOUTS["filter_protect"])
        assert layout <= set(on_five.spawns_of("FF"))
        assert not layout & set(off_five.spawns_of("FF"))
        assert off_five.upgrade_calls == list(DEFAULT_LAYOUTS["filter_protect"])

    def test_breach_patched_on_following_turns(self, controller):
        controller.on_action_frame(frame(((10, 5), 2)))

        for turn in (1, 2):
            snapshot = MockTurnSnapshot(turn_number=turn)
            controller.on_turn(snapshot)
            assert snapshot.spawns_of("DF").count((10, 6)) == 1

    def test_census_logged_at_debug(self, controller, caplog):
        with caplog.at_level(logging.DEBUG, logger="algo.turn_controller"):
            controller.on_turn(MockTurnSnapshot(turn_number=2))
        assert "units on the enemy half" in caplog.text
