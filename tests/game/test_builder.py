"""Tests for building games from GameSettings."""

import pytest

from posgames.core.enums import GameKind
from posgames.core.tokens import EdgeToken
from posgames.game.builder import build_game, make_player
from posgames.game.interfaces import ChooserKind, GamePhase
from posgames.game.player import ManualChooser, RandomChooser, SmartChooser
from posgames.settings import GameSettings


class TestMakePlayer:
    def test_random(self) -> None:
        assert isinstance(make_player("a", ChooserKind.RANDOM).chooser, RandomChooser)

    def test_smart(self) -> None:
        assert isinstance(make_player("a", ChooserKind.SMART).chooser, SmartChooser)

    def test_manual_needs_reader(self) -> None:
        with pytest.raises(ValueError):
            make_player("a", ChooserKind.MANUAL)

    def test_manual(self) -> None:
        player = make_player("a", ChooserKind.MANUAL, read_token=lambda board: None)
        assert isinstance(player.chooser, ManualChooser)


class TestBuildGame:
    def test_defaults(self) -> None:
        game = build_game(GameSettings(seed=1))
        assert game.kind is GameKind.PROGRESSION
        assert game.objective == 4
        assert game.initial_token_count == 10
        assert [p.name for p in game.players] == ["john", "ioan"]
        assert game.phase == GamePhase.NOT_STARTED

    def test_clique_settings(self) -> None:
        settings = GameSettings(kind=GameKind.CLIQUE, node_count=5, clique_size=4)
        game = build_game(settings)
        assert game.objective == 4
        assert game.initial_token_count == 10
        assert all(isinstance(t, EdgeToken) for t in game.board_snapshot())

    def test_seed_reproduces_board(self) -> None:
        a = build_game(GameSettings(seed=9, max_token_value=40))
        b = build_game(GameSettings(seed=9, max_token_value=40))
        assert a.board_snapshot() == b.board_snapshot()

    def test_roster(self) -> None:
        settings = GameSettings(
            players=[("x", ChooserKind.SMART), ("y", ChooserKind.MANUAL)]
        )
        game = build_game(settings, read_token=lambda board: board[0])
        assert [p.is_interactive for p in game.players] == [False, True]

    def test_objective_follows_kind(self) -> None:
        settings = GameSettings(progression_size=6, clique_size=5)
        assert settings.objective == 6
        settings.kind = GameKind.CLIQUE
        assert settings.objective == 5
