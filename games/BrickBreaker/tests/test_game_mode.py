"""Tests for BrickBreakerMode: commands, frame driving and rendering."""

from dataclasses import replace
from unittest.mock import Mock

import pygame
import pytest

from arcadekit.games import GameStatus
from arcadekit.games.input import InputEvent
from arcadekit.logging import LogSink, close_all_sinks, register_sink
from games.BrickBreaker.config import BrickLayout
from games.BrickBreaker.game.simulation import initial_state
from games.BrickBreaker.game.skins import GeometricSkin
from games.BrickBreaker.game_mode import BrickBreakerMode
from models import EventType, Vector2D


def pointer(x, y=400.0, event_type=EventType.MOVE):
    return InputEvent(position=Vector2D(x=x, y=y), timestamp=1.0, event_type=event_type)


@pytest.fixture
def losing_game(config):
    """Game whose ball falls straight down past a paddle moved aside."""
    game = BrickBreakerMode(config=replace(config, ball_start_dx=0.0, ball_start_dy=6.0))
    game.handle_input([pointer(1200.0)])
    return game


@pytest.fixture
def winning_game(config):
    """Game whose ball rises straight into the only brick."""
    layout = BrickLayout(
        rows=1, cols=1,
        brick_width=20.0, brick_height=20.0, gap=5.0,
        offset_x=590.0, offset_y=600.0,
    )
    return BrickBreakerMode(config=replace(config, ball_start_dx=0.0, layout=layout))


def run_until_finished(game, max_frames=1000):
    for _ in range(max_frames):
        if not game.tick():
            break
    return game


@pytest.fixture
def session_sink():
    """Mock sink registered for session records."""
    sink = Mock(spec=LogSink)
    register_sink('session', sink)
    yield sink
    close_all_sinks()


class TestInitialState:
    """Test a freshly created game."""

    def test_waiting(self, game):
        assert game.state == GameStatus.WAITING
        assert game.get_score() == 0

    def test_driver_stopped(self, game):
        assert game.frame_driver.is_running is False

    def test_snapshot_is_fresh_session(self, game, config):
        assert game.snapshot == initial_state(config)

    def test_unknown_skin_falls_back(self, config):
        assert isinstance(BrickBreakerMode(config=config, skin='nope').skin, GeometricSkin)

    def test_info_lists_arguments(self):
        names = [arg['name'] for arg in BrickBreakerMode.get_info()['arguments']]
        assert names == ['--skin', '--layout', '--brick-hit-test', '--fps', '--log-level']


class TestCommands:
    """Test start and reset legality."""

    def test_start_from_waiting(self, game):
        assert game.start() is True
        assert game.state == GameStatus.PLAYING

    def test_start_while_playing_is_ignored(self, game):
        game.start()
        assert game.start() is False
        assert game.state == GameStatus.PLAYING

    def test_reset_while_waiting_is_ignored(self, game):
        assert game.reset() is False
        assert game.state == GameStatus.WAITING

    def test_reset_while_playing_is_ignored(self, game):
        game.start()
        game.tick()
        snapshot = game.snapshot
        assert game.reset() is False
        assert game.snapshot is snapshot

    def test_reset_after_loss_equals_fresh_session(self, losing_game):
        losing_game.start()
        run_until_finished(losing_game)
        assert losing_game.state == GameStatus.GAME_OVER
        assert losing_game.reset() is True
        assert losing_game.snapshot == initial_state(losing_game.config)

    def test_reset_after_win(self, winning_game):
        winning_game.start()
        run_until_finished(winning_game)
        assert winning_game.state == GameStatus.WON
        assert winning_game.reset() is True
        assert winning_game.state == GameStatus.WAITING
        assert winning_game.get_score() == 0
        assert winning_game.snapshot.bricks.visible_count == 1

    def test_start_after_game_over_is_ignored(self, losing_game):
        losing_game.start()
        run_until_finished(losing_game)
        assert losing_game.start() is False
        assert losing_game.state == GameStatus.GAME_OVER


class TestFrameDriving:
    """Test that frames run exactly while PLAYING."""

    def test_no_frames_while_waiting(self, game):
        snapshot = game.snapshot
        assert game.tick() is False
        assert game.snapshot is snapshot

    def test_start_runs_driver(self, game):
        game.start()
        assert game.frame_driver.is_running is True

    def test_one_step_per_tick(self, game):
        game.start()
        assert game.tick() is True
        ball = game.snapshot.ball
        assert (ball.x, ball.y) == (606.0, 694.0)
        assert game.frame_driver.frame_count == 1

    def test_update_is_noop_while_waiting(self, game):
        snapshot = game.snapshot
        game.update()
        assert game.snapshot is snapshot

    def test_loss_stops_driver(self, losing_game):
        losing_game.start()
        run_until_finished(losing_game)
        assert losing_game.state == GameStatus.GAME_OVER
        assert losing_game.frame_driver.is_running is False
        assert losing_game.frame_driver.frame_count == 9

    def test_no_updates_after_loss(self, losing_game):
        losing_game.start()
        run_until_finished(losing_game)
        snapshot = losing_game.snapshot
        assert losing_game.tick() is False
        assert losing_game.snapshot is snapshot

    def test_win_stops_driver(self, winning_game):
        winning_game.start()
        run_until_finished(winning_game)
        assert winning_game.state == GameStatus.WON
        assert winning_game.get_score() == 10
        assert winning_game.frame_driver.is_running is False

    def test_reset_leaves_driver_stopped(self, losing_game):
        losing_game.start()
        run_until_finished(losing_game)
        losing_game.reset()
        assert losing_game.frame_driver.is_running is False
        assert losing_game.tick() is False


class TestInput:
    """Test paddle tracking through handle_input."""

    def test_paddle_follows_pointer_while_waiting(self, game):
        game.handle_input([pointer(700.0)])
        assert game.snapshot.paddle.x == 550.0

    def test_paddle_clamped(self, game):
        game.handle_input([pointer(5.0)])
        assert game.snapshot.paddle.x == 0.0
        game.handle_input([pointer(5000.0)])
        assert game.snapshot.paddle.x == 900.0

    def test_last_event_wins(self, game):
        game.handle_input([pointer(300.0), pointer(700.0), pointer(650.0)])
        assert game.snapshot.paddle.x == 500.0

    def test_press_moves_paddle_too(self, game):
        game.handle_input([pointer(700.0, event_type=EventType.PRESS)])
        assert game.snapshot.paddle.x == 550.0

    def test_input_after_game_over_moves_paddle(self, losing_game):
        losing_game.start()
        run_until_finished(losing_game)
        losing_game.handle_input([pointer(600.0)])
        assert losing_game.snapshot.paddle.x == 450.0
        assert losing_game.state == GameStatus.GAME_OVER

    def test_input_does_not_step(self, game):
        game.start()
        ball = game.snapshot.ball
        game.handle_input([pointer(100.0)])
        assert game.snapshot.ball == ball


class TestRendering:
    """Test the per-frame render pass."""

    def test_frame_draws_ball(self, game):
        surface = pygame.Surface((1200, 750))
        game.attach_surface(surface)
        game.start()
        game.tick()
        assert tuple(surface.get_at((606, 694)))[:3] == GeometricSkin.BALL_COLOR

    def test_frame_without_surface_still_steps(self, game):
        game.start()
        assert game.tick() is True
        assert game.snapshot.ball.y == 694.0

    def test_render_none_is_noop(self, game):
        game.render(None)

    def test_render_waiting_screen(self, game):
        surface = pygame.Surface((1200, 750))
        game.render(surface)
        assert tuple(surface.get_at((600, 722)))[:3] == GeometricSkin.PADDLE_COLOR


class TestStatusEffects:
    """Test records and sounds on status changes."""

    def test_transition_record(self, game, session_sink):
        game.start()
        module, record = session_sink.emit.call_args[0]
        assert module == 'session'
        assert record['type'] == 'transition'
        assert (record['from'], record['to']) == ('waiting', 'playing')
        assert record['session'] == 1

    def test_reset_increments_session_number(self, losing_game, session_sink):
        losing_game.start()
        run_until_finished(losing_game)
        losing_game.reset()
        record = session_sink.emit.call_args[0][1]
        assert (record['from'], record['to'], record['session']) == ('game_over', 'waiting', 2)

    def test_game_over_sound(self, losing_game):
        losing_game.skin.play_game_over_sound = Mock()
        losing_game.start()
        run_until_finished(losing_game)
        losing_game.skin.play_game_over_sound.assert_called_once()

    def test_win_sounds(self, winning_game):
        winning_game.skin.play_level_complete_sound = Mock()
        winning_game.skin.play_brick_break_sound = Mock()
        winning_game.start()
        run_until_finished(winning_game)
        winning_game.skin.play_level_complete_sound.assert_called_once()
        winning_game.skin.play_brick_break_sound.assert_called_once()
