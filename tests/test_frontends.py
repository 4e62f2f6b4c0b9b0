import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from falling_blocks.__main__ import build_parser, main  # noqa: E402
from falling_blocks.game import Command, GameStatus, TetrominoType  # noqa: E402
from falling_blocks.rl.random_agent import run_random  # noqa: E402
from falling_blocks.visualization.human_play import PygameInput  # noqa: E402
from falling_blocks.visualization.renderer import Renderer  # noqa: E402


@pytest.fixture
def screen():
    pygame.init()
    yield pygame.display.set_mode(Renderer.window_size(10, 20))
    pygame.quit()


def test_pygame_input_yields_one_command_per_poll(screen):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    source = PygameInput()
    assert source.poll() == Command.MOVE_LEFT
    assert source.poll() == Command.HARD_DROP
    assert source.poll() == Command.NONE


def test_pygame_quit_event_jumps_the_queue(screen):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert PygameInput().poll() == Command.QUIT


def test_pygame_renderer_draws_without_mutating(screen, make_game):
    game = make_game([TetrominoType.O])
    game.tick(Command.PAUSE)
    snapshot = game.snapshot()
    Renderer(screen).draw(snapshot)
    assert snapshot.status is GameStatus.PAUSED
    assert not snapshot.grid.any()


def test_cli_defaults():
    args = build_parser().parse_args([])
    assert args.frontend == "terminal"
    assert (args.width, args.height) == (10, 20)


def test_cli_rejects_bad_board():
    with pytest.raises(SystemExit):
        main(["--width", "2"])


def test_random_agent_runs(capsys):
    total = run_random(steps=50, seed=0)
    assert total >= 0.0
    assert "Random agent total reward" in capsys.readouterr().out
