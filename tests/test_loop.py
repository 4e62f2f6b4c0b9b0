from falling_blocks.game import Command, GameStatus, TetrominoType, run_game


class ScriptedInput:
    def __init__(self, commands):
        self.commands = list(commands)

    def poll(self):
        return self.commands.pop(0) if self.commands else Command.NONE


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, snapshot):
        self.frames.append(snapshot)


def test_run_game_returns_final_score(make_game):
    game = make_game([TetrominoType.O] * 3, start=False)
    renderer = RecordingRenderer()
    sleeps = []
    commands = [Command.HARD_DROP, Command.HARD_DROP, Command.QUIT]
    score = run_game(game, ScriptedInput(commands), renderer, frame_delay=0.01, sleep=sleeps.append)
    assert score == 0
    assert [f.status for f in renderer.frames] == [
        GameStatus.READY,
        GameStatus.RUNNING,
        GameStatus.RUNNING,
        GameStatus.OVER,
    ]
    assert renderer.frames[2].grid.astype(bool).sum() == 4
    assert sleeps == [0.01, 0.01]


def test_run_game_stops_on_spawn_collision(make_game):
    game = make_game([TetrominoType.O] * 3)
    game.grid.grid[2:, 4:6] = 1
    renderer = RecordingRenderer()
    score = run_game(game, ScriptedInput([Command.HARD_DROP]), renderer, sleep=lambda _: None)
    assert score == 0
    assert renderer.frames[-1].game_over
