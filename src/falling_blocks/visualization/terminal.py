from __future__ import annotations

import curses
from typing import Any, Dict, List

from falling_blocks.game import Command, GameSnapshot, GameStatus, TetrominoType


KEY_TO_COMMAND: Dict[int, Command] = {
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,
    curses.KEY_DOWN: Command.SOFT_DROP,
    curses.KEY_UP: Command.ROTATE,
    ord("a"): Command.MOVE_LEFT,
    ord("d"): Command.MOVE_RIGHT,
    ord("s"): Command.SOFT_DROP,
    ord("w"): Command.ROTATE,
    ord(" "): Command.HARD_DROP,
    ord("p"): Command.PAUSE,
    ord("q"): Command.QUIT,
    27: Command.QUIT,  # ESC
}

KIND_COLORS: Dict[TetrominoType, int] = {
    TetrominoType.I: curses.COLOR_CYAN,
    TetrominoType.O: curses.COLOR_YELLOW,
    TetrominoType.T: curses.COLOR_MAGENTA,
    TetrominoType.S: curses.COLOR_GREEN,
    TetrominoType.Z: curses.COLOR_RED,
    TetrominoType.J: curses.COLOR_BLUE,
    TetrominoType.L: curses.COLOR_WHITE,
}

FILLED = "[]"
EMPTY = "  "
HUD_ROWS = 1

STATUS_MESSAGES = {
    GameStatus.READY: "Press a game key to start",
    GameStatus.RUNNING: "",
    GameStatus.PAUSED: "Paused - press P to resume",
    GameStatus.OVER: "Game Over!",
}


def key_to_command(key: int) -> Command:
    return KEY_TO_COMMAND.get(key, Command.NONE)


def render_frame(snapshot: GameSnapshot) -> List[str]:
    """Text frame: HUD line, walled board rows, floor, status line."""
    state = snapshot.overlay()
    lines = [f"Score: {snapshot.score} Level: {snapshot.level} Lines: {snapshot.lines}"]
    for row in state:
        lines.append("|" + "".join(FILLED if v != 0 else EMPTY for v in row) + "|")
    lines.append("+" + "-" * (2 * snapshot.width) + "+")
    message = STATUS_MESSAGES[snapshot.status]
    if snapshot.game_over:
        message = f"{message} Score: {snapshot.score}"
    lines.append(message)
    return lines


class CursesInput:
    """Non-blocking key reader over a curses window."""

    def __init__(self, stdscr: Any) -> None:
        self.stdscr = stdscr
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)

    def poll(self) -> Command:
        key = self.stdscr.getch()
        if key == -1:
            return Command.NONE
        return key_to_command(key)


class CursesRenderer:
    def __init__(self, stdscr: Any, use_color: bool = True) -> None:
        self.stdscr = stdscr
        self.use_color = use_color
        if use_color:
            self._init_colors()

    def _init_colors(self) -> None:
        try:
            curses.curs_set(0)
            curses.start_color()
            curses.use_default_colors()
            for kind, color in KIND_COLORS.items():
                curses.init_pair(int(kind), color, -1)
        except curses.error:
            self.use_color = False

    def _attr(self, value: int) -> int:
        if not self.use_color or value == 0:
            return 0
        return curses.color_pair(abs(int(value)))

    def _safe_addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Writing past the window edge; the frame is clipped
            pass

    def draw(self, snapshot: GameSnapshot) -> None:
        frame = render_frame(snapshot)
        state = snapshot.overlay()
        self.stdscr.erase()
        for y, line in enumerate(frame):
            self._safe_addstr(y, 0, line)
        for y in range(snapshot.height):
            for x in range(snapshot.width):
                value = int(state[y, x])
                if value != 0:
                    self._safe_addstr(HUD_ROWS + y, 1 + 2 * x, FILLED, self._attr(value))
        self.stdscr.refresh()
