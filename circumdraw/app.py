"""Command-driven front end for the drawing board and its random mover."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from circumdraw.board import MAX_MARKERS, Board
from circumdraw.geometry import Point, Rect

DEFAULT_AREA = Rect(10, 10, 650, 490)
DEFAULT_RADIUS = 20
DEFAULT_BORDER = 5

ROUNDS = 5
MOVES_PER_ROUND = 2
MOVE_INTERVAL = 0.5


class RandomMover:
    """Moves every marker to random places, twice a second, ten times in all."""

    def __init__(
        self,
        board: Board,
        on_update: Callable[[Board], None] | None = None,
        rng: random.Random | None = None,
        lock: threading.RLock | None = None,
        interval: float = MOVE_INTERVAL,
        sleep: Callable[[float], object] = time.sleep,
        rounds: int = ROUNDS,
        moves_per_round: int = MOVES_PER_ROUND,
    ) -> None:
        self.board = board
        self.on_update = on_update
        self.rng = rng or random.Random()
        self.lock = lock or threading.RLock()
        self.interval = interval
        self.sleep = sleep
        self.rounds = rounds
        self.moves_per_round = moves_per_round
        self.ready = True

    def start(self) -> threading.Thread | None:
        """Run the moves in a background thread.

        Returns the thread, or None when not all markers are placed or a
        previous run is still going.
        """
        if self.board.count < MAX_MARKERS or not self.ready:
            return None
        self.ready = False
        thread = threading.Thread(target=self._run_started, daemon=True)
        thread.start()
        return thread

    def _run_started(self) -> None:
        self.run()

    def run(self) -> int:
        """Perform all the moves in the calling thread; return how many were made."""
        self.ready = False
        moved = 0
        try:
            for _ in range(self.rounds):
                for _ in range(self.moves_per_round):
                    with self.lock:
                        self.board.randomize(self.rng)
                        if self.on_update is not None:
                            self.on_update(self.board)
                    moved += 1
                    self.sleep(self.interval)
                self.sleep(0)
        finally:
            self.ready = True
        return moved


class App:
    """Reads drawing commands line by line and applies them to a board.

    Commands: press X Y, release X Y, move X Y, click X Y, radius N,
    border N, reset, random, thread, wait, info, save PATH, quit.
    """

    def __init__(
        self,
        area: Rect | None = None,
        radius: int = DEFAULT_RADIUS,
        border: int = DEFAULT_BORDER,
        rng: random.Random | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        interval: float = MOVE_INTERVAL,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.board = Board(area or DEFAULT_AREA, radius=radius, border=border)
        self.rng = rng or random.Random()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._lock = threading.RLock()
        self.mover = RandomMover(
            self.board,
            on_update=self._show_info,
            rng=self.rng,
            lock=self._lock,
            interval=interval,
            sleep=sleep,
        )
        self._threads: list[threading.Thread] = []
        self._running = False
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "press": self._press,
            "release": self._release,
            "move": self._move,
            "click": self._click,
            "radius": self._radius,
            "border": self._border,
            "reset": self._reset,
            "random": self._random,
            "thread": self._thread,
            "wait": self._wait,
            "info": self._info,
            "save": self._save,
            "quit": self._quit,
            "exit": self._quit,
        }

    def run(self) -> int:
        """Process commands until end of input or quit; return the exit status."""
        self._running = True
        try:
            for raw in self.stdin:
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                name, *args = line.split()
                handler = self._commands.get(name.lower())
                if handler is None:
                    self._write(f"error: unknown command {name!r}\n")
                    continue
                try:
                    handler(args)
                except (ValueError, OSError) as exc:
                    self._write(f"error: {exc}\n")
                    continue
                if not self._running:
                    break
        finally:
            self._running = False
            self._join_threads()
        return 0

    def _write(self, text: str) -> None:
        with self._lock:
            self.stdout.write(text)
            self.stdout.flush()

    def _show_info(self, board: Board) -> None:
        self._write(board.position_info())

    def _join_threads(self) -> None:
        for thread in self._threads:
            thread.join()
        self._threads.clear()

    @staticmethod
    def _point(args: list[str]) -> Point:
        if len(args) != 2:
            raise ValueError("expected two coordinates: X Y")
        return Point(int(args[0]), int(args[1]))

    @staticmethod
    def _number(args: list[str]) -> int:
        if len(args) != 1:
            raise ValueError("expected one number")
        value = int(args[0])
        if value < 0:
            raise ValueError("value must not be negative")
        return value

    def _press(self, args: list[str]) -> None:
        point = self._point(args)
        with self._lock:
            before = self.board.count
            self.board.press(point)
            if self.board.count != before:
                self._show_info(self.board)

    def _release(self, args: list[str]) -> None:
        point = self._point(args)
        with self._lock:
            self.board.release(point)

    def _move(self, args: list[str]) -> None:
        point = self._point(args)
        with self._lock:
            self.board.move(point)
            self._show_info(self.board)

    def _click(self, args: list[str]) -> None:
        self._press(args)
        self._release(args)

    def _radius(self, args: list[str]) -> None:
        value = self._number(args)
        with self._lock:
            self.board.set_radius(value)

    def _border(self, args: list[str]) -> None:
        value = self._number(args)
        with self._lock:
            self.board.set_border(value)

    def _reset(self, args: list[str]) -> None:
        with self._lock:
            self.board.reset()
            self._show_info(self.board)

    def _random(self, args: list[str]) -> None:
        with self._lock:
            if self.board.randomize(self.rng):
                self._show_info(self.board)
            else:
                self._write("error: place all markers first\n")

    def _thread(self, args: list[str]) -> None:
        thread = self.mover.start()
        if thread is None:
            self._write("error: random movement is not available now\n")
        else:
            self._threads.append(thread)

    def _wait(self, args: list[str]) -> None:
        self._join_threads()

    def _info(self, args: list[str]) -> None:
        with self._lock:
            self._show_info(self.board)

    def _save(self, args: list[str]) -> None:
        if len(args) != 1:
            raise ValueError("expected a file path")
        with self._lock:
            data = self.board.render().to_pgm()
        Path(args[0]).write_bytes(data)

    def _quit(self, args: list[str]) -> None:
        self._running = False


def main(argv: list[str] | None = None) -> int:
    """Run the command interpreter on standard input."""
    parser = argparse.ArgumentParser(
        prog="circumdraw",
        description="Place three points and draw the circle through them.",
    )
    parser.add_argument("--left", type=int, default=DEFAULT_AREA.left)
    parser.add_argument("--top", type=int, default=DEFAULT_AREA.top)
    parser.add_argument("--width", type=int, default=DEFAULT_AREA.width)
    parser.add_argument("--height", type=int, default=DEFAULT_AREA.height)
    parser.add_argument("--radius", type=int, default=DEFAULT_RADIUS)
    parser.add_argument("--border", type=int, default=DEFAULT_BORDER)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    area = Rect(args.left, args.top, args.left + args.width, args.top + args.height)
    app = App(
        area=area,
        radius=args.radius,
        border=args.border,
        rng=random.Random(args.seed),
    )
    return app.run()


if __name__ == "__main__":
    sys.exit(main())