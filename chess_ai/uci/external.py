"""
External UCI engine as an alternative move source.

Talks to a UCI engine binary (Stockfish by default) over stdin/stdout:
sends the position and a movetime, then waits a bounded time for the
"bestmove" line. Any failure is reported as an exception so the caller can
fall back to the built-in search.

Protocol Flow:
    Client → "uci"
    Client → "setoption name Skill Level value 10"
    Client → "isready"
    Client → "ucinewgame"
    Client → "position fen <FEN>"
    Client → "go movetime 160"
    Engine → "bestmove e2e4"

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

import logging
import queue
import shutil
import subprocess
import threading
import time
from pathlib import Path
from typing import List, Optional, Union

import chess

from chess_ai.config import Difficulty, UCIConfig

logger = logging.getLogger(__name__)

READER_THREAD_NAME = "uci-engine-reader"


class ExternalEngineError(RuntimeError):
    """The external engine did not produce a usable move."""


class ExternalEngine:
    """Ask a UCI engine process for one move at a time."""

    def __init__(self, config: Optional[UCIConfig] = None):
        """
        Initialize the external engine client.

        Args:
            config: Engine path and waiting policy (default: UCIConfig())

        Raises:
            FileNotFoundError: If the engine binary is not found
        """
        self.config = config if config is not None else UCIConfig()

        engine_path = self.config.engine_path
        if engine_path is None:
            engine_path = self._find_engine()

        if not Path(engine_path).exists():
            raise FileNotFoundError(
                f"UCI engine binary not found at: {engine_path}\n"
                "Install with: brew install stockfish (macOS) or apt install stockfish (Linux)"
            )

        self.engine_path = engine_path
        logger.info(f"Initialized external UCI engine: {engine_path}")

    def _find_engine(self) -> str:
        """
        Auto-detect Stockfish binary location.

        Raises:
            FileNotFoundError: If Stockfish not found
        """
        candidates = [
            "stockfish",
            "/usr/local/bin/stockfish",
            "/usr/bin/stockfish",
            "/usr/games/stockfish",
            "/opt/homebrew/bin/stockfish",
        ]

        for candidate in candidates:
            path = shutil.which(candidate)
            if path:
                return path

        raise FileNotFoundError(
            "Stockfish not found. Install with: brew install stockfish (macOS) "
            "or apt install stockfish (Linux)"
        )

    def commands(self, board: chess.Board, difficulty: Difficulty) -> List[str]:
        """UCI commands sent for one move request."""
        return [
            "uci",
            f"setoption name Skill Level value {self.config.skill_level(difficulty)}",
            "isready",
            "ucinewgame",
            f"position fen {board.fen()}",
            f"go movetime {self.config.movetime_ms(difficulty)}",
        ]

    def best_move(
        self, board: chess.Board, difficulty: Union[str, Difficulty] = Difficulty.HARD
    ) -> chess.Move:
        """
        Ask the engine for its move in a position.

        Args:
            board: Position to search (not modified)
            difficulty: Tier deciding skill level, movetime and wait

        Returns:
            chess.Move: Legal move chosen by the engine

        Raises:
            ExternalEngineError: On timeout, engine exit, or an unusable move
        """
        difficulty = Difficulty.parse(difficulty)
        wait_ms = self.config.wait_ms(difficulty)

        with subprocess.Popen(
            [self.engine_path],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
        ) as process:
            lines: "queue.Queue[Optional[str]]" = queue.Queue()
            reader = threading.Thread(
                target=self._read_lines,
                args=(process, lines),
                name=READER_THREAD_NAME,
                daemon=True,
            )
            reader.start()

            try:
                for cmd in self.commands(board, difficulty):
                    process.stdin.write(cmd + "\n")
                process.stdin.flush()

                reply = self._wait_for_bestmove(lines, wait_ms)
            finally:
                self._shutdown(process)
                # Process is gone, so stdout hits EOF and the reader ends
                reader.join(timeout=1.0)

        return self.parse_bestmove(reply, board)

    @staticmethod
    def _read_lines(process: subprocess.Popen, lines: "queue.Queue[Optional[str]]"):
        for line in process.stdout:
            lines.put(line.strip())
        lines.put(None)

    def _wait_for_bestmove(self, lines: "queue.Queue[Optional[str]]", wait_ms: int) -> str:
        deadline = time.monotonic() + wait_ms / 1000.0

        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise ExternalEngineError(f"no bestmove within {wait_ms} ms")

            try:
                line = lines.get(timeout=remaining)
            except queue.Empty:
                raise ExternalEngineError(f"no bestmove within {wait_ms} ms") from None

            if line is None:
                raise ExternalEngineError("engine exited before sending bestmove")

            if line.startswith("bestmove"):
                logger.debug(f"<<< {line}")
                return line

    @staticmethod
    def parse_bestmove(line: str, board: chess.Board) -> chess.Move:
        """
        Parse a "bestmove <uci> [ponder <uci>]" line into a legal move.

        Raises:
            ExternalEngineError: If the move is missing, malformed or illegal
        """
        parts = line.split()
        if len(parts) < 2 or parts[1] in ("(none)", "0000"):
            raise ExternalEngineError(f"engine returned no move: {line!r}")

        try:
            move = chess.Move.from_uci(parts[1])
        except ValueError:
            raise ExternalEngineError(f"malformed bestmove: {line!r}") from None

        if not board.is_legal(move):
            raise ExternalEngineError(f"engine returned illegal move {parts[1]} in {board.fen()}")

        return move

    def _shutdown(self, process: subprocess.Popen):
        try:
            process.stdin.write("quit\n")
            process.stdin.flush()
        except OSError as e:
            # Engine already gone
            logger.debug(f"Could not send quit: {e}")

        try:
            process.wait(timeout=1.0)
        except subprocess.TimeoutExpired:
            logger.warning("External engine did not quit, killing it")
            process.kill()
            process.wait()

        try:
            process.stdin.close()
        except OSError as e:
            # Unflushed "quit" to a dead engine; the pipe is closed regardless
            logger.debug(f"Could not close engine stdin: {e}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(engine_path={self.engine_path!r})"
