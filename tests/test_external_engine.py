"""
Unit Tests for the External UCI Engine Client

Uses small Python scripts standing in for a UCI engine binary, plus a real
Stockfish run when one is installed.
"""

import gc
import shutil
import stat
import sys
import threading
import warnings

import chess
import pytest

from chess_ai.config import Difficulty, UCIConfig
from chess_ai.uci.external import READER_THREAD_NAME, ExternalEngine, ExternalEngineError


ANSWERING_ENGINE = f"""#!{sys.executable}
import sys

for line in sys.stdin:
    cmd = line.strip()
    if cmd == "uci":
        print("id name FakeFish", flush=True)
        print("uciok", flush=True)
    elif cmd == "isready":
        print("readyok", flush=True)
    elif cmd.startswith("go"):
        print("info depth 1 score cp 20", flush=True)
        print("bestmove {{move}}", flush=True)
    elif cmd == "quit":
        break
"""

SILENT_ENGINE = f"""#!{sys.executable}
import sys

for line in sys.stdin:
    if line.strip() == "quit":
        break
"""

CRASHING_ENGINE = f"""#!{sys.executable}
import sys

sys.stdin.readline()
"""


def write_engine(tmp_path, source, name="engine"):
    path = tmp_path / name
    path.write_text(source)
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return str(path)


@pytest.fixture
def fast_config():
    """Short waits so timeout tests finish quickly."""
    return dict(grace_ms=0, min_wait_ms=100)


class TestParseBestmove:
    """Tests for bestmove line parsing."""

    def test_plain_move(self):
        move = ExternalEngine.parse_bestmove("bestmove e2e4", chess.Board())

        assert move == chess.Move.from_uci("e2e4")

    def test_move_with_ponder(self):
        move = ExternalEngine.parse_bestmove("bestmove g1f3 ponder g8f6", chess.Board())

        assert move == chess.Move.from_uci("g1f3")

    def test_promotion(self):
        board = chess.Board("8/4P3/8/8/8/8/k7/4K3 w - - 0 1")

        move = ExternalEngine.parse_bestmove("bestmove e7e8q", board)

        assert move.promotion == chess.QUEEN

    @pytest.mark.parametrize("line", ["bestmove (none)", "bestmove 0000", "bestmove"])
    def test_no_move(self, line):
        with pytest.raises(ExternalEngineError, match="no move"):
            ExternalEngine.parse_bestmove(line, chess.Board())

    def test_malformed_move(self):
        with pytest.raises(ExternalEngineError, match="malformed"):
            ExternalEngine.parse_bestmove("bestmove e9e4", chess.Board())

    def test_illegal_move(self):
        with pytest.raises(ExternalEngineError, match="illegal"):
            ExternalEngine.parse_bestmove("bestmove e2e5", chess.Board())


class TestEngineSetup:
    """Tests for engine discovery and command construction."""

    def test_missing_binary(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ExternalEngine(UCIConfig(engine_path=str(tmp_path / "nope")))

    def test_commands(self, tmp_path):
        engine = ExternalEngine(UCIConfig(engine_path=write_engine(tmp_path, SILENT_ENGINE)))
        board = chess.Board()

        assert engine.commands(board, Difficulty.EASY) == [
            "uci",
            "setoption name Skill Level value 1",
            "isready",
            "ucinewgame",
            f"position fen {board.fen()}",
            "go movetime 40",
        ]

    def test_commands_hard(self, tmp_path):
        engine = ExternalEngine(UCIConfig(engine_path=write_engine(tmp_path, SILENT_ENGINE)))

        commands = engine.commands(chess.Board(), Difficulty.HARD)

        assert "setoption name Skill Level value 10" in commands
        assert commands[-1] == "go movetime 160"


class TestBestMove:
    """Tests against scripted engine processes."""

    def test_returns_engine_move(self, tmp_path):
        path = write_engine(tmp_path, ANSWERING_ENGINE.replace("{move}", "d2d4"))
        engine = ExternalEngine(UCIConfig(engine_path=path))

        assert engine.best_move(chess.Board(), "hard") == chess.Move.from_uci("d2d4")

    def test_illegal_reply_raises(self, tmp_path):
        path = write_engine(tmp_path, ANSWERING_ENGINE.replace("{move}", "e2e5"))
        engine = ExternalEngine(UCIConfig(engine_path=path))

        with pytest.raises(ExternalEngineError, match="illegal"):
            engine.best_move(chess.Board())

    def test_silent_engine_times_out(self, tmp_path, fast_config):
        path = write_engine(tmp_path, SILENT_ENGINE)
        engine = ExternalEngine(UCIConfig(engine_path=path, **fast_config))

        with pytest.raises(ExternalEngineError, match="no bestmove within 160 ms"):
            engine.best_move(chess.Board(), Difficulty.HARD)

    def test_engine_exit_raises(self, tmp_path, fast_config):
        path = write_engine(tmp_path, CRASHING_ENGINE)
        engine = ExternalEngine(UCIConfig(engine_path=path, **fast_config))

        with pytest.raises((ExternalEngineError, OSError)):
            engine.best_move(chess.Board())

    @pytest.mark.parametrize(
        "source, error",
        [
            (ANSWERING_ENGINE.replace("{move}", "d2d4"), None),
            (SILENT_ENGINE, ExternalEngineError),
            (CRASHING_ENGINE, (ExternalEngineError, OSError)),
        ],
    )
    def test_releases_pipes_and_reader_thread(self, tmp_path, source, error):
        engine = ExternalEngine(UCIConfig(engine_path=write_engine(tmp_path, source)))
        gc.collect()

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ResourceWarning)
            if error is None:
                engine.best_move(chess.Board())
            else:
                with pytest.raises(error):
                    engine.best_move(chess.Board())
            gc.collect()

        leaked = [w for w in caught if issubclass(w.category, ResourceWarning)]
        assert not leaked, [str(w.message) for w in leaked]
        assert not [
            t for t in threading.enumerate() if t.name == READER_THREAD_NAME and t.is_alive()
        ]

    @pytest.mark.skipif(shutil.which("stockfish") is None, reason="Stockfish not installed")
    def test_real_stockfish(self):
        engine = ExternalEngine()
        board = chess.Board("6k1/5ppp/8/8/8/8/8/R6K w - - 0 1")

        move = engine.best_move(board, Difficulty.HARD)

        assert move in board.legal_moves
