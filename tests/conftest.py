from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tape_bf.brainfuck import Executor
from tape_bf.core.streams import BufferSink, BytesSource

PROGRAMS_DIR = Path(__file__).resolve().parents[1] / "programs"


@pytest.fixture()
def execute() -> Callable[..., tuple[Executor, BufferSink]]:
    """Run code on a fresh executor and hand back the executor and its sink."""

    def _execute(code: str, input_data: bytes = b"", **kwargs) -> tuple[Executor, BufferSink]:
        sink = BufferSink()
        ex = Executor(code, BytesSource(input_data), sink, **kwargs)
        ex.run()
        return ex, sink

    return _execute


@pytest.fixture()
def programs_dir() -> Path:
    return PROGRAMS_DIR


@pytest.fixture(autouse=True)
def _clean_bf_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BF_STEP_LIMIT", "BF_EOF_VALUE", "BF_PAUSE_ON_EXIT"):
        monkeypatch.delenv(name, raising=False)
