from typing import Optional

from tape_bf.brainfuck import Executor
from tape_bf.core.streams import BufferSink, BytesSource
from tape_bf.errors import BrainfuckError, ProgramLoadError


def load_program(path: str) -> str:
    """Read a program file as text. Undecodable bytes are kept as replacement
    characters, which the interpreter ignores like any other comment.
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except OSError as e:
        raise ProgramLoadError(path) from e


def run_program(code: str, input_data: bytes = b"", max_steps: Optional[int] = None,
                eof_value: int = 0) -> bytes:
    """Execute BF code on a fresh tape with in-memory I/O, return the output bytes."""
    sink = BufferSink()
    Executor(code, BytesSource(input_data, eof_value), sink, max_steps=max_steps).run()
    return sink.getvalue()


def run_once(code: str, x: int, max_steps: Optional[int] = None) -> Optional[int]:
    """Execute BF code with single byte input, return single byte output.
    Returns None when the program writes nothing or cannot run.
    """
    try:
        out = run_program(code, bytes([x & 0xFF]), max_steps=max_steps)
    except BrainfuckError:
        return None
    return out[0] if out else None
