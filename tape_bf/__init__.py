"""Brainfuck interpreter with a 1024-cell, 7-bit circular tape."""

from tape_bf.brainfuck import Direction, Executor, Tape
from tape_bf.core.bf_runner import load_program, run_once, run_program
from tape_bf.errors import (
    BrainfuckError,
    ProgramLoadError,
    StepLimitExceeded,
    UnbalancedBracketsError,
)

__version__ = "0.1.0"
