#!/usr/bin/env python3
"""
Command-line host for the interpreter.

Loads a program file, runs it against the console (or against --input text)
and waits for a key before exiting, so the output stays readable when the
interpreter is launched from a file manager.

Usage:
    tape-bf hello.b
    tape-bf echo.b --input "abc" --no-pause
"""

import argparse
import os
import sys
from typing import List, Optional

from tape_bf.brainfuck import Executor
from tape_bf.config import load_config
from tape_bf.core.bf_runner import load_program
from tape_bf.core.streams import BytesSource, ConsoleSink, ConsoleSource
from tape_bf.errors import BrainfuckError, ProgramLoadError


def wait_for_key() -> None:
    """Block until a single key is pressed on the controlling terminal."""
    if os.name == 'nt':
        import msvcrt
        msvcrt.getch()
        return

    import termios
    import tty
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        # Discard input still queued from ',' reads.
        termios.tcflush(fd, termios.TCIFLUSH)
        os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def step_limit_arg(value: str) -> int:
    steps = int(value)
    if steps < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {steps}")
    return steps


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tape-bf", description="Run a Brainfuck program on a 1024-cell, 7-bit circular tape")
    ap.add_argument("program", help="Path to the program source file")
    ap.add_argument("--input", default=None, help="Feed this text to ',' instead of reading stdin")
    ap.add_argument("--no-pause", action="store_true", help="Exit without waiting for a key press")
    ap.add_argument("--step-limit", type=step_limit_arg, default=None, help="Abort after this many steps (overrides BF_STEP_LIMIT; 0 = unlimited)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config()

    step_limit = cfg.step_limit
    if args.step_limit is not None:
        step_limit = args.step_limit or None

    try:
        code = load_program(args.program)
    except ProgramLoadError as e:
        print(f"[ERROR]: {e}", file=sys.stderr)
        return 1

    if args.input is not None:
        source = BytesSource(args.input.encode('latin-1', errors='replace'), eof_value=cfg.eof_value)
    else:
        source = ConsoleSource(eof_value=cfg.eof_value)

    try:
        Executor(code, source, ConsoleSink(), max_steps=step_limit).run()
    except BrainfuckError as e:
        print(f"\n[ERROR]: {e}", file=sys.stderr)
        return 2

    print("\n\nFinished interpreting.")
    if cfg.pause_on_exit and not args.no_pause and sys.stdin.isatty():
        print("Press any key to close this window.")
        wait_for_key()
    return 0


if __name__ == "__main__":
    sys.exit(main())
