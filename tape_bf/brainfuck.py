#!/usr/bin/env python3
"""
Brainfuck Interpreter

A 7-bit variant of Brainfuck running on a circular tape of 1024 cells:
    >   Move the pointer to the right (1023 wraps to 0)
    <   Move the pointer to the left (0 wraps to 1023)
    +   Increment the memory cell at the pointer (127 wraps to 0)
    -   Decrement the memory cell at the pointer (0 wraps to 127)
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments and ignored.
"""

from enum import Enum
from typing import List, Optional

import numpy as np

from tape_bf.core.brackets import check_brackets
from tape_bf.core.streams import ByteSink, ByteSource
from tape_bf.errors import StepLimitExceeded, UnbalancedBracketsError

TAPE_SIZE = 1024
CELL_MIN = 0
CELL_MAX = 127


class Direction(Enum):
    """Directions the tape pointer can move in."""
    LEFT = -1
    RIGHT = 1


class Tape:
    """Fixed-size circular tape of 7-bit cells with a single data pointer."""

    def __init__(self, size: int = TAPE_SIZE):
        self.cells = np.zeros(size, dtype=np.uint8)
        self._pointer = 0

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def size(self) -> int:
        return len(self.cells)

    def current_value(self) -> int:
        return int(self.cells[self._pointer])

    def increment_current(self) -> None:
        value = self.current_value()
        self.cells[self._pointer] = CELL_MIN if value == CELL_MAX else value + 1

    def decrement_current(self) -> None:
        value = self.current_value()
        self.cells[self._pointer] = CELL_MAX if value == CELL_MIN else value - 1

    def move(self, direction: Direction) -> None:
        if direction is Direction.LEFT:
            self._pointer = self.size - 1 if self._pointer == 0 else self._pointer - 1
        else:
            self._pointer = 0 if self._pointer == self.size - 1 else self._pointer + 1

    def set_current(self, value: int) -> None:
        """Store a value in the current cell, wrapping it into the cell range."""
        self.cells[self._pointer] = int(value) % (CELL_MAX + 1)

    def snapshot(self) -> List[int]:
        """Copy of the cell values as plain ints."""
        return [int(v) for v in self.cells]


class Executor:
    """Runs one program against one tape.

    The executor owns its tape, its cursor and its loop control stack, so any
    number of isolated instances can run side by side. Input and output go
    through the injected byte source and byte sink.
    """

    def __init__(self, code: str, source: ByteSource, sink: ByteSink,
                 max_steps: Optional[int] = None):
        check_brackets(code)
        self.code = code
        self.source = source
        self.sink = sink
        self.max_steps = max_steps
        self.tape = Tape()
        self.cursor = 0
        self.loop_stack: List[int] = []
        self.step_count = 0

    def run(self) -> None:
        """Execute the program from the current cursor to the end of the source."""
        code = self.code
        while self.cursor < len(code):
            if self.max_steps is not None and self.step_count >= self.max_steps:
                raise StepLimitExceeded(self.step_count)

            cmd = code[self.cursor]
            if cmd == ',':
                self.tape.set_current(self.source.read_byte())
            elif cmd == '<':
                self.tape.move(Direction.LEFT)
            elif cmd == '>':
                self.tape.move(Direction.RIGHT)
            elif cmd == '+':
                self.tape.increment_current()
            elif cmd == '-':
                self.tape.decrement_current()
            elif cmd == '.':
                self.sink.write_byte(self.tape.current_value())
            elif cmd == '[':
                self.cursor = self._start_loop(self.cursor)
            elif cmd == ']':
                self.cursor = self._end_loop(self.cursor)

            self.cursor += 1
            self.step_count += 1

    def _start_loop(self, idx: int) -> int:
        """Enter the loop at idx, or return the index of its matching ']' to skip it."""
        if self.tape.current_value() != 0:
            self.loop_stack.append(idx)
            return idx
        return self._find_loop_end(idx)

    def _end_loop(self, idx: int) -> int:
        """Jump back to the open loop while the cell is nonzero, otherwise close it."""
        if self.tape.current_value() != 0:
            # Resuming right after the '[' keeps its stack entry in place.
            return self.loop_stack[-1]
        self.loop_stack.pop()
        return idx

    def _find_loop_end(self, start: int) -> int:
        depth = 0
        for i in range(start + 1, len(self.code)):
            c = self.code[i]
            if c == '[':
                depth += 1
            elif c == ']':
                if depth == 0:
                    return i
                depth -= 1
        raise UnbalancedBracketsError("[", start)
