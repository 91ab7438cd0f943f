class BrainfuckError(Exception):
    """Base class for interpreter errors."""


class UnbalancedBracketsError(BrainfuckError, SyntaxError):
    """A '[' or ']' without a partner."""

    def __init__(self, bracket: str, position: int):
        self.bracket = bracket
        self.position = position
        super().__init__(f"Unmatched '{bracket}' at position {position}")


class StepLimitExceeded(BrainfuckError):
    """The host-configured step limit was reached before the program ended."""

    def __init__(self, steps: int):
        self.steps = steps
        super().__init__(f"Execution stopped after {steps} steps (possible infinite loop)")


class ProgramLoadError(BrainfuckError):
    """The program source could not be read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Something went wrong while reading {path}")
