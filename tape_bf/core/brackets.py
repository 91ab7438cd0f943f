from tape_bf.errors import UnbalancedBracketsError


def check_brackets(code: str) -> None:
    """Raise UnbalancedBracketsError for the first bracket without a partner.

    A stray ']' is reported where it occurs; unclosed '[' are reported at the
    innermost one still open when the source ends.
    """
    stack = []
    for i, cmd in enumerate(code):
        if cmd == '[':
            stack.append(i)
        elif cmd == ']':
            if not stack:
                raise UnbalancedBracketsError(']', i)
            stack.pop()

    if stack:
        raise UnbalancedBracketsError('[', stack[-1])
