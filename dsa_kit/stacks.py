"""A string stack and bracket-balance checking."""

_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())


class Stack:
    """Last-in, first-out stack of strings."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, item: str) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> str:
        """Remove and return the top item; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> str:
        """Return the top item without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def is_valid(s: str) -> bool:
    """Report whether the brackets ``()``, ``[]`` and ``{}`` in ``s`` balance.

    Characters other than brackets are ignored.
    """
    stack = Stack()
    for ch in s:
        if ch in _OPENING:
            stack.push(ch)
        elif ch in _CLOSING:
            if not stack or stack.pop() != _CLOSING[ch]:
                return False
    return not stack