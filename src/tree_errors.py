"""Iterator failures raised by the binary search tree."""

from typing import Optional


class ConcurrentModificationError(RuntimeError):
    """The tree changed underneath a live iterator."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"tree modified during iteration "
            f"(iterator generation {self.expected}, tree generation {self.actual})"
        )


class IllegalIteratorStateError(RuntimeError):
    """``remove()`` was called when there is nothing it may remove."""

    def __init__(self, reason: str, *, cause: Optional[Exception] = None) -> None:
        self.reason = reason
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.cause:
            return f"cannot remove: {self.reason}: {self.cause}"
        return f"cannot remove: {self.reason}"
