from __future__ import annotations


class NoPathExistsError(RuntimeError):
    """Raised when no route connects the two endpoints of a shortest-path query."""

    def __init__(self, start: object, end: object) -> None:
        super().__init__(f"No path between {start!r} and {end!r}.")
        self.start = start
        self.end = end

    def __reduce__(self):
        return type(self), (self.start, self.end)


__all__ = ["NoPathExistsError"]
