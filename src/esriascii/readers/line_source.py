"""Forward-only line reader shared by the header and grid readers."""

from typing import Iterable, Iterator, List, Optional


class LineSource:
    """
    Wraps an iterable of text lines (usually an open file) so the header
    reader can hand back a line it does not own. The grid reader then picks
    up that line as the first data row, so the input is read once.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._pushed: List[str] = []
        self.line_number = 0

    def next_line(self) -> Optional[str]:
        """Returns the next line without its line ending, or None at end of input."""
        if self._pushed:
            line = self._pushed.pop()
        else:
            line = next(self._lines, None)
            if line is None:
                return None
            line = line.rstrip('\r\n')
        self.line_number += 1
        return line

    def push_back(self, line: str) -> None:
        self._pushed.append(line)
        self.line_number -= 1
