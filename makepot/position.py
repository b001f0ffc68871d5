from bisect import bisect_right


class PositionIndex:
    """
    Map character offsets of a text to 1-based line numbers.
    The index holds the offset each line starts at, so a lookup is a
    binary search for the greatest line start not after the offset.
    """

    def __init__(self, content: str):
        self._starts = []
        self._lines = {}
        cumulative_length = 0
        for number, line in enumerate(content.split("\n"), start=1):
            self._starts.append(cumulative_length)
            self._lines[cumulative_length] = number
            # +1 for the newline character
            cumulative_length += len(line) + 1

    def __len__(self):
        return len(self._starts)

    def line_number(self, offset: int) -> int:
        if offset <= 0:
            return 1
        i = bisect_right(self._starts, offset) - 1
        return self._lines[self._starts[i]]
