"""Word search for XMAS and crossed MAS patterns."""

_WORD = "XMAS"
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (0, -1), (-1, 0), (-1, -1), (1, -1), (-1, 1))
_MAS_ENDS = {("M", "S"), ("S", "M")}
_OUTSIDE = "#"


class LetterGrid:
    """A rectangular grid of letters read from text."""

    def __init__(self, text):
        self._rows = text.splitlines()
        self._width = len(self._rows[0]) if self._rows else 0

    def _at(self, row, col):
        if 0 <= row < len(self._rows) and 0 <= col < len(self._rows[row]):
            return self._rows[row][col]
        return _OUTSIDE

    def _positions(self, letter):
        for row, line in enumerate(self._rows):
            for col, char in enumerate(line[: self._width]):
                if char == letter:
                    yield row, col

    def _xmas_at(self, row, col):
        return sum(
            1
            for dr, dc in _DIRECTIONS
            if all(
                self._at(row + i * dr, col + i * dc) == char
                for i, char in enumerate(_WORD)
            )
        )

    def _crossmas_at(self, row, col):
        diagonals = (
            (self._at(row - 1, col - 1), self._at(row + 1, col + 1)),
            (self._at(row - 1, col + 1), self._at(row + 1, col - 1)),
        )
        return all(diagonal in _MAS_ENDS for diagonal in diagonals)

    def xmas_count(self):
        """Occurrences of XMAS in any of the eight directions."""
        return sum(self._xmas_at(row, col) for row, col in self._positions("X"))

    def crossmas_count(self):
        """Number of A letters at the centre of two crossing MAS words."""
        return sum(1 for row, col in self._positions("A") if self._crossmas_at(row, col))


def part1(text):
    return LetterGrid(text).xmas_count()


def part2(text):
    return LetterGrid(text).crossmas_count()