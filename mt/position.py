import dataclasses as dc

### POSITION ###

# inclusive (line, column) range, both zero based
# a single character has start == end

@dc.dataclass(frozen = True)
class Range:
    start: tuple[int, int]
    end: tuple[int, int]

    @staticmethod
    def point(line: int, column: int):
        return Range((line, column), (line, column))

    @staticmethod
    def span(first: 'Range', last: 'Range'):
        return Range(first.start, last.end)

    @property
    def lines(self):
        return self.start[0], self.end[0]

    def __str__(self):
        return f"{self.start[0]}, {self.start[1]} -> {self.end[0]}, {self.end[1]}"
