class FlatIndex:
    """Row-major addressing of a ``side x side`` grid stored in one flat buffer."""

    def __init__(self, side: int):
        if side <= 0:
            raise ValueError(f"side must be positive, got {side}")
        self.side = side

    def __len__(self) -> int:
        return self.side * self.side

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.side and 0 <= col < self.side

    def index(self, row: int, col: int) -> int:
        if not self.contains(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.side}x{self.side} lattice")
        return row * self.side + col

    def position(self, index: int) -> tuple[int, int]:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} is outside a {self.side}x{self.side} lattice")
        return divmod(index, self.side)

    def neighbours(self, row: int, col: int) -> list[tuple[int, int]]:
        """Orthogonal neighbours in up, down, left, right order.

        Neighbours falling outside the grid are absent, there is no wrap-around.
        """
        candidates = ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
        return [(r, c) for r, c in candidates if self.contains(r, c)]
