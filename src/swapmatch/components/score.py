from dataclasses import dataclass


@dataclass(slots=True)
class Score:
    """Running score for the board entity."""
    total: int = 0
    last_delta: int = 0

    def add(self, amount: int) -> None:
        self.last_delta = amount
        self.total += amount
