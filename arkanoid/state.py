from dataclasses import dataclass, field
from enum import Enum


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def terminal(self):
        return self is not GameStatus.PLAYING


@dataclass
class GameState:
    """Score, lives and the win/loss transitions between them."""

    initial_lives: int = 3
    score: int = field(default=0, init=False)
    lives: int = field(default=0, init=False)
    status: GameStatus = field(default=GameStatus.PLAYING, init=False)

    def __post_init__(self):
        self.lives = self.initial_lives

    def record_brick(self, total):
        self.score += 1
        if self.score == total:
            self.status = GameStatus.WON
        return self.status

    def record_miss(self):
        self.lives -= 1
        if self.lives <= 0:
            self.status = GameStatus.LOST
        return self.status

    def reset(self):
        self.score = 0
        self.lives = self.initial_lives
        self.status = GameStatus.PLAYING
