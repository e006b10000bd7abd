# game_state.py
import logging
from enum import Enum
from typing import Optional

# Import from other project modules
import constants as const
from session import MazeSession

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    LOSS = "loss"


MSG_WIN = "You Win!"
MSG_FELL = "You Lost!\nReason: You fell into the canyon"
MSG_OUT_OF_PROJECTILES = (
    "You Lost!\nReason: You have no more projectiles, there are no more "
    "projectiles on the floor, and you have not destroyed the maze solution"
)
MSG_DESTROYED_TOO_EARLY = (
    "You Lost!\nReason: You destroyed the maze solution before reaching the other side"
)
MSG_LEFT_OTHER_SIDE = (
    "You Lost!\nReason: You destroyed the maze solution but you did not stay "
    "on the other side of the canyon"
)
MSG_PICK_UP_HINT = "Pick up projectiles from the green path"


class ProjectileInventory:
    """The player's count of throwable projectiles and the one in flight, if any."""

    def __init__(self, count: int = 0):
        if count < 0:
            raise ValueError("Projectile count cannot be negative.")
        self.count = count
        self.in_air = False

    def collect(self):
        self.count += 1

    def throw(self, game_over: bool = False) -> bool:
        """
        Spends one projectile and puts it in the air. Refused (returns False,
        spends nothing) while another projectile is in the air, once the game
        is over, or when the inventory is empty.
        """
        if self.in_air or game_over or self.count <= 0:
            return False
        self.count -= 1
        self.in_air = True
        return True

    def land(self):
        """The projectile in flight hit something or expired."""
        self.in_air = False


class WinLossDetector:
    """
    Decides once per simulation step whether the game is won or lost.

    The player wins by crossing the canyon through the maze and then
    destroying part of the maze solution while staying on the far side.
    Once an outcome other than IN_PROGRESS is reached it never changes.
    """

    def __init__(self, session: MazeSession, inventory: ProjectileInventory):
        self.session = session
        self.inventory = inventory
        self.reached_other_side_once = False
        self.outcome = GameOutcome.IN_PROGRESS
        self.message = ""

    @property
    def game_over(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS

    @staticmethod
    def on_other_side(player_x: float, player_y: float) -> bool:
        return player_x < const.OTHER_SIDE_MAX_X and player_y > const.OTHER_SIDE_MIN_Y

    # --- Game events ---
    def pick_up(self, row: int, col: int) -> bool:
        """The player touched corridor cell (row, col). Returns True on a pickup."""
        if self.session.collect_at(row, col):
            self.inventory.collect()
            return True
        return False

    def throw_projectile(self) -> bool:
        return self.inventory.throw(game_over=self.game_over)

    def projectile_hit(self, row: Optional[int] = None, col: Optional[int] = None) -> bool:
        """
        The projectile in flight is gone. If it hit a maze floor, (row, col)
        is that floor's expanded cell. Returns True if the solution was hit.
        """
        self.inventory.land()
        if row is None or col is None:
            return False
        return self.session.report_floor_destroyed(row, col)

    def update(self, player_x: float, player_y: float) -> GameOutcome:
        if self.game_over:
            return self.outcome

        if self.on_other_side(player_x, player_y):
            self.reached_other_side_once = True

        destroyed = self.session.is_solution_destroyed()
        projectiles_on_path = bool(self.session.collectibles)

        if player_y < const.FALL_Y:
            self._finish(GameOutcome.LOSS, MSG_FELL)
        elif self.inventory.count <= 0 and not destroyed:
            if not projectiles_on_path and not self.inventory.in_air:
                self._finish(GameOutcome.LOSS, MSG_OUT_OF_PROJECTILES)
            elif projectiles_on_path:
                self.message = MSG_PICK_UP_HINT
        elif destroyed and not self.reached_other_side_once:
            self._finish(GameOutcome.LOSS, MSG_DESTROYED_TOO_EARLY)
        elif destroyed:
            if self.on_other_side(player_x, player_y):
                self._finish(GameOutcome.WIN, MSG_WIN)
            else:
                self._finish(GameOutcome.LOSS, MSG_LEFT_OTHER_SIDE)
        else:
            self.message = ""

        return self.outcome

    def _finish(self, outcome: GameOutcome, message: str):
        self.outcome = outcome
        self.message = message
        logger.info("Game over (%s): %s", outcome.value, message.replace("\n", " "))
