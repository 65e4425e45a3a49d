"""Navigation over a bill collection.

One controller serves both layouts:
  - WRAP  (card view):   position wraps around both ends.
  - CLAMP (scroll view): position saturates at the first and last bill.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.engine.errors import EmptyCollectionError, InvalidConfigurationError


class Command(str, Enum):
    """Logical user commands."""

    BACK = "back"
    DISLIKE = "dislike"
    SKIP = "skip"
    LIKE = "like"


class NavigationPolicy(str, Enum):
    """Boundary behaviour of the position pointer."""

    WRAP = "wrap"
    CLAMP = "clamp"

    @classmethod
    def parse(cls, value: str | NavigationPolicy) -> NavigationPolicy:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise InvalidConfigurationError(
                f"Unknown navigation policy {value!r}. Valid: {valid}"
            ) from None


VALID_DIRECTIONS = (-1, 0, 1)

# Back moves by 0 unless the deployment configures otherwise.
DEFAULT_DIRECTIONS: dict[Command, int] = {
    Command.BACK: 0,
    Command.DISLIKE: -1,
    Command.SKIP: 0,
    Command.LIKE: 1,
}


def zero_direction_advances(direction: int) -> int:
    """WRAP rule: a requested direction of 0 moves forward by one.

    Open question: this keeps skip (and back) moving forward in the card view.
    Kept as its own rule so it can be revisited without touching the policy code.
    """
    return direction if direction != 0 else 1


@dataclass
class NavigationState:
    """Mutable, session-scoped pointer. Written only by NavigationController."""

    position: int = 0
    last_command: Command | None = None
    last_direction: int = 0


class NavigationController:
    """Moves the position pointer according to a navigation policy."""

    def __init__(
        self,
        length: int,
        policy: NavigationPolicy | str = NavigationPolicy.WRAP,
        back_direction: int = 0,
    ):
        """Create a controller for a collection of ``length`` bills.

        Args:
            length: Number of bills in the collection (may be 0).
            policy: WRAP or CLAMP (enum or its string value).
            back_direction: Direction used by the back command (-1, 0 or 1).
        """
        if back_direction not in VALID_DIRECTIONS:
            raise InvalidConfigurationError(
                f"back_direction must be one of {VALID_DIRECTIONS}, got {back_direction!r}"
            )
        self.length = length
        self.policy = NavigationPolicy.parse(policy)
        self.directions = dict(DEFAULT_DIRECTIONS)
        self.directions[Command.BACK] = back_direction
        self.state = NavigationState()

    @property
    def position(self) -> int:
        return self.state.position

    def advance(self, direction: int, command: Command) -> int:
        """Apply one command and return the new position.

        Args:
            direction: Requested move, one of -1, 0, 1.
            command: The command that requested the move (recorded for the presenter).

        Returns:
            The new 0-based position.

        Raises:
            EmptyCollectionError: If the collection holds no bills.
            ValueError: If direction is outside {-1, 0, 1} or command is unknown.
        """
        if self.length <= 0:
            raise EmptyCollectionError()
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"direction must be one of {VALID_DIRECTIONS}, got {direction!r}")
        command = Command(command)

        n = self.length
        pos = self.state.position
        if self.policy is NavigationPolicy.WRAP:
            step = zero_direction_advances(direction)
            pos = (pos + step + n) % n
        else:
            pos = min(max(pos + direction, 0), n - 1)

        self.state.position = pos
        self.state.last_command = command
        self.state.last_direction = direction
        return pos

    def apply(self, command: Command | str) -> int:
        """Advance using the direction configured for ``command``."""
        command = Command(command)
        return self.advance(self.directions[command], command)

    def reset(self) -> None:
        self.state = NavigationState()
