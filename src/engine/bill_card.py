"""BillCardEngine — per-render view model for the bill under the pointer.

Each successful command yields a CardUpdate: the recomputed view model plus a
TransitionEffect describing how the presenter may animate the change. The
effect is fire-and-forget; nothing in it feeds back into navigation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from src.engine.bill_model import Bill, BillCollection
from src.engine.errors import EmptyCollectionError
from src.engine.navigation import Command, NavigationController, NavigationPolicy
from src.engine.progress import compute_percent, progress_label
from src.engine.status import Category, advisory_message

DEFAULT_QUOTA = 20

ACCENT_LIKE = "#166534"
ACCENT_DISLIKE = "#991b1b"
ACCENT_DEFAULT = "black"

EXIT_MOTIONS: dict[Command | None, str] = {
    Command.LIKE: "swipe_right",
    Command.DISLIKE: "swipe_left",
    Command.SKIP: "drop_down",
    Command.BACK: "lift_up",
    None: "fade",
}


@dataclass(frozen=True)
class BillCardViewModel:
    """Everything the presenter needs to draw the current card."""

    bill: Bill
    category: Category
    advisory_message: str
    percent: float
    last_command: Command | None
    last_direction: int
    position: int
    total: int
    quota: int

    @property
    def is_urgent(self) -> bool:
        return self.category is Category.URGENT

    @property
    def has_advisory(self) -> bool:
        return bool(self.advisory_message)

    @property
    def progress_label(self) -> str:
        return progress_label(self.position, self.quota)


@dataclass(frozen=True)
class TransitionEffect:
    """Ephemeral animation request emitted alongside a view model."""

    command: Command | None
    direction: int
    exit_motion: str
    accent: str
    enter_offset: int

    @classmethod
    def for_command(cls, command: Command | None, direction: int) -> TransitionEffect:
        if command is Command.LIKE:
            accent = ACCENT_LIKE
        elif command is Command.DISLIKE:
            accent = ACCENT_DISLIKE
        else:
            accent = ACCENT_DEFAULT
        return cls(
            command=command,
            direction=direction,
            exit_motion=EXIT_MOTIONS[command],
            accent=accent,
            enter_offset=direction * 100,
        )


@dataclass(frozen=True)
class CardUpdate:
    """Result of one command: new view model + transition effect."""

    view: BillCardViewModel
    effect: TransitionEffect


class BillCardEngine:
    """Composes navigation, classification and progress into view models."""

    def __init__(
        self,
        bills: BillCollection | Sequence[Bill],
        quota: int = DEFAULT_QUOTA,
        policy: NavigationPolicy | str = NavigationPolicy.WRAP,
        back_direction: int = 0,
    ):
        """Initialize the engine.

        Args:
            bills: The session's collection (a BillCollection or plain sequence).
            quota: Daily target used for the progress percentage.
            policy: WRAP (card view) or CLAMP (scroll view).
            back_direction: Direction used by the back command.
        """
        if not isinstance(bills, BillCollection):
            bills = BillCollection(bills)
        # Validates quota up front rather than on first render
        compute_percent(0, quota)

        self.bills = bills
        self.quota = quota
        self.controller = NavigationController(
            len(bills), policy=policy, back_direction=back_direction
        )

    @property
    def policy(self) -> NavigationPolicy:
        return self.controller.policy

    @property
    def position(self) -> int:
        return self.controller.position

    def current_bill(self) -> Bill:
        if self.bills.is_empty:
            raise EmptyCollectionError()
        return self.bills[self.position]

    def view_model(self) -> BillCardViewModel:
        """Derive the view model for the bill at the current position.

        Raises:
            EmptyCollectionError: If the collection holds no bills.
        """
        bill = self.current_bill()
        pos = self.position
        category = self.bills.category_at(pos)
        state = self.controller.state
        return BillCardViewModel(
            bill=bill,
            category=category,
            advisory_message=advisory_message(category),
            percent=compute_percent(pos, self.quota),
            last_command=state.last_command,
            last_direction=state.last_direction,
            position=pos,
            total=len(self.bills),
            quota=self.quota,
        )

    def advance(self, direction: int, command: Command) -> CardUpdate:
        """Move by ``direction`` on behalf of ``command`` and re-derive the card."""
        self.controller.advance(direction, command)
        return self._update()

    def apply(self, command: Command | str) -> CardUpdate:
        """Run a command using its configured direction."""
        self.controller.apply(command)
        return self._update()

    def back(self) -> CardUpdate:
        return self.apply(Command.BACK)

    def dislike(self) -> CardUpdate:
        return self.apply(Command.DISLIKE)

    def skip(self) -> CardUpdate:
        return self.apply(Command.SKIP)

    def like(self) -> CardUpdate:
        return self.apply(Command.LIKE)

    def reset(self) -> BillCardViewModel:
        self.controller.reset()
        return self.view_model()

    def _update(self) -> CardUpdate:
        state = self.controller.state
        return CardUpdate(
            view=self.view_model(),
            effect=TransitionEffect.for_command(state.last_command, state.last_direction),
        )
