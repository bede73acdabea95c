"""
Combatant module for the simulator.

A combatant is one individual expanded from a stat block. It keeps a reference
to its source group for every static statistic and tracks only its own
current hit points.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from battlesim.core.utils import make_bar
from battlesim.roster.stat_block import StatBlock


class Combatant(BaseModel):
    """One independently damageable individual of a stat block."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    stats: StatBlock = Field(
        description="The group this individual was expanded from",
    )
    index: int = Field(
        default=1,
        ge=1,
        description="Position of the individual inside its group, 1-based",
    )
    hp: int = Field(
        alias="currentHp",
        ge=0,
        description="Current hit points",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.hp > self.stats.hp:
            raise ValueError(
                f"currentHp {self.hp} exceeds the maximum of {self.stats.hp}"
            )

    # ============================================================================
    # STATISTICS
    # ============================================================================

    @computed_field
    @property
    def name(self) -> str:
        """The group name, numbered when the group has several members."""
        if self.stats.count > 1:
            return f"{self.stats.name} ({self.index})"
        return self.stats.name

    @property
    def max_hp(self) -> int:
        return self.stats.hp

    @property
    def dpr(self) -> float:
        return self.stats.dpr

    @property
    def to_hit(self) -> int:
        return self.stats.to_hit

    @property
    def ac(self) -> int:
        return self.stats.ac

    @property
    def target(self) -> str | None:
        return self.stats.target

    # ============================================================================
    # STATE
    # ============================================================================

    @computed_field
    @property
    def alive(self) -> bool:
        return self.hp > 0

    def is_dead(self) -> bool:
        return not self.alive

    def take_damage(self, amount: int) -> int:
        """
        Reduces the current hit points, never below zero.

        Args:
            amount (int): The damage to apply.

        Returns:
            int: The damage actually taken.

        """
        taken = min(max(amount, 0), self.hp)
        self.hp -= taken
        return taken

    def get_status_line(self, show_bar: bool = True) -> str:
        """
        Returns a one-line rich markup summary of the combatant.

        Args:
            show_bar (bool): Whether to include the hit point bar.

        Returns:
            str: The status line.

        """
        if self.is_dead():
            return f"[dim]💀 {self.name}[/]"
        line = f"{self.name} {self.hp}/{self.max_hp}"
        if show_bar:
            ratio = self.hp / self.max_hp
            color = "green" if ratio > 0.5 else "yellow" if ratio > 0.25 else "red"
            line += f" {make_bar(self.hp, self.max_hp, color=color)}"
        return line

    def to_record(self) -> dict[str, Any]:
        """Returns the plain record used when exporting results."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.hp}/{self.max_hp})"


Roster = list[Combatant]
