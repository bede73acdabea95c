"""
Stat block module for the simulator.

A stat block describes one named group of identical combatants. A team (the
player side or the monsters of an encounter) is an ordered list of stat
blocks. Field names on the wire follow the scenario file format (`toHit`,
`AC`), while Python code uses `to_hit` and `ac`.
"""

from typing import Any, Iterable

from catchery import log_warning
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from battlesim.core.errors import InvalidRosterError


class StatBlock(BaseModel):
    """A named group of identical combatants sharing the same statistics."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(
        default="Unnamed",
        description="Display label of the group, not necessarily unique",
    )
    count: int = Field(
        description="Number of identical individuals in the group",
    )
    hp: int = Field(
        gt=0,
        description="Starting hit points of each individual",
    )
    dpr: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Damage dealt by each successful hit",
    )
    to_hit: int = Field(
        alias="toHit",
        description="Bonus added to the attack roll",
    )
    ac: int = Field(
        alias="AC",
        description="Total an attack roll must reach to hit",
    )
    target: str | None = Field(
        default=None,
        description="Label of the targeting strategy used when attacking",
    )

    @field_validator("count", mode="after")
    @classmethod
    def _normalize_count(cls, value: int) -> int:
        # A negative count contributes nobody, exactly like an empty group.
        if value < 0:
            log_warning(
                f"Negative count {value} treated as 0",
                {"count": value, "context": "stat_block_validation"},
            )
            return 0
        return value

    def to_record(self) -> dict[str, Any]:
        """Returns the plain record used in scenario files."""
        return self.model_dump(by_alias=True, exclude_none=True)


Team = list[StatBlock]


def parse_stat_block(record: Any) -> StatBlock:
    """
    Validates a single roster record.

    Args:
        record (Any): A StatBlock, or a mapping with the scenario field names.

    Returns:
        StatBlock: The validated stat block.

    Raises:
        InvalidRosterError: If a required field is missing or out of range.

    """
    if isinstance(record, StatBlock):
        return record
    if not isinstance(record, dict):
        raise InvalidRosterError(
            f"Expected a stat block record, got {type(record).__name__}",
            record,
        )
    try:
        return StatBlock.model_validate(record)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise InvalidRosterError(
            f"Invalid stat block {record.get('name', '<unnamed>')!r}: {problems}",
            record,
        ) from e


def parse_team(records: Iterable[Any] | None) -> Team:
    """
    Validates a whole roster.

    Args:
        records (Iterable[Any] | None): StatBlocks or plain records.

    Returns:
        Team: The validated stat blocks, in the same order.

    Raises:
        InvalidRosterError: If the roster or any of its records is invalid.

    """
    if records is None:
        return []
    if isinstance(records, (str, bytes, dict)):
        raise InvalidRosterError(
            f"Expected a list of stat blocks, got {type(records).__name__}",
            records,
        )
    return [parse_stat_block(record) for record in records]
