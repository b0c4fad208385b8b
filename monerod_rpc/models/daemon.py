"""Pydantic models for monerod call arguments.

Only the arguments the client checks before sending are modelled here.
Daemon responses are returned as plain decoded JSON.
"""

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictBool, StrictStr, field_validator

# =============================================================================
# Block Template
# =============================================================================


class BlockTemplateRequest(BaseModel):
    """Arguments for getblocktemplate.

    Required fields:
        wallet_address: Address that receives the coinbase reward (non-empty)
        reserve_size: Bytes reserved in the coinbase extra field (integer)

    Any extra keys are forwarded to the daemon untouched.
    """

    wallet_address: StrictStr = Field(min_length=1)
    reserve_size: int

    model_config = ConfigDict(extra="allow")

    @field_validator("reserve_size", mode="before")
    @classmethod
    def reserve_size_integral(cls, v: Any) -> int:
        # bool is an int subclass
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("reserve_size must be an integer")
        if isinstance(v, float) and not v.is_integer():
            raise ValueError("reserve_size must not have a fractional part")
        return int(v)


# =============================================================================
# Bans
# =============================================================================


class BanEntry(BaseModel):
    """A single peer ban instruction.

    `ip` is either a dotted host string or the integer form the daemon uses.
    `seconds` is the ban duration (or time left, in getbans output).
    """

    ip: StrictStr | int
    ban: StrictBool
    seconds: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True)


class BanList(RootModel[list[BanEntry]]):
    """Ordered, appendable list of ban entries. Duplicates are allowed."""

    root: list[BanEntry] = Field(default_factory=list)

    def append(self, entry: BanEntry) -> None:
        self.root.append(entry)

    def add(self, ip: str | int, ban: bool = True, seconds: int = 0) -> BanEntry:
        """Build an entry from its fields and append it."""
        entry = BanEntry(ip=ip, ban=ban, seconds=seconds)
        self.root.append(entry)
        return entry

    def __iter__(self) -> Iterator[BanEntry]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> BanEntry:
        return self.root[index]
