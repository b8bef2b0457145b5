"""Channel numbering, names and per-channel display settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChannelType(Enum):
    """Kind of a channel."""

    ANALOG = "analog"
    MATH = "math"
    LOGIC = "logic"


@dataclass
class ChannelSettings:
    """Display settings of one channel or logic group."""

    color1: str = "#000000"
    color2: str = "#ffffff"
    style: int = 0
    offset: float = 0.0
    scale: float = 1.0
    inverted: bool = False
    visible: bool = True
    interpolate: bool = False

    def color(self, theme: int) -> str:
        """Colour used with the given theme (1 or 2)."""
        return self.color1 if theme == 1 else self.color2


@dataclass(frozen=True)
class ChannelLayout:
    """How channel ids are laid out: analog, then math, then logic bits by group."""

    analog_count: int
    math_count: int
    logic_groups: int
    logic_bits: int

    @property
    def _first_logic(self) -> int:
        return self.analog_count + self.math_count

    @property
    def _total(self) -> int:
        return self._first_logic + self.logic_groups * self.logic_bits

    def analog_channel_id(self, number: int, channel_type: ChannelType) -> int:
        """Channel id of analog or math channel ``number`` (counted from 1)."""
        if channel_type is ChannelType.ANALOG:
            return number - 1
        if channel_type is ChannelType.MATH:
            return number + self.analog_count - 1
        return 0

    def logic_channel_id(self, group: int, bit: int) -> int:
        """Channel id of a logic bit; group and bit counted from 0."""
        return self._first_logic + group * self.logic_bits + bit

    def is_logic(self, chid: int) -> bool:
        """True when ``chid`` is a logic bit channel."""
        return self._first_logic <= chid < self._total

    def logic_group(self, chid: int) -> int:
        """Logic group of a logic channel id."""
        self._require_logic(chid)
        return (chid - self._first_logic) // self.logic_bits

    def logic_bit(self, chid: int) -> int:
        """Bit within its group of a logic channel id."""
        self._require_logic(chid)
        return (chid - self._first_logic) % self.logic_bits

    def channel_name(self, chid: int) -> str:
        """Display name of a channel id."""
        if not 0 <= chid < self._total:
            raise ValueError(f"channel id {chid} out of range")
        if self.is_logic(chid):
            group, bit = self.logic_group(chid), self.logic_bit(chid)
            if group == self.logic_groups - 1:
                return f"Logic bit {bit}"
            return f"Logic {group + 1} bit {bit}"
        if chid >= self.analog_count:
            return f"Math {chid - self.analog_count + 1}"
        return f"Ch {chid + 1}"

    def _require_logic(self, chid: int) -> None:
        if not self.is_logic(chid):
            raise ValueError(f"channel id {chid} is not a logic channel")