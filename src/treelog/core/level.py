from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True, eq=False)
class Level:
    """Named severity used to gate log records.

    Levels compare, hash and order by ``value`` only, so a custom level that
    shares a value with a canonical one is equal to it.
    """

    name: str
    value: int

    ALL: ClassVar[Level]
    FINEST: ClassVar[Level]
    FINER: ClassVar[Level]
    FINE: ClassVar[Level]
    CONFIG: ClassVar[Level]
    INFO: ClassVar[Level]
    WARNING: ClassVar[Level]
    SEVERE: ClassVar[Level]
    SHOUT: ClassVar[Level]
    OFF: ClassVar[Level]
    LEVELS: ClassVar[tuple[Level, ...]]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> Level:
        """Resolve a canonical level name or an integer value.

        Integer values matching a canonical level return that level; other
        integers produce a custom level named after the number.
        """
        candidate = text.strip()
        for level in cls.LEVELS:
            if level.name == candidate.upper():
                return level
        try:
            value = int(candidate)
        except ValueError:
            raise ValueError(f"Unknown level: {text!r}") from None
        for level in cls.LEVELS:
            if level.value == value:
                return level
        return cls(f"Level {value}", value)


Level.ALL = Level("ALL", 0)
Level.FINEST = Level("FINEST", 300)
Level.FINER = Level("FINER", 400)
Level.FINE = Level("FINE", 500)
Level.CONFIG = Level("CONFIG", 700)
Level.INFO = Level("INFO", 800)
Level.WARNING = Level("WARNING", 900)
Level.SEVERE = Level("SEVERE", 1000)
Level.SHOUT = Level("SHOUT", 1200)
Level.OFF = Level("OFF", 2000)
Level.LEVELS = (
    Level.ALL,
    Level.FINEST,
    Level.FINER,
    Level.FINE,
    Level.CONFIG,
    Level.INFO,
    Level.WARNING,
    Level.SEVERE,
    Level.SHOUT,
    Level.OFF,
)

DEFAULT_LEVEL = Level.INFO
