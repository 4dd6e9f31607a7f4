import re
from dataclasses import dataclass
from typing import ClassVar

from mobus.shared.domain.exception import InvalidSeatNumberException

SEAT_LETTERS = "ABCD"


@dataclass(frozen=True)
class SeatNumber:
    """座席番号

    列番号（1 始まり）+ 座席記号（A-D）の形式。
    例: 1A, 3B, 10D
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^([1-9]\d*)([A-D])$")

    def __post_init__(self) -> None:
        normalized = str(self.value).strip().upper()
        if not self.PATTERN.match(normalized):
            raise InvalidSeatNumberException(
                f"Invalid seat number format: {self.value}. "
                "Expected format: 3B (row number + letter A-D)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def row(self) -> int:
        """列番号"""
        return int(self.value[:-1])

    @property
    def letter(self) -> str:
        """座席記号"""
        return self.value[-1]

    @property
    def position(self) -> int:
        """座席表上の通し番号（0 始まり）"""
        return (self.row - 1) * len(SEAT_LETTERS) + SEAT_LETTERS.index(self.letter)
