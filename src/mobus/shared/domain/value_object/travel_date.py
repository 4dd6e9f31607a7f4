from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TravelDate:
    """乗車日（YYYY-MM-DD 形式）

    同じ路線でも運行日ごとに座席の占有状況は独立している。
    """

    value: str

    def __post_init__(self) -> None:
        try:
            parsed = date.fromisoformat(self.value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid travel date: {self.value}") from e
        # 20240105 のような基本形式も YYYY-MM-DD に正規化しておく
        object.__setattr__(self, "value", parsed.isoformat())

    def __str__(self) -> str:
        return self.value

    def to_date(self) -> date:
        return date.fromisoformat(self.value)
