from dataclasses import dataclass


@dataclass(frozen=True)
class BusId:
    """バスID（Value Object）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BusId cannot be empty")

    def __str__(self) -> str:
        return self.value
