from dataclasses import dataclass


@dataclass(frozen=True)
class OperatorId:
    """運行会社ID（Value Object）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("OperatorId cannot be empty")

    def __str__(self) -> str:
        return self.value
