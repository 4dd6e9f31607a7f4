from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerContact:
    """乗客の連絡先"""

    name: str
    phone: str
    email: str | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Passenger name cannot be empty")
        if not self.phone.strip():
            raise ValueError("Passenger phone cannot be empty")
