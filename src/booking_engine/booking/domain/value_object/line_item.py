from dataclasses import dataclass


@dataclass(frozen=True)
class LineItem:
    """名簿の1行（乗客・参加者）

    slot_id は座席番号などの割り当て。名簿内で一意でなければならない。
    """

    name: str = ""
    age: int | None = None
    category: str = "adult"
    slot_id: str | None = None

    def __post_init__(self) -> None:
        if self.age is not None and not (0 <= self.age <= 120):
            raise ValueError(f"Invalid age: {self.age}")
