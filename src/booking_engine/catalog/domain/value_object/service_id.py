from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceId:
    """カタログ上のサービスID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ServiceId cannot be empty")

    def __str__(self) -> str:
        return self.value
