from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class CorrelationToken:
    """決済結果のコールバックを開始要求に対応付けるトークン

    クライアント側で生成する。決済を再試行するたびに新しいトークンを使う。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("CorrelationToken cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> CorrelationToken:
        return cls(value=str(uuid.uuid4()))
