from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """認証済みユーザーの識別情報

    セッション管理は外部の責務。コアには明示的な引数として渡される。
    """

    user_id: str
    access_token: str

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("user_id cannot be empty")
        if not self.access_token:
            raise ValueError("access_token cannot be empty")

    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}
