from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """連絡先（入力途中の状態も表現するため、検証は遷移時に行う）"""

    name: str = ""
    phone: str = ""
    email: str = ""
    alternate_phone: str | None = None
