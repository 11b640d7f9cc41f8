from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentId:
    """決済ID（Value Object）

    不変で、値が同じなら同一とみなされる。
    """

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PaymentId:
        """新しい決済IDを採番する"""
        return cls(value=str(uuid.uuid4()))
