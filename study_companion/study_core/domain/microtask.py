from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Microtask:
    """로드맵 노드를 구성하는 10~25분 단위 세부 과제."""

    task_id: str
    text: str
    est_min: int
    is_complete: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        @returns {Dict[str, Any]} 직렬화 가능한 마이크로태스크 페이로드.
        """
        return {
            "id": self.task_id,
            "text": self.text,
            "est_min": self.est_min,
            "is_complete": self.is_complete,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Microtask":
        """
        @param {Mapping[str, Any]} payload - to_dict 형식의 페이로드.
        @returns {Microtask} 복원된 마이크로태스크.
        """
        return cls(
            task_id=payload["id"],
            text=payload["text"],
            est_min=int(payload["est_min"]),
            is_complete=bool(payload.get("is_complete", False)),
        )
