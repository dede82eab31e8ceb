from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class QuizQuestion:
    """빈칸 채우기 퀴즈 문항."""

    question: str
    options: List[str]
    correct_index: int
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Flashcard:
    """용어-정의 플래시카드."""

    front: str
    back: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConceptNode:
    """개념 지도 노드."""

    node_id: str
    label: str
    importance: int
    category: str
    connections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.node_id,
            "label": self.label,
            "importance": self.importance,
            "category": self.category,
            "connections": list(self.connections),
        }
