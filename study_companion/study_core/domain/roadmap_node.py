from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from study_companion.study_core.domain.microtask import Microtask
from study_companion.study_core.domain.study_enums import Difficulty, TaskType


@dataclass(frozen=True)
class RoadmapNode:
    """학습 로드맵을 구성하는 개별 노드."""

    node_id: str
    title: str
    task_type: TaskType
    est_minutes: int
    difficulty: Difficulty
    microtasks: List[Microtask] = field(default_factory=list)
    prerequisites: List[str] = field(default_factory=list)
    resources: List[str] = field(default_factory=list)
    progress_pct: int = 0
    xp_value: int = 0
    is_expanded: bool = False
    topic_cluster: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """
        @returns {Dict[str, Any]} 직렬화 가능한 노드 페이로드.
        """
        return {
            "id": self.node_id,
            "title": self.title,
            "type": self.task_type.value,
            "est_minutes": self.est_minutes,
            "difficulty": self.difficulty.value,
            "microtasks": [task.to_dict() for task in self.microtasks],
            "prerequisites": list(self.prerequisites),
            "resources": list(self.resources),
            "progress_pct": self.progress_pct,
            "xp_value": self.xp_value,
            "is_expanded": self.is_expanded,
            "topic_cluster": self.topic_cluster,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RoadmapNode":
        """
        클라이언트가 되돌려 보낸 노드 페이로드를 복원합니다.

        @param {Mapping[str, Any]} payload - to_dict 형식의 페이로드.
        @returns {RoadmapNode} 복원된 노드.
        """
        return cls(
            node_id=payload["id"],
            title=payload["title"],
            task_type=TaskType(payload["type"]),
            est_minutes=int(payload["est_minutes"]),
            difficulty=Difficulty(payload["difficulty"]),
            microtasks=[Microtask.from_dict(item) for item in payload.get("microtasks", [])],
            prerequisites=list(payload.get("prerequisites", [])),
            resources=list(payload.get("resources", [])),
            progress_pct=int(payload.get("progress_pct", 0)),
            xp_value=int(payload.get("xp_value", 0)),
            is_expanded=bool(payload.get("is_expanded", False)),
            topic_cluster=payload.get("topic_cluster", ""),
        )
