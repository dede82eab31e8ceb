from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from study_companion.study_core.domain.roadmap_node import RoadmapNode


@dataclass(frozen=True)
class ProgressSummary:
    """로드맵 전체 진행률 요약."""

    total_tasks: int
    completed_tasks: int
    progress_pct: int
    completed_nodes: int
    earned_xp: int
    total_minutes: int
    remaining_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProgressUpdate:
    """진행 상태 갱신 결과 (새 노드 목록과 획득 XP)."""

    nodes: List[RoadmapNode] = field(default_factory=list)
    xp_earned: int = 0
