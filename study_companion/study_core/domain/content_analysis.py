from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ContentAnalysis:
    """학습 자료 텍스트의 구조/난이도 분석 결과."""

    topics: List[str] = field(default_factory=list)
    complexity_score: int = 5
    keyword_density: Dict[str, int] = field(default_factory=dict)
    risk_areas: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """
        @returns {Dict[str, Any]} 직렬화 가능한 분석 페이로드.
        """
        return {
            "topics": list(self.topics),
            "complexity_score": self.complexity_score,
            "keyword_density": dict(self.keyword_density),
            "risk_areas": list(self.risk_areas),
        }
