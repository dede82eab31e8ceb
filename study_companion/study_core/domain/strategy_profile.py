from __future__ import annotations

from dataclasses import dataclass

from study_companion.study_core.domain.study_enums import TaskType


@dataclass(frozen=True)
class StrategyProfile:
    """전략별 노드 수 규칙과 과제 유형 확률 분포."""

    node_bonus: int
    node_cap: int
    learn: float
    revise: float
    test: float

    def node_count(self, topic_count: int) -> int:
        """
        @param {int} topic_count - 기반 토픽 수.
        @returns {int} min(토픽 수 + 보너스, 상한).
        """
        return min(topic_count + self.node_bonus, self.node_cap)

    def classify(self, draw: float) -> TaskType:
        """
        @param {float} draw - [0, 1) 난수.
        @returns {TaskType} 누적 확률 구간에 해당하는 과제 유형.
        """
        if draw > self.learn + self.revise:
            return TaskType.TEST
        if draw > self.learn:
            return TaskType.REVISE
        return TaskType.LEARN
