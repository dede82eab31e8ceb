from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from study_companion.study_core.common.clock import epoch_millis
from study_companion.study_core.common.seeded_random import SeededRandom, SeedLike
from study_companion.study_core.domain.content_analysis import ContentAnalysis
from study_companion.study_core.domain.microtask import Microtask
from study_companion.study_core.domain.roadmap_config import RoadmapConfig
from study_companion.study_core.domain.roadmap_node import RoadmapNode
from study_companion.study_core.domain.strategy_profile import StrategyProfile
from study_companion.study_core.domain.study_enums import Difficulty, Strategy, TaskType
from study_companion.study_core.service.analysis.content_analyzer import ContentAnalyzer

logger = logging.getLogger(__name__)

STRATEGY_PROFILES: Dict[Strategy, StrategyProfile] = {
    Strategy.FAST_TRACK: StrategyProfile(node_bonus=0, node_cap=5, learn=0.3, revise=0.2, test=0.5),
    Strategy.BALANCED: StrategyProfile(node_bonus=2, node_cap=8, learn=0.5, revise=0.3, test=0.2),
    Strategy.MASTERY: StrategyProfile(node_bonus=4, node_cap=12, learn=0.6, revise=0.3, test=0.1),
}

TASK_VERBS: Dict[TaskType, Tuple[str, ...]] = {
    TaskType.LEARN: ("Read", "Summarize", "Watch Video", "Take Notes"),
    TaskType.REVISE: ("Review Flashcards", "Mind Map", "Self-Explain", "Quick Quiz"),
    TaskType.TEST: ("Practice Problems", "Mock Questions", "Error Analysis", "Timed Drill"),
}

TITLE_PREFIXES: Dict[TaskType, str] = {
    TaskType.LEARN: "",
    TaskType.REVISE: "Review: ",
    TaskType.TEST: "Assessment: ",
}

DEFAULT_MODULE_TOPICS = ("Module 1", "Module 2", "Module 3", "Final Review")

RESOURCE_POOL = (
    "AI Summary",
    "Visual Analogy",
    "Flashcard Deck",
    "Practice Quiz",
    "Video Lecture",
    "Concept Map",
    "Deep Dive Paper",
)

MICROTASK_COUNT_RANGE = (3, 5)
MICROTASK_MINUTES_RANGE = (10, 25)
RESOURCE_COUNT_RANGE = (1, 3)
MODERATE_POSITION_RATIO = 0.3
ADVANCED_POSITION_RATIO = 0.7
COMPLEX_CONTENT_THRESHOLD = 7


class RoadmapGeneratorService:
    """콘텐츠 분석 결과와 전략에 따라 재현 가능한 학습 로드맵을 생성하는 서비스."""

    def __init__(
        self,
        analyzer: Optional[ContentAnalyzer] = None,
        clock: Optional[Callable[[], SeedLike]] = None,
    ) -> None:
        """
        로드맵 생성에 필요한 의존성을 초기화합니다.

        @param {Optional[ContentAnalyzer]} analyzer - 콘텐츠 분석기.
        @param {Optional[Callable[[], SeedLike]]} clock - 시드가 없을 때 쓰는 엔트로피 공급자.
        @returns {None} 내부 상태를 구성합니다.
        """
        self._analyzer = analyzer or ContentAnalyzer()
        self._clock = clock or epoch_millis

    def generate(self, config: RoadmapConfig) -> List[RoadmapNode]:
        """
        설정을 기반으로 로드맵 노드 목록을 생성합니다.

        @param {RoadmapConfig} config - 로드맵 생성 설정.
        @returns {List[RoadmapNode]} 선수 관계 순서대로 정렬된 노드 목록.
        """
        _, nodes = self.generate_with_analysis(config)
        return nodes

    def generate_with_analysis(self, config: RoadmapConfig) -> Tuple[ContentAnalysis, List[RoadmapNode]]:
        """
        분석 결과와 로드맵을 함께 반환합니다.

        @param {RoadmapConfig} config - 로드맵 생성 설정.
        @returns {Tuple[ContentAnalysis, List[RoadmapNode]]} (분석 결과, 노드 목록).
        """
        seed = config.seed if config.seed is not None else self._clock()
        source = SeededRandom(seed)
        analysis = self._analyzer.analyze(config.content or "")
        base_topics = list(analysis.topics) or list(DEFAULT_MODULE_TOPICS)

        profile = STRATEGY_PROFILES[config.strategy]
        node_count = profile.node_count(len(base_topics))
        complexity_bump = 1 if analysis.complexity_score > COMPLEX_CONTENT_THRESHOLD else 0

        roadmap_topics: List[str] = []
        while len(roadmap_topics) < node_count:
            roadmap_topics.extend(base_topics)

        nodes = [
            _build_node(source, profile, idx, node_count, roadmap_topics[idx], complexity_bump)
            for idx in range(node_count)
        ]
        logger.debug(
            "로드맵 생성 완료",
            extra={
                "strategy": config.strategy.value,
                "node_count": node_count,
                "seeded": config.seed is not None,
            },
        )
        return analysis, nodes


def _build_node(
    source: SeededRandom,
    profile: StrategyProfile,
    index: int,
    node_count: int,
    topic: str,
    complexity_bump: int,
) -> RoadmapNode:
    """
    단일 노드를 생성합니다. 난수 소비 순서(유형 → 마이크로태스크 → 자료)는 재현성의 일부입니다.

    @param {SeededRandom} source - 시드 난수 생성기.
    @param {StrategyProfile} profile - 전략 프로필.
    @param {int} index - 0부터 시작하는 노드 위치.
    @param {int} node_count - 전체 노드 수.
    @param {str} topic - 노드의 기반 토픽.
    @param {int} complexity_bump - 고난도 자료일 때 Moderate 진입을 늦추는 보정값.
    @returns {RoadmapNode} 생성된 노드.
    """
    task_type = profile.classify(source.next())
    if index == 0:
        task_type = TaskType.LEARN

    difficulty = _difficulty_for(index, node_count, complexity_bump)
    microtasks = _build_microtasks(source, index, task_type)
    resources = _pick_resources(source)

    return RoadmapNode(
        node_id=f"node-{index + 1}",
        title=f"{TITLE_PREFIXES[task_type]}{topic}",
        task_type=task_type,
        est_minutes=sum(task.est_min for task in microtasks),
        difficulty=difficulty,
        microtasks=microtasks,
        prerequisites=[f"node-{index}"] if index > 0 else [],
        resources=resources,
        progress_pct=0,
        xp_value=difficulty.xp_value,
        is_expanded=index == 0,
        topic_cluster=topic,
    )


def _difficulty_for(index: int, node_count: int, complexity_bump: int) -> Difficulty:
    """
    @param index 노드 위치.
    @param node_count 전체 노드 수.
    @param complexity_bump 복잡도 보정값 (0 또는 1).
    @returns 위치 기반 계단형 난이도 (실수 비교, 반올림 없음).
    """
    difficulty = Difficulty.BEGINNER
    if index > node_count * MODERATE_POSITION_RATIO + complexity_bump:
        difficulty = Difficulty.MODERATE
    if index > node_count * ADVANCED_POSITION_RATIO:
        difficulty = Difficulty.ADVANCED
    return difficulty


def _build_microtasks(source: SeededRandom, index: int, task_type: TaskType) -> List[Microtask]:
    """
    @param source 시드 난수 생성기.
    @param index 부모 노드 위치.
    @param task_type 부모 노드 유형.
    @returns 3~5개의 마이크로태스크.
    """
    verbs = TASK_VERBS[task_type]
    count = source.next_int(*MICROTASK_COUNT_RANGE)
    microtasks = []
    for task_idx in range(count):
        detail = f"Section {task_idx + 1}" if task_type == TaskType.LEARN else "Key Concepts"
        microtasks.append(
            Microtask(
                task_id=f"mt-{index}-{task_idx}",
                text=f"{verbs[task_idx % len(verbs)]}: {detail}",
                est_min=source.next_int(*MICROTASK_MINUTES_RANGE),
            )
        )
    return microtasks


def _pick_resources(source: SeededRandom) -> List[str]:
    """
    @param source 시드 난수 생성기.
    @returns 자료 풀에서 비복원 추출한 1~3개 자료 라벨.
    """
    remaining = list(RESOURCE_POOL)
    picked = []
    for _ in range(source.next_int(*RESOURCE_COUNT_RANGE)):
        picked.append(remaining.pop(source.next_int(0, len(remaining) - 1)))
    return picked
