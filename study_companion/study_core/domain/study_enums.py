from __future__ import annotations

from enum import Enum


class ExamGoal(str, Enum):
    """학습 목표 시험 종류."""

    GENERAL = "General"
    NEET = "NEET"
    JEE = "JEE"
    SAT = "SAT"
    UNIVERSITY = "University"
    IELTS = "IELTS"


class Strategy(str, Enum):
    """
    로드맵 밀도와 과제 유형 비율을 결정하는 학습 전략.

    전략별 특성:
        - FAST_TRACK: 노드 수를 줄이고 평가 비중을 높임
        - BALANCED: 학습/복습/평가를 고르게 배분
        - MASTERY: 노드를 늘리고 학습 비중을 높임
    """

    FAST_TRACK = "Fast Track"
    BALANCED = "Balanced"
    MASTERY = "Mastery"


class TaskType(str, Enum):
    """로드맵 노드 과제 유형."""

    LEARN = "Learn"
    REVISE = "Revise"
    TEST = "Test"


class Difficulty(str, Enum):
    """로드맵 노드 난이도."""

    BEGINNER = "Beginner"
    MODERATE = "Moderate"
    ADVANCED = "Advanced"

    @property
    def xp_value(self) -> int:
        """
        @returns {int} 난이도별 보상 XP.
        """
        return DIFFICULTY_XP[self]


DIFFICULTY_XP = {
    Difficulty.BEGINNER: 15,
    Difficulty.MODERATE: 30,
    Difficulty.ADVANCED: 50,
}
