from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional, Union

from study_companion.study_core.common.errors import RoadmapConfigError
from study_companion.study_core.domain.study_enums import ExamGoal, Strategy


@dataclass(frozen=True)
class RoadmapConfig:
    """
    로드맵 생성 요청 설정.

    daily_minutes와 exam_date는 저장/반환만 되고 생성 알고리즘에는 쓰이지 않습니다.
    seed가 None일 때만 생성기가 현재 시각을 시드로 사용합니다.
    0이나 빈 문자열도 유효한 시드로 취급되어 결과가 고정됩니다.
    """

    exam_goal: ExamGoal
    strategy: Strategy
    daily_minutes: int
    content: Optional[str] = None
    seed: Optional[Union[int, str]] = None
    exam_date: Optional[date] = None

    def __post_init__(self) -> None:
        """
        @returns {None} 필드 타입/범위를 검증합니다.
        """
        if not isinstance(self.exam_goal, ExamGoal):
            raise RoadmapConfigError(f"알 수 없는 시험 목표입니다: {self.exam_goal!r}")
        if not isinstance(self.strategy, Strategy):
            raise RoadmapConfigError(f"알 수 없는 학습 전략입니다: {self.strategy!r}")
        if isinstance(self.daily_minutes, bool) or not isinstance(self.daily_minutes, int):
            raise RoadmapConfigError(f"daily_minutes는 정수여야 합니다: {self.daily_minutes!r}")
        if self.daily_minutes <= 0:
            raise RoadmapConfigError(f"daily_minutes는 양수여야 합니다: {self.daily_minutes}")
        if self.content is not None and not isinstance(self.content, str):
            raise RoadmapConfigError("content는 문자열이어야 합니다")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, (int, str))):
            raise RoadmapConfigError(f"seed는 int 또는 str 이어야 합니다: {self.seed!r}")
        if self.exam_date is not None and not isinstance(self.exam_date, date):
            raise RoadmapConfigError(f"exam_date는 날짜여야 합니다: {self.exam_date!r}")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RoadmapConfig":
        """
        문자열 기반 요청 페이로드를 열거형으로 변환해 설정을 만듭니다.

        @param {Mapping[str, Any]} payload - exam_goal/strategy/daily_minutes/content/seed/exam_date 키.
        @returns {RoadmapConfig} 검증된 설정.
        """
        return cls(
            exam_goal=_coerce(ExamGoal, payload.get("exam_goal", ExamGoal.GENERAL), "exam_goal"),
            strategy=_coerce(Strategy, payload.get("strategy", Strategy.BALANCED), "strategy"),
            daily_minutes=payload.get("daily_minutes", 60),
            content=payload.get("content"),
            seed=payload.get("seed"),
            exam_date=_coerce_date(payload.get("exam_date")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        @returns {Dict[str, Any]} 원문 content를 제외한 설정 페이로드.
        """
        return {
            "exam_goal": self.exam_goal.value,
            "strategy": self.strategy.value,
            "daily_minutes": self.daily_minutes,
            "seed": self.seed,
            "exam_date": self.exam_date.isoformat() if self.exam_date else None,
        }


def _coerce(enum_cls, value: Any, field_name: str):
    """
    @param enum_cls 대상 열거형 클래스.
    @param value 열거형 멤버 또는 값 문자열.
    @param field_name 오류 메시지용 필드명.
    @returns 열거형 멤버.
    """
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise RoadmapConfigError(f"{field_name} 값이 올바르지 않습니다: {value!r}") from exc


def _coerce_date(value: Any) -> Optional[date]:
    """
    @param value date 객체, ISO 날짜 문자열 또는 None.
    @returns 변환된 date 또는 None.
    """
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise RoadmapConfigError(f"exam_date 형식이 올바르지 않습니다: {value!r}") from exc
