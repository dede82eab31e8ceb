from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from study_companion.study_core.common.math_utils import clamp, round_half_up
from study_companion.study_core.common.nlp.text_utils import (
    capitalize_first,
    keyword_counts,
    tokenize,
    top_keywords,
)
from study_companion.study_core.domain.content_analysis import ContentAnalysis

logger = logging.getLogger(__name__)

FALLBACK_TOPICS = ("Core Concepts", "Fundamentals", "Advanced Theory", "Application")
RISK_MARKERS = ("formula", "theorem", "exception", "irregular", "complex", "remember")

KEYWORD_POOL_SIZE = 15
KEYWORD_TOPIC_COUNT = 5
MAX_HEADER_TOPICS = 8
MIN_HEADER_TOPICS = 3
HIGH_COMPLEXITY_THRESHOLD = 7
MEDIUM_COMPLEXITY_THRESHOLD = 4
FOCUS_CLUSTER_COUNT = 6
RISK_PREVIEW_COUNT = 3

_HEADER_START_RE = re.compile(r"^[A-Z0-9]")


class ContentAnalyzer:
    """학습 자료 텍스트의 토픽/난이도/위험 개념을 추정하는 휴리스틱 분석기."""

    def analyze(self, text: Optional[str]) -> ContentAnalysis:
        """
        텍스트를 분석해 토픽, 복잡도, 키워드 빈도, 위험 개념을 계산합니다.

        빈 입력은 오류가 아니며 기본값(토픽 없음, 복잡도 5)을 반환합니다.
        토픽이 비어 있을 때의 대체 목록은 로드맵 생성기가 채웁니다.

        @param {Optional[str]} text - 병합된 원문 텍스트.
        @returns {ContentAnalysis} 분석 결과.
        """
        if not text:
            return ContentAnalysis()

        tokens = tokenize(text)
        counts = keyword_counts(tokens)
        keywords = top_keywords(counts, KEYWORD_POOL_SIZE)

        topics = _detect_topics(text, keywords)
        complexity = _complexity_score(tokens)
        risk_areas = [keyword for keyword in keywords if any(marker in keyword for marker in RISK_MARKERS)]

        logger.debug(
            "콘텐츠 분석 완료",
            extra={"topic_count": len(topics), "complexity_score": complexity, "token_count": len(tokens)},
        )
        return ContentAnalysis(
            topics=topics,
            complexity_score=complexity,
            keyword_density=dict(counts),
            risk_areas=risk_areas,
        )

    def build_insight(self, analysis: ContentAnalysis) -> Dict[str, object]:
        """
        분석 결과를 인사이트 패널용 요약으로 변환합니다.

        @param {ContentAnalysis} analysis - 분석 결과.
        @returns {Dict[str, object]} 복잡도 라벨/등급, 집중 클러스터, 위험 개념 미리보기.
        """
        score = analysis.complexity_score
        if score > HIGH_COMPLEXITY_THRESHOLD:
            level = "high"
        elif score > MEDIUM_COMPLEXITY_THRESHOLD:
            level = "medium"
        else:
            level = "low"
        return {
            "complexity_label": (
                "High density academic text" if score > HIGH_COMPLEXITY_THRESHOLD else "Moderate reading level"
            ),
            "complexity_level": level,
            "focus_clusters": list(analysis.topics[:FOCUS_CLUSTER_COUNT]),
            "risk_preview": list(analysis.risk_areas[:RISK_PREVIEW_COUNT]),
        }


def analyze_content(text: Optional[str]) -> ContentAnalysis:
    """
    @param text 분석할 텍스트.
    @returns ContentAnalyzer 기본 인스턴스의 분석 결과.
    """
    return ContentAnalyzer().analyze(text)


def _detect_topics(text: str, keywords: List[str]) -> List[str]:
    """
    헤더처럼 보이는 줄을 토픽으로 사용하고, 부족하면 상위 키워드로 대체합니다.

    @param {str} text - 원문 텍스트.
    @param {List[str]} keywords - 빈도 내림차순 키워드.
    @returns {List[str]} 토픽 목록 (비어 있지 않음).
    """
    headers = [line for line in (raw.strip() for raw in text.split("\n")) if _looks_like_header(line)]
    headers = headers[:MAX_HEADER_TOPICS]
    if len(headers) >= MIN_HEADER_TOPICS:
        return headers
    if keywords:
        return [capitalize_first(keyword) for keyword in keywords[:KEYWORD_TOPIC_COUNT]]
    return list(FALLBACK_TOPICS)


def _looks_like_header(line: str) -> bool:
    # 5자 초과 50자 미만, 대문자/숫자 시작, 마침표로 끝나지 않음
    return 5 < len(line) < 50 and bool(_HEADER_START_RE.match(line)) and not line.endswith(".")


def _complexity_score(tokens: List[str]) -> int:
    """
    @param tokens 전체 토큰 (불용어 포함).
    @returns 평균 토큰 길이 x 1.5 를 반올림해 [1, 10]으로 제한한 점수.
    """
    average = sum(len(token) for token in tokens) / (len(tokens) or 1)
    return clamp(round_half_up(average * 1.5), 1, 10)
