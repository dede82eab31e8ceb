from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Tuple

from django.conf import settings
from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from study_companion.study_core.common.errors import ProgressError, RoadmapConfigError
from study_companion.study_core.common.hashing import stable_hash_text
from study_companion.study_core.controller.serializers import (
    ContentAnalysisResponseSerializer,
    ContentRequestSerializer,
    HealthCheckSerializer,
    ProgressRequestSerializer,
    ProgressResponseSerializer,
    RoadmapGeneratedSerializer,
    RoadmapGenerateRequestSerializer,
    StudyKitRequestSerializer,
    StudyKitSerializer,
)
from study_companion.study_core.domain.roadmap_config import RoadmapConfig
from study_companion.study_core.domain.roadmap_node import RoadmapNode
from study_companion.study_core.domain.study_source import StudySource
from study_companion.study_core.service.analysis.content_analyzer import ContentAnalyzer
from study_companion.study_core.service.fallback.study_kit_fallback import StudyKitFallbackService
from study_companion.study_core.service.progress.roadmap_progress_service import RoadmapProgressService
from study_companion.study_core.service.roadmap.roadmap_generator import RoadmapGeneratorService
from study_companion.study_core.service.sources.source_merger import merge_sources

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


class RoadmapGenerateAPIView(APIView):
    """
    학습 자료 기반 로드맵 생성 API 엔드포인트.

    사용 예시:
        POST /api/roadmap/generate
        Body: {"strategy": "Balanced", "exam_goal": "SAT", "daily_minutes": 60, "content": "...", "seed": 42}
    """

    @extend_schema(
        summary="학습 로드맵 생성",
        description="자료를 분석한 뒤 전략에 맞는 노드/마이크로태스크/보상을 생성합니다. seed를 주면 결과가 재현됩니다.",
        request=RoadmapGenerateRequestSerializer,
        responses={200: RoadmapGeneratedSerializer},
        examples=[
            OpenApiExample(
                "balanced",
                value={"strategy": "Balanced", "exam_goal": "General", "daily_minutes": 60, "seed": 42},
                request_only=True,
            )
        ],
    )
    def post(self, request) -> Response:
        """
        @param {Request} request - DRF 요청 객체 (로드맵 설정 JSON).
        @returns {Response} 분석 결과와 노드 목록을 담은 직렬화된 응답.
        """
        serializer = RoadmapGenerateRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        content, source_count = _resolve_content(data)

        try:
            config = RoadmapConfig.from_payload({
                "exam_goal": data["exam_goal"],
                "strategy": data["strategy"],
                "daily_minutes": data.get("daily_minutes") or settings.STUDY_DEFAULT_DAILY_MINUTES,
                "content": content,
                "seed": data.get("seed"),
                "exam_date": data.get("exam_date"),
            })
        except RoadmapConfigError as exc:
            return _bad_request(exc)

        analyzer = ContentAnalyzer()
        analysis, nodes = RoadmapGeneratorService(analyzer=analyzer).generate_with_analysis(config)
        payload = {
            "config": config.to_dict(),
            "source_count": source_count,
            "analysis": analysis.to_dict(),
            "insight": analyzer.build_insight(analysis),
            "nodes": [node.to_dict() for node in nodes],
            "generated_at": datetime.utcnow().isoformat(),
        }
        return _serialize(RoadmapGeneratedSerializer, payload)


class ContentAnalysisAPIView(APIView):
    """학습 자료 인사이트(토픽/복잡도/위험 개념) 응답."""

    @extend_schema(
        summary="학습 자료 분석",
        request=ContentRequestSerializer,
        responses={200: ContentAnalysisResponseSerializer},
    )
    def post(self, request) -> Response:
        """
        @param {Request} request - DRF 요청 객체 (content 또는 sources).
        @returns {Response} 분석 결과와 인사이트 요약.
        """
        serializer = ContentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        content, source_count = _resolve_content(serializer.validated_data)

        analyzer = ContentAnalyzer()
        analysis = analyzer.analyze(content)
        payload = {
            "content_fingerprint": stable_hash_text(content),
            "source_count": source_count,
            "analysis": analysis.to_dict(),
            "insight": analyzer.build_insight(analysis),
            "generated_at": datetime.utcnow().isoformat(),
        }
        return _serialize(ContentAnalysisResponseSerializer, payload)


class RoadmapProgressAPIView(APIView):
    """
    로드맵 진행 상태 갱신 API 엔드포인트.

    서버는 상태를 저장하지 않으며, 클라이언트가 보낸 노드 목록에 액션을 적용한 결과를 돌려줍니다.
    """

    @extend_schema(
        summary="로드맵 진행 상태 갱신",
        description="toggle_microtask/toggle_node/toggle_expand/move/summary 액션을 적용합니다.",
        request=ProgressRequestSerializer,
        responses={200: ProgressResponseSerializer},
    )
    def post(self, request) -> Response:
        """
        @param {Request} request - DRF 요청 객체 (action/nodes 및 액션별 인자).
        @returns {Response} 갱신된 노드 목록, 획득 XP, 진행률 요약.
        """
        serializer = ProgressRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        nodes = [RoadmapNode.from_dict(item) for item in data["nodes"]]

        service = RoadmapProgressService()
        action = data["action"]
        xp_earned = 0
        try:
            if action == "toggle_microtask":
                update = service.toggle_microtask(nodes, data["node_id"], data["task_id"])
                nodes, xp_earned = update.nodes, update.xp_earned
            elif action == "toggle_node":
                update = service.toggle_node_complete(nodes, data["node_id"])
                nodes, xp_earned = update.nodes, update.xp_earned
            elif action == "toggle_expand":
                nodes = service.toggle_expanded(nodes, data["node_id"])
            elif action == "move":
                nodes = service.move_node(nodes, data["index"], data["direction"])
        except ProgressError as exc:
            return _bad_request(exc)

        payload = {
            "action": action,
            "nodes": [node.to_dict() for node in nodes],
            "xp_earned": xp_earned,
            "summary": service.summarize(nodes).to_dict(),
        }
        return _serialize(ProgressResponseSerializer, payload)


class StudyKitFallbackAPIView(APIView):
    """AI 서비스 장애 시 사용하는 오프라인 학습 자료 응답."""

    @extend_schema(
        summary="오프라인 학습 자료 생성",
        description="요약, 빈칸 퀴즈, 플래시카드, 개념 지도, 학습 조언을 규칙 기반으로 생성합니다.",
        request=StudyKitRequestSerializer,
        responses={200: StudyKitSerializer},
    )
    def post(self, request) -> Response:
        """
        @param {Request} request - DRF 요청 객체 (content 또는 sources, 선택 seed).
        @returns {Response} 오프라인 학습 자료 묶음.
        """
        serializer = StudyKitRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        content, _ = _resolve_content(serializer.validated_data)

        payload = StudyKitFallbackService().build_kit(content, seed=serializer.validated_data.get("seed"))
        payload["generated_at"] = datetime.utcnow().isoformat()
        return _serialize(StudyKitSerializer, payload)


class HealthCheckAPIView(APIView):
    """
    API 헬스체크 엔드포인트.

    Docker 헬스체크 및 모니터링에 사용됩니다.
    """

    @extend_schema(
        summary="헬스체크",
        responses={200: HealthCheckSerializer},
    )
    def get(self, request) -> Response:
        """
        @param {Request} request - DRF 요청 객체.
        @returns {Response} 서비스 상태를 담은 직렬화된 응답.
        """
        payload = {
            "status": "ok",
            "version": API_VERSION,
            "services": {
                "roadmap_generator": True,
                "content_analyzer": True,
                "study_kit_fallback": True,
            },
            "timestamp": datetime.utcnow().isoformat(),
        }
        return _serialize(HealthCheckSerializer, payload)


# =============================================================================
# 유틸리티 함수
# =============================================================================

def _resolve_content(data: Mapping[str, Any]) -> Tuple[str, int]:
    """
    sources가 있으면 병합하고, 없으면 content를 그대로 사용합니다.

    @param {Mapping[str, Any]} data - 검증된 요청 데이터.
    @returns {Tuple[str, int]} (분석할 텍스트, 자료 수).
    """
    sources = data.get("sources")
    if sources:
        return merge_sources(StudySource(name=item["name"], text=item["text"]) for item in sources)
    content = data.get("content") or ""
    return content, 1 if content else 0


def _serialize(serializer_class, payload, many: bool = False) -> Response:
    """
    @param serializer_class 사용할 DRF Serializer 클래스.
    @param payload 응답 데이터.
    @param many 리스트 여부.
    @returns 직렬화된 DRF Response.
    """
    serializer = serializer_class(payload, many=many)
    return Response(serializer.data)


def _bad_request(exc: Exception) -> Response:
    """
    @param exc 계약 위반 예외.
    @returns 400 응답.
    """
    logger.warning("잘못된 요청", extra={"error": str(exc)})
    body: Dict[str, str] = {"detail": str(exc)}
    return Response(body, status=status.HTTP_400_BAD_REQUEST)
