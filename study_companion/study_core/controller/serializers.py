from __future__ import annotations

from django.conf import settings
from rest_framework import serializers

from study_companion.study_core.domain.study_enums import Difficulty, ExamGoal, Strategy, TaskType

PROGRESS_ACTIONS = ("toggle_microtask", "toggle_node", "toggle_expand", "move", "summary")


def _choices(enum_cls):
    return [member.value for member in enum_cls]


class SeedField(serializers.Field):
    """정수 또는 문자열 시드를 그대로 받는 필드 (bool 거부)."""

    default_error_messages = {"invalid": "seed는 정수 또는 문자열이어야 합니다."}

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, str)):
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return value


# -----------------------------------------------------------------------------
# 요청 스키마
# -----------------------------------------------------------------------------

class StudySourceSerializer(serializers.Serializer):
    name = serializers.CharField()
    text = serializers.CharField(allow_blank=True)


class ContentRequestSerializer(serializers.Serializer):
    """content 또는 sources 중 하나로 학습 자료를 받는 공통 요청."""

    content = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    sources = StudySourceSerializer(many=True, required=False)

    def validate_content(self, value: str) -> str:
        """
        @param value 요청 원문.
        @returns 길이 제한을 통과한 원문.
        """
        limit = settings.STUDY_MAX_CONTENT_CHARS
        if len(value) > limit:
            raise serializers.ValidationError(f"content는 {limit}자를 넘을 수 없습니다.")
        return value

    def validate_sources(self, value):
        """
        @param value 자료 목록.
        @returns 개수 제한을 통과한 자료 목록.
        """
        limit = settings.STUDY_MAX_SOURCES
        if len(value) > limit:
            raise serializers.ValidationError(f"sources는 최대 {limit}개까지 허용됩니다.")
        return value

    def validate(self, attrs):
        """
        @param attrs 필드 검증을 통과한 값.
        @returns 자료 본문 총 길이 제한을 통과한 값.
        """
        limit = settings.STUDY_MAX_CONTENT_CHARS
        total = sum(len(item["text"]) for item in attrs.get("sources") or [])
        if total > limit:
            raise serializers.ValidationError({"sources": f"sources 본문 합계는 {limit}자를 넘을 수 없습니다."})
        return attrs


class RoadmapGenerateRequestSerializer(ContentRequestSerializer):
    exam_goal = serializers.ChoiceField(choices=_choices(ExamGoal), default=ExamGoal.GENERAL.value)
    strategy = serializers.ChoiceField(choices=_choices(Strategy), default=Strategy.BALANCED.value)
    daily_minutes = serializers.IntegerField(min_value=1, required=False)
    seed = SeedField(required=False, allow_null=True)
    exam_date = serializers.DateField(required=False, allow_null=True)


class StudyKitRequestSerializer(ContentRequestSerializer):
    seed = SeedField(required=False, allow_null=True)


# -----------------------------------------------------------------------------
# 로드맵/분석 응답 스키마
# -----------------------------------------------------------------------------

class MicrotaskSerializer(serializers.Serializer):
    id = serializers.CharField()
    text = serializers.CharField()
    est_min = serializers.IntegerField(min_value=0)
    is_complete = serializers.BooleanField(default=False)


class RoadmapNodeSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    type = serializers.ChoiceField(choices=_choices(TaskType))
    est_minutes = serializers.IntegerField(min_value=0)
    difficulty = serializers.ChoiceField(choices=_choices(Difficulty))
    microtasks = MicrotaskSerializer(many=True)
    prerequisites = serializers.ListField(child=serializers.CharField(), default=list)
    resources = serializers.ListField(child=serializers.CharField(), default=list)
    progress_pct = serializers.IntegerField(min_value=0, max_value=100, default=0)
    xp_value = serializers.IntegerField(min_value=0, default=0)
    is_expanded = serializers.BooleanField(default=False)
    topic_cluster = serializers.CharField(allow_blank=True, default="")


class ContentAnalysisSerializer(serializers.Serializer):
    topics = serializers.ListField(child=serializers.CharField())
    complexity_score = serializers.IntegerField()
    keyword_density = serializers.DictField(child=serializers.IntegerField())
    risk_areas = serializers.ListField(child=serializers.CharField())


class ContentInsightSerializer(serializers.Serializer):
    complexity_label = serializers.CharField()
    complexity_level = serializers.CharField()
    focus_clusters = serializers.ListField(child=serializers.CharField())
    risk_preview = serializers.ListField(child=serializers.CharField())


class RoadmapConfigEchoSerializer(serializers.Serializer):
    exam_goal = serializers.CharField()
    strategy = serializers.CharField()
    daily_minutes = serializers.IntegerField()
    seed = SeedField(allow_null=True)
    exam_date = serializers.CharField(allow_null=True)


class RoadmapGeneratedSerializer(serializers.Serializer):
    config = RoadmapConfigEchoSerializer()
    source_count = serializers.IntegerField()
    analysis = ContentAnalysisSerializer()
    insight = ContentInsightSerializer()
    nodes = RoadmapNodeSerializer(many=True)
    generated_at = serializers.CharField()


class ContentAnalysisResponseSerializer(serializers.Serializer):
    content_fingerprint = serializers.CharField()
    source_count = serializers.IntegerField()
    analysis = ContentAnalysisSerializer()
    insight = ContentInsightSerializer()
    generated_at = serializers.CharField()


# -----------------------------------------------------------------------------
# 진행 상태 스키마
# -----------------------------------------------------------------------------

class ProgressRequestSerializer(serializers.Serializer):
    action = serializers.ChoiceField(choices=PROGRESS_ACTIONS)
    nodes = RoadmapNodeSerializer(many=True)
    node_id = serializers.CharField(required=False)
    task_id = serializers.CharField(required=False)
    index = serializers.IntegerField(required=False, min_value=0)
    direction = serializers.ChoiceField(choices=[-1, 1], required=False)

    def validate(self, attrs):
        """
        @param attrs 필드 검증을 통과한 값.
        @returns 액션별 필수 필드를 확인한 값.
        """
        required = {
            "toggle_microtask": ("node_id", "task_id"),
            "toggle_node": ("node_id",),
            "toggle_expand": ("node_id",),
            "move": ("index", "direction"),
            "summary": (),
        }[attrs["action"]]
        missing = [name for name in required if attrs.get(name) is None]
        if missing:
            raise serializers.ValidationError({name: "이 액션에 필요한 값입니다." for name in missing})
        return attrs


class ProgressSummarySerializer(serializers.Serializer):
    total_tasks = serializers.IntegerField()
    completed_tasks = serializers.IntegerField()
    progress_pct = serializers.IntegerField()
    completed_nodes = serializers.IntegerField()
    earned_xp = serializers.IntegerField()
    total_minutes = serializers.IntegerField()
    remaining_minutes = serializers.IntegerField()


class ProgressResponseSerializer(serializers.Serializer):
    action = serializers.CharField()
    nodes = RoadmapNodeSerializer(many=True)
    xp_earned = serializers.IntegerField()
    summary = ProgressSummarySerializer()


# -----------------------------------------------------------------------------
# 오프라인 학습 자료 스키마
# -----------------------------------------------------------------------------

class QuizQuestionSerializer(serializers.Serializer):
    question = serializers.CharField()
    options = serializers.ListField(child=serializers.CharField())
    correct_index = serializers.IntegerField()
    explanation = serializers.CharField()


class QuizSerializer(serializers.Serializer):
    title = serializers.CharField()
    questions = QuizQuestionSerializer(many=True)


class FlashcardSerializer(serializers.Serializer):
    front = serializers.CharField()
    back = serializers.CharField()


class ConceptNodeSerializer(serializers.Serializer):
    id = serializers.CharField()
    label = serializers.CharField()
    importance = serializers.IntegerField()
    category = serializers.CharField()
    connections = serializers.ListField(child=serializers.CharField())


class ConceptMapSerializer(serializers.Serializer):
    nodes = ConceptNodeSerializer(many=True)


class StudyAdviceSerializer(serializers.Serializer):
    strategies = serializers.ListField(child=serializers.CharField())
    micro_advice = serializers.CharField()


class StudyKitSerializer(serializers.Serializer):
    summary = serializers.CharField()
    quiz = QuizSerializer()
    flashcards = FlashcardSerializer(many=True)
    concept_map = ConceptMapSerializer()
    advice = StudyAdviceSerializer()
    generated_at = serializers.CharField()


class HealthCheckSerializer(serializers.Serializer):
    status = serializers.CharField()
    version = serializers.CharField()
    services = serializers.DictField(child=serializers.BooleanField())
    timestamp = serializers.CharField()
