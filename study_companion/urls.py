from django.urls import path

from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from study_companion.study_core.controller.study_views import (
    ContentAnalysisAPIView,
    HealthCheckAPIView,
    RoadmapGenerateAPIView,
    RoadmapProgressAPIView,
    StudyKitFallbackAPIView,
)

API_PREFIXES = ("ai", "api")

urlpatterns = []
for prefix in API_PREFIXES:
    # OpenAPI 스키마 및 문서
    urlpatterns.extend(
        [
            path(f"{prefix}/schema/", SpectacularAPIView.as_view(), name=f"schema-{prefix}"),
            path(
                f"{prefix}/docs/",
                SpectacularSwaggerView.as_view(url_name=f"schema-{prefix}"),
                name=f"swagger-ui-{prefix}",
            ),
            path(
                f"{prefix}/redoc/",
                SpectacularRedocView.as_view(url_name=f"schema-{prefix}"),
                name=f"redoc-{prefix}",
            ),
        ]
    )

    # 헬스체크 API
    urlpatterns.append(path(f"{prefix}/health/", HealthCheckAPIView.as_view(), name=f"health-check-{prefix}"))

    # 로드맵 관련 API
    urlpatterns.append(path(f"{prefix}/roadmap/generate", RoadmapGenerateAPIView.as_view(), name=f"roadmap-generate-{prefix}"))
    urlpatterns.append(path(f"{prefix}/roadmap/progress", RoadmapProgressAPIView.as_view(), name=f"roadmap-progress-{prefix}"))

    # 자료 분석 API
    urlpatterns.append(path(f"{prefix}/content/analysis", ContentAnalysisAPIView.as_view(), name=f"content-analysis-{prefix}"))

    # 오프라인 학습 자료 API
    urlpatterns.append(path(f"{prefix}/study-kit/fallback", StudyKitFallbackAPIView.as_view(), name=f"study-kit-fallback-{prefix}"))
