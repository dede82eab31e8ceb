from __future__ import annotations

from typing import Iterable, Tuple

from study_companion.study_core.domain.study_source import StudySource

SOURCE_HEADER = "--- SOURCE: {name} ---"


def merge_sources(sources: Iterable[StudySource]) -> Tuple[str, int]:
    """
    여러 파일에서 추출한 텍스트를 출처 머리글과 함께 하나로 합칩니다.

    @param sources 추출 완료된 학습 자료 목록.
    @returns (병합 텍스트, 병합된 자료 수). 빈 텍스트 자료는 제외합니다.
    """
    blocks = []
    for source in sources:
        # 줄 구조는 헤더 토픽 감지에 쓰이므로 앞뒤 공백만 제거
        text = (source.text or "").strip()
        if not text:
            continue
        blocks.append(f"{SOURCE_HEADER.format(name=source.name)}\n{text}")
    return "\n\n".join(blocks), len(blocks)
