from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudySource:
    """업로드된 파일 하나에서 추출된 텍스트."""

    name: str
    text: str
