class EmptySequenceError(ValueError):
    """빈 시퀀스에서 원소를 선택하려 할 때 발생합니다."""

    pass


class RoadmapConfigError(ValueError):
    """로드맵 설정값이 허용 범위를 벗어났을 때 발생합니다."""

    pass


class ProgressError(ValueError):
    """진행 상태 갱신 대상(노드/마이크로태스크)을 찾을 수 없을 때 발생합니다."""

    pass
