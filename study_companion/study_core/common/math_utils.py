import math


def round_half_up(value: float) -> int:
    """
    @param value 반올림할 실수.
    @returns .5를 항상 올림 처리한 정수 (은행가 반올림이 아닌 Math.round 규칙).
    """
    return int(math.floor(value + 0.5))


def clamp(value: int, lower: int, upper: int) -> int:
    """
    @param value 제한할 값.
    @param lower 하한.
    @param upper 상한.
    @returns [lower, upper] 범위로 제한된 값.
    """
    return min(upper, max(lower, value))
