from __future__ import annotations

import math
from typing import List, Sequence, TypeVar, Union

from study_companion.study_core.common.errors import EmptySequenceError
from study_companion.study_core.common.hashing import rolling_hash_32

T = TypeVar("T")
SeedLike = Union[int, str]

_UINT32_MASK = 0xFFFFFFFF
_STATE_INCREMENT = 0x6D2B79F5
_UINT32_RANGE = 4294967296


class SeededRandom:
    """
    Mulberry32 기반의 재현 가능한 의사 난수 생성기.

    모든 중간 연산은 32비트 wraparound 정수 연산으로 수행되므로
    같은 시드라면 플랫폼과 무관하게 같은 수열을 생성합니다.
    """

    def __init__(self, seed: SeedLike) -> None:
        """
        @param {SeedLike} seed - 정수 시드 또는 해시할 문자열 시드.
        @returns {None} 내부 32비트 상태를 초기화합니다.
        """
        if isinstance(seed, bool) or not isinstance(seed, (int, str)):
            raise TypeError(f"시드는 int 또는 str 이어야 합니다: {seed!r}")
        if isinstance(seed, str):
            seed = rolling_hash_32(seed)
        self._state = seed & _UINT32_MASK

    @property
    def state(self) -> int:
        """
        @returns {int} 현재 내부 상태 (부호 없는 32비트).
        """
        return self._state

    def next(self) -> float:
        """
        상태를 한 단계 진행하고 [0, 1) 범위 실수를 반환합니다.

        @returns {float} 0 이상 1 미만의 난수.
        """
        self._state = (self._state + _STATE_INCREMENT) & _UINT32_MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _UINT32_MASK
        return ((t ^ (t >> 14)) & _UINT32_MASK) / _UINT32_RANGE

    def next_int(self, minimum: int, maximum: int) -> int:
        """
        @param {int} minimum - 하한 (포함).
        @param {int} maximum - 상한 (포함).
        @returns {int} [minimum, maximum] 범위의 정수.
        """
        if maximum < minimum:
            raise ValueError(f"상한({maximum})이 하한({minimum})보다 작습니다")
        return math.floor(self.next() * (maximum - minimum + 1)) + minimum

    def pick(self, items: Sequence[T]) -> T:
        """
        @param {Sequence[T]} items - 비어 있지 않은 후보 시퀀스.
        @returns {T} 무작위로 선택된 원소.
        """
        if not items:
            raise EmptySequenceError("빈 시퀀스에서는 원소를 선택할 수 없습니다")
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """
        Fisher-Yates 셔플. 입력은 변경하지 않습니다.

        @param {Sequence[T]} items - 섞을 시퀀스.
        @returns {List[T]} 섞인 새 리스트.
        """
        shuffled = list(items)
        for idx in range(len(shuffled) - 1, 0, -1):
            swap_idx = math.floor(self.next() * (idx + 1))
            shuffled[idx], shuffled[swap_idx] = shuffled[swap_idx], shuffled[idx]
        return shuffled


def _imul(a: int, b: int) -> int:
    # 곱의 하위 32비트만 유지
    return (a * b) & _UINT32_MASK
