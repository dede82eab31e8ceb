import hashlib

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN_BIT = 0x80000000


def stable_hash_text(text: str) -> str:
    """
    @param text 해시 대상 문자열.
    @returns SHA-256 해시 문자열.
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def rolling_hash_32(text: str) -> int:
    """
    문자열 시드를 정수 시드로 바꾸는 31 배수 다항식 롤링 해시.

    UTF-16 코드 유닛 단위로 누적하며 매 단계 32비트 부호 있는 정수로 절삭합니다.
    브라우저 쪽에서 만든 문자열 시드와 같은 값을 내기 위한 규칙입니다.

    @param text 해시 대상 문자열.
    @returns 해시의 절댓값 (0 ~ 2^31).
    """
    value = 0
    for code_unit in _utf16_code_units(text):
        value = to_int32((value << 5) - value + code_unit)
    return abs(value)


def to_int32(value: int) -> int:
    """
    @param value 임의 정밀도 정수.
    @returns 32비트 wraparound를 적용한 부호 있는 정수.
    """
    value &= _UINT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN_BIT else value


def _utf16_code_units(text: str) -> list[int]:
    encoded = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(encoded[idx:idx + 2], "little") for idx in range(0, len(encoded), 2)]
