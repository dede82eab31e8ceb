import re
from collections import Counter
from typing import Iterable, List

_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")

STOP_WORDS = frozenset({
    "the", "and", "is", "in", "to", "of", "a", "for", "it", "with",
    "on", "that", "this", "are", "was", "as", "an", "at",
})
MIN_KEYWORD_LENGTH = 4


def tokenize(text: str) -> List[str]:
    """
    @param text 토큰화할 문자열.
    @returns 소문자 영숫자 토큰 리스트 (문서 순서 유지).
    """
    return _WORD_RE.findall(text.lower())


def keyword_counts(tokens: Iterable[str]) -> Counter:
    """
    불용어와 3글자 이하 토큰을 제외한 빈도를 계산합니다.

    @param tokens 토큰 시퀀스.
    @returns 첫 등장 순서를 보존하는 빈도 Counter.
    """
    counts: Counter = Counter()
    for token in tokens:
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS:
            counts[token] += 1
    return counts


def top_keywords(counts: Counter, limit: int) -> List[str]:
    """
    @param counts 키워드 빈도.
    @param limit 최대 개수.
    @returns 빈도 내림차순 키워드 (동률은 첫 등장 순서).
    """
    return [token for token, _ in counts.most_common(limit)]


def extract_sentences(text: str) -> List[str]:
    """
    @param text 문장 분리 대상 문자열.
    @returns 마침표/느낌표/물음표로 끝나는 문장 리스트 (앞 공백 포함 원문 그대로).
    """
    if not text:
        return []
    return _SENTENCE_RE.findall(text)


def capitalize_first(word: str) -> str:
    """
    @param word 대상 단어.
    @returns 첫 글자만 대문자로 바꾼 단어 (나머지는 그대로).
    """
    return word[:1].upper() + word[1:]
