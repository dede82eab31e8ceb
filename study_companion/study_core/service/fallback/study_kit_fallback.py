from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional

from study_companion.study_core.common.clock import epoch_millis
from study_companion.study_core.common.nlp.text_utils import (
    capitalize_first,
    extract_sentences,
    keyword_counts,
    tokenize,
    top_keywords,
)
from study_companion.study_core.common.seeded_random import SeededRandom, SeedLike
from study_companion.study_core.domain.study_kit import ConceptNode, Flashcard, QuizQuestion

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS = ("Learning", "Concept", "Study")
KEYWORD_LIMIT = 10

SUMMARY_MAX_POINTS = 5
SUMMARY_MIN_SENTENCE_LENGTH = 20
SUMMARY_HEADING = "### Rapid Summary (Offline Fallback)"
SUMMARY_NOTE = "> *Note: AI service was unreachable. This is a heuristic summary.*"
SUMMARY_UNAVAILABLE = (
    "### Summary Unavailable\n\n"
    "Could not extract a meaningful summary from the text. Please ensure the content is readable."
)

QUIZ_TITLE = "Review Quiz (Fallback)"
QUIZ_MAX_QUESTIONS = 5
QUIZ_MIN_QUESTIONS = 3
QUIZ_SENTENCE_RANGE = (30, 150)
CLOZE_BLANK = "_______"
DISTRACTORS = ("Incorrect Option A", "Incorrect Option B", "Incorrect Option C")
GENERIC_QUESTION = "What is the primary subject of this material?"
GENERIC_OPTIONS = ("The Content Provided", "General Knowledge", "Unrelated Topic", "Specific Detail")

FLASHCARD_MAX = 8
FLASHCARD_MIN = 3
FLASHCARD_KEYWORD_COUNT = 5
DEFINITION_MAX_LENGTH = 150
KEYWORD_CARD_BACK = "Key concept from the text. Review source material for detailed definition."

CONCEPT_CHILD_LIMIT = 7

STUDY_STRATEGIES = (
    "Use the Pomodoro timer to break study sessions.",
    "Review the generated flashcards for active recall.",
    "Summarize each section in your own words to ensure understanding.",
)
MICRO_ADVICE = "Focus on the bolded keywords in the summary."

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_DEFINITION_RE = re.compile(r"^([A-Z][a-z]+(?:\s[A-Z][a-z]+){0,3})\s+(?:is|are|refers to|means)\s+(.+)")


class StudyKitFallbackService:
    """
    AI 백엔드를 사용할 수 없을 때 쓰는 오프라인 학습 자료 생성기.

    요약, 빈칸 퀴즈, 플래시카드, 개념 지도, 학습 조언을 규칙 기반으로 만듭니다.
    퀴즈 보기 순서만 난수를 사용하며 시드를 주면 결과가 재현됩니다.
    """

    def __init__(self, clock: Optional[Callable[[], SeedLike]] = None) -> None:
        """
        @param {Optional[Callable[[], SeedLike]]} clock - 시드가 없을 때 쓰는 엔트로피 공급자.
        @returns {None}
        """
        self._clock = clock or epoch_millis

    def build_kit(self, text: str, seed: Optional[SeedLike] = None) -> Dict[str, object]:
        """
        @param {str} text - 학습 자료 원문.
        @param {Optional[SeedLike]} seed - 퀴즈 보기 셔플 시드.
        @returns {Dict[str, object]} summary/quiz/flashcards/concept_map/advice 페이로드.
        """
        quiz = self.local_quiz(text, seed=seed)
        logger.debug("오프라인 학습 자료 생성", extra={"question_count": len(quiz)})
        return {
            "summary": self.local_summary(text),
            "quiz": {"title": QUIZ_TITLE, "questions": [question.to_dict() for question in quiz]},
            "flashcards": [card.to_dict() for card in self.local_flashcards(text)],
            "concept_map": {"nodes": [node.to_dict() for node in self.local_concept_map(text)]},
            "advice": self.study_advice(),
        }

    def local_summary(self, text: str) -> str:
        """
        문단별 첫 문장을 모아 마크다운 요약을 만듭니다.

        @param {str} text - 학습 자료 원문.
        @returns {str} 마크다운 요약.
        """
        points = []
        for paragraph in _PARAGRAPH_SPLIT_RE.split(text or ""):
            sentences = extract_sentences(paragraph)
            if sentences and len(sentences[0]) > SUMMARY_MIN_SENTENCE_LENGTH:
                points.append(sentences[0].strip())
            if len(points) == SUMMARY_MAX_POINTS:
                break
        if not points:
            return SUMMARY_UNAVAILABLE
        bullets = "\n".join(f"- {point}" for point in points)
        return f"{SUMMARY_HEADING}\n\n{bullets}\n\n{SUMMARY_NOTE}"

    def local_quiz(self, text: str, seed: Optional[SeedLike] = None) -> List[QuizQuestion]:
        """
        키워드를 포함한 문장으로 빈칸 채우기 문항을 만듭니다.

        @param {str} text - 학습 자료 원문.
        @param {Optional[SeedLike]} seed - 보기 셔플 시드 (없으면 현재 시각).
        @returns {List[QuizQuestion]} 3~5개 문항.
        """
        source = SeededRandom(seed if seed is not None else self._clock())
        keywords = _keywords(text)
        questions: List[QuizQuestion] = []
        min_len, max_len = QUIZ_SENTENCE_RANGE

        for sentence in extract_sentences(text or ""):
            if len(questions) >= QUIZ_MAX_QUESTIONS:
                break
            lowered = sentence.lower()
            keyword = next((candidate for candidate in keywords if candidate in lowered), None)
            if not keyword or not min_len < len(sentence) < max_len:
                continue
            pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
            cloze = pattern.sub(CLOZE_BLANK, sentence)
            if cloze == sentence:
                continue
            questions.append(
                _shuffled_question(
                    source,
                    question=f'Complete the sentence: "{cloze}"',
                    answer=keyword,
                    distractors=DISTRACTORS,
                    explanation=f'The term "{keyword}" fits the context of the sentence.',
                )
            )

        while len(questions) < QUIZ_MIN_QUESTIONS:
            questions.append(
                _shuffled_question(
                    source,
                    question=GENERIC_QUESTION,
                    answer=GENERIC_OPTIONS[0],
                    distractors=GENERIC_OPTIONS[1:],
                    explanation="This is a fallback question generated to ensure the quiz functions.",
                )
            )
        return questions

    def local_flashcards(self, text: str) -> List[Flashcard]:
        """
        "Term is Definition" 형태 문장을 카드로 만들고, 부족하면 키워드 카드로 채웁니다.

        @param {str} text - 학습 자료 원문.
        @returns {List[Flashcard]} 플래시카드 목록.
        """
        cards: List[Flashcard] = []
        for sentence in extract_sentences(text or ""):
            if len(cards) >= FLASHCARD_MAX:
                break
            match = _DEFINITION_RE.match(sentence.strip())
            if match and len(match.group(2)) < DEFINITION_MAX_LENGTH:
                cards.append(Flashcard(front=match.group(1), back=match.group(2).strip()))

        if len(cards) < FLASHCARD_MIN:
            for keyword in _keywords(text)[:FLASHCARD_KEYWORD_COUNT]:
                cards.append(Flashcard(front=capitalize_first(keyword), back=KEYWORD_CARD_BACK))
        return cards

    def local_concept_map(self, text: str) -> List[ConceptNode]:
        """
        @param {str} text - 학습 자료 원문.
        @returns {List[ConceptNode]} 최상위 키워드를 루트로 한 방사형 개념 지도.
        """
        keywords = _keywords(text)
        children = [
            ConceptNode(
                node_id=f"node-{idx}",
                label=capitalize_first(keyword),
                importance=8 - idx,
                category="Concept",
            )
            for idx, keyword in enumerate(keywords[1:1 + CONCEPT_CHILD_LIMIT])
        ]
        root = ConceptNode(
            node_id="root",
            label=keywords[0].upper() if keywords else "MAIN TOPIC",
            importance=10,
            category="Core",
            connections=[child.node_id for child in children],
        )
        return [root, *children]

    def study_advice(self) -> Dict[str, object]:
        """
        @returns {Dict[str, object]} 고정 학습 전략 목록과 짧은 조언.
        """
        return {"strategies": list(STUDY_STRATEGIES), "micro_advice": MICRO_ADVICE}


def _keywords(text: str) -> List[str]:
    """
    @param text 원문.
    @returns 상위 10개 키워드. 빈 입력이면 기본 키워드.
    """
    if not text:
        return list(DEFAULT_KEYWORDS)
    return top_keywords(keyword_counts(tokenize(text)), KEYWORD_LIMIT)


def _shuffled_question(
    source: SeededRandom,
    question: str,
    answer: str,
    distractors,
    explanation: str,
) -> QuizQuestion:
    options = source.shuffle([answer, *distractors])
    return QuizQuestion(
        question=question,
        options=options,
        correct_index=options.index(answer),
        explanation=explanation,
    )
