import unittest

from study_companion.study_core.service.fallback.study_kit_fallback import (
    DEFAULT_KEYWORDS,
    GENERIC_OPTIONS,
    KEYWORD_CARD_BACK,
    STUDY_STRATEGIES,
    SUMMARY_HEADING,
    SUMMARY_UNAVAILABLE,
    StudyKitFallbackService,
)

BIOLOGY_NOTES = (
    "Photosynthesis converts light energy into chemical energy inside plants. More detail follows.\n\n"
    "Short one.\n\n"
    "The mitochondria supplies energy for the whole cell."
)

DEFINITIONS = (
    "Osmosis is the movement of water across a membrane. "
    "Mitosis refers to cell division. "
    "Enzymes are biological catalysts."
)


class StudyKitFallbackTests(unittest.TestCase):
    def setUp(self) -> None:
        self.service = StudyKitFallbackService(clock=lambda: 7)

    def test_summary_uses_first_sentence_of_paragraphs(self) -> None:
        """
        문단 첫 문장 중 20자를 넘는 문장만 요약에 쓰는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        summary = self.service.local_summary(BIOLOGY_NOTES)
        self.assertTrue(summary.startswith(SUMMARY_HEADING))
        self.assertIn("- Photosynthesis converts light energy into chemical energy inside plants.", summary)
        self.assertIn("- The mitochondria supplies energy for the whole cell.", summary)
        self.assertNotIn("Short one", summary)
        self.assertEqual(self.service.local_summary(""), SUMMARY_UNAVAILABLE)

    def test_quiz_blanks_keyword(self) -> None:
        """
        키워드를 빈칸으로 바꾼 문항을 만들고 최소 3문항을 채우는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        questions = self.service.local_quiz(BIOLOGY_NOTES, seed=3)
        self.assertGreaterEqual(len(questions), 3)
        first = questions[0]
        self.assertIn("_______", first.question)
        self.assertNotIn(" energy ", first.question)
        self.assertEqual(first.options[first.correct_index], "energy")
        self.assertEqual(len(first.options), 4)

    def test_quiz_padding_on_empty_text(self) -> None:
        questions = self.service.local_quiz("", seed=1)
        self.assertEqual(len(questions), 3)
        for question in questions:
            self.assertEqual(sorted(question.options), sorted(GENERIC_OPTIONS))
            self.assertEqual(question.options[question.correct_index], GENERIC_OPTIONS[0])

    def test_quiz_is_seed_deterministic(self) -> None:
        first = [question.to_dict() for question in self.service.local_quiz(BIOLOGY_NOTES, seed="kit")]
        second = [question.to_dict() for question in self.service.local_quiz(BIOLOGY_NOTES, seed="kit")]
        self.assertEqual(first, second)
        clocked = [question.to_dict() for question in self.service.local_quiz(BIOLOGY_NOTES)]
        seeded = [question.to_dict() for question in self.service.local_quiz(BIOLOGY_NOTES, seed=7)]
        self.assertEqual(clocked, seeded)

    def test_flashcards_from_definitions(self) -> None:
        """
        "Term is Definition" 문장을 카드로 만드는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        cards = self.service.local_flashcards(DEFINITIONS)
        self.assertEqual([card.front for card in cards], ["Osmosis", "Mitosis", "Enzymes"])
        self.assertEqual(cards[1].back, "cell division.")

    def test_flashcards_fall_back_to_keywords(self) -> None:
        cards = self.service.local_flashcards("")
        self.assertEqual([card.front for card in cards], list(DEFAULT_KEYWORDS))
        self.assertTrue(all(card.back == KEYWORD_CARD_BACK for card in cards))

    def test_concept_map(self) -> None:
        """
        최상위 키워드를 루트로 하고 자식 중요도가 감소하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        nodes = self.service.local_concept_map("energy energy cells glucose")
        root, *children = nodes
        self.assertEqual(root.label, "ENERGY")
        self.assertEqual(root.importance, 10)
        self.assertEqual([child.label for child in children], ["Cells", "Glucose"])
        self.assertEqual([child.importance for child in children], [8, 7])
        self.assertEqual(root.connections, ["node-0", "node-1"])

        fallback_root = self.service.local_concept_map("a b c")[0]
        self.assertEqual(fallback_root.label, "MAIN TOPIC")
        self.assertEqual(fallback_root.connections, [])

    def test_build_kit_payload(self) -> None:
        kit = self.service.build_kit(DEFINITIONS, seed=11)
        self.assertEqual(set(kit), {"summary", "quiz", "flashcards", "concept_map", "advice"})
        self.assertEqual(kit["advice"]["strategies"], list(STUDY_STRATEGIES))
        self.assertEqual(kit["concept_map"]["nodes"][0]["id"], "root")
        self.assertGreaterEqual(len(kit["quiz"]["questions"]), 3)


if __name__ == "__main__":
    unittest.main()
