import unittest

from study_companion.study_core.domain.study_source import StudySource
from study_companion.study_core.service.analysis.content_analyzer import ContentAnalyzer
from study_companion.study_core.service.sources.source_merger import merge_sources


class SourceMergerTests(unittest.TestCase):
    def test_merges_with_source_headers(self) -> None:
        """
        출처 머리글을 붙여 빈 줄로 구분하고 빈 자료는 건너뛰는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        text, count = merge_sources([
            StudySource(name="bio.pdf", text="  Cell Structure Basics\nCells divide.  "),
            StudySource(name="empty.txt", text="   "),
            StudySource(name="chem.docx", text="Atoms bond."),
        ])
        self.assertEqual(count, 2)
        self.assertEqual(
            text,
            "--- SOURCE: bio.pdf ---\nCell Structure Basics\nCells divide.\n\n--- SOURCE: chem.docx ---\nAtoms bond.",
        )

    def test_empty_input(self) -> None:
        self.assertEqual(merge_sources([]), ("", 0))

    def test_merged_text_keeps_header_lines(self) -> None:
        text, _ = merge_sources([
            StudySource(name="notes-a", text="Kinetic Energy Basics\nPotential Energy Basics"),
            StudySource(name="notes-b", text="Conservation Of Momentum"),
        ])
        topics = ContentAnalyzer().analyze(text).topics
        self.assertIn("Kinetic Energy Basics", topics)
        self.assertIn("Conservation Of Momentum", topics)


if __name__ == "__main__":
    unittest.main()
