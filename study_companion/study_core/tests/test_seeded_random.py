import unittest

from study_companion.study_core.common.errors import EmptySequenceError
from study_companion.study_core.common.hashing import rolling_hash_32
from study_companion.study_core.common.seeded_random import SeededRandom


class SeededRandomTests(unittest.TestCase):
    def test_same_seed_same_sequence(self) -> None:
        """
        같은 시드라면 같은 수열을 생성하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        first = SeededRandom(42)
        second = SeededRandom(42)
        self.assertEqual([first.next() for _ in range(50)], [second.next() for _ in range(50)])

    def test_different_seed_different_sequence(self) -> None:
        """
        시드가 다르면 수열이 달라지는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        self.assertNotEqual(
            [SeededRandom(1).next() for _ in range(5)],
            [SeededRandom(2).next() for _ in range(5)],
        )

    def test_string_seed_uses_rolling_hash(self) -> None:
        """
        문자열 시드가 롤링 해시 정수 시드와 같은 수열을 만드는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        by_text = SeededRandom("roadmap")
        by_hash = SeededRandom(rolling_hash_32("roadmap"))
        self.assertEqual([by_text.next() for _ in range(10)], [by_hash.next() for _ in range(10)])

    def test_matches_reference_mulberry32_sequence(self) -> None:
        """
        첫 세 개 난수가 Mulberry32 기준값과 비트 단위로 같은지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        expected = {
            42: [0.6011037519201636, 0.44829055899754167, 0.8524657934904099],
            "roadmap": [0.69516357826069, 0.10337450099177659, 0.9304424896836281],
            0: [0.26642920868471265, 0.0003297457005828619, 0.2232720274478197],
        }
        for seed, values in expected.items():
            source = SeededRandom(seed)
            self.assertEqual([source.next() for _ in range(3)], values, msg=f"seed={seed!r}")

    def test_next_range_and_state_width(self) -> None:
        """
        next()가 [0, 1) 범위이고 내부 상태가 32비트로 유지되는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        rng = SeededRandom(2 ** 40 + 7)
        for _ in range(1000):
            value = rng.next()
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)
            self.assertLess(rng.state, 2 ** 32)

    def test_next_int_bounds_over_many_draws(self) -> None:
        """
        seed=0에서 next_int(10, 25)가 10,000회 모두 범위 안인지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        rng = SeededRandom(0)
        draws = [rng.next_int(10, 25) for _ in range(10_000)]
        self.assertTrue(all(10 <= value <= 25 for value in draws))
        self.assertTrue(all(isinstance(value, int) for value in draws))
        self.assertEqual(set(draws), set(range(10, 26)))

    def test_next_int_rejects_inverted_bounds(self) -> None:
        with self.assertRaises(ValueError):
            SeededRandom(3).next_int(5, 4)

    def test_pick_requires_non_empty(self) -> None:
        """
        빈 시퀀스 pick은 계약 위반 예외를 발생시키는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        rng = SeededRandom(7)
        with self.assertRaises(EmptySequenceError):
            rng.pick([])
        self.assertIn(rng.pick(["a", "b", "c"]), {"a", "b", "c"})

    def test_shuffle_returns_permuted_copy(self) -> None:
        """
        shuffle이 입력을 변경하지 않고 순열을 반환하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        items = list(range(20))
        shuffled = SeededRandom(99).shuffle(items)
        self.assertEqual(items, list(range(20)))
        self.assertEqual(sorted(shuffled), items)
        self.assertEqual(shuffled, SeededRandom(99).shuffle(items))
        self.assertEqual(SeededRandom(99).shuffle([]), [])

    def test_rejects_non_integer_seed(self) -> None:
        for seed in (True, 1.5, None):
            with self.assertRaises(TypeError):
                SeededRandom(seed)


if __name__ == "__main__":
    unittest.main()
