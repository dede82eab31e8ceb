import unittest

from study_companion.study_core.common.hashing import rolling_hash_32, stable_hash_text, to_int32


class HashingTests(unittest.TestCase):
    def test_rolling_hash_known_values(self) -> None:
        """
        31 배수 롤링 해시가 알려진 값과 일치하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        self.assertEqual(rolling_hash_32(""), 0)
        self.assertEqual(rolling_hash_32("abc"), 96354)
        self.assertEqual(rolling_hash_32("hello world"), 1794106052)

    def test_rolling_hash_wraps_and_takes_absolute_value(self) -> None:
        """
        32비트 오버플로 후 절댓값을 취하는지 검증합니다.

        @returns {None} 테스트만 수행합니다.
        """
        # 누적값이 정확히 -2^31 이 되는 문자열
        self.assertEqual(rolling_hash_32("polygenelubricants"), 2 ** 31)

    def test_to_int32(self) -> None:
        self.assertEqual(to_int32(2 ** 31), -(2 ** 31))
        self.assertEqual(to_int32(2 ** 32 + 5), 5)
        self.assertEqual(to_int32(-1), -1)

    def test_stable_hash_text(self) -> None:
        self.assertEqual(stable_hash_text("notes"), stable_hash_text("notes"))
        self.assertNotEqual(stable_hash_text("notes"), stable_hash_text("notes "))
        self.assertEqual(len(stable_hash_text("")), 64)


if __name__ == "__main__":
    unittest.main()
