"""
검증기 단위 테스트
- 카드번호 Luhn 검증
- 신원번호 체크섬 검증
- 이메일 / 비밀번호 / 이름 / URL / 전화번호 / 우편번호 / IPv4 / ISBN 형식 검증
"""
import unittest

from validations.validators import (
    CardValidator,
    EmailValidator,
    IdentityNumberValidator,
    IPValidator,
    ISBNValidator,
    NameValidator,
    PasswordValidator,
    PhoneValidator,
    PostalCodeValidator,
    URLValidator,
)


class TestCardValidator(unittest.TestCase):
    """카드번호 검증 테스트"""

    def setUp(self):
        self.validator = CardValidator()

    def test_valid_luhn(self):
        """Luhn 유효 번호"""
        for value in [
            "4532015112830366",     # VISA
            "5425233430109903",     # MasterCard
            "378282246310005",      # AMEX 15자리
            "4222222222222",        # 13자리
        ]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_valid(value))

    def test_checksum_off_by_one(self):
        """마지막 자리 하나 차이 → Luhn 실패"""
        self.assertFalse(self.validator.is_valid("4532015112830367"))

    def test_separators_are_stripped(self):
        """하이픈/공백 포함 입력"""
        self.assertTrue(self.validator.is_valid("4532-0151-1283-0366"))
        self.assertTrue(self.validator.is_valid("4532 0151 1283 0366"))

    def test_length_bounds(self):
        """13-19자리 외 길이는 실패"""
        self.assertFalse(self.validator.is_valid("453201511283"))
        self.assertFalse(self.validator.is_valid("4" * 20))
        self.assertFalse(self.validator.is_valid("no digits here"))

    def test_verify_luhn_only(self):
        """체크섬만 검증"""
        self.assertTrue(self.validator.verify_luhn("79927398713"))
        self.assertFalse(self.validator.verify_luhn("79927398710"))
        self.assertFalse(self.validator.verify_luhn(""))

    def test_card_brand(self):
        """브랜드 추정"""
        self.assertEqual(self.validator.get_card_brand("4532015112830366"), "VISA")
        self.assertEqual(self.validator.get_card_brand("5425233430109903"), "MasterCard")
        self.assertEqual(self.validator.get_card_brand("378282246310005"), "AMEX")
        self.assertEqual(self.validator.get_card_brand("3530111333300000"), "JCB")
        self.assertEqual(self.validator.get_card_brand("6011111111111117"), "Discover/UnionPay")
        self.assertEqual(self.validator.get_card_brand("1"), "Unknown")


class TestIdentityNumberValidator(unittest.TestCase):
    """신원번호 (11자리) 체크섬 테스트"""

    def setUp(self):
        self.validator = IdentityNumberValidator()

    def test_known_valid_fixture(self):
        """합계 1×1 + 1×3 = 4 → 체크 디짓 6"""
        self.assertEqual(self.validator.checksum_digit("1000000014"), 6)
        self.assertTrue(self.validator.is_valid("10000000146"))

    def test_wrong_checksum(self):
        """체크 디짓 불일치"""
        for last in "012345789":
            with self.subTest(last=last):
                self.assertFalse(self.validator.is_valid("1000000014" + last))

    def test_sum_multiple_of_ten_maps_to_zero(self):
        """합계가 10의 배수면 체크 디짓은 10이 아니라 0"""
        self.assertEqual(self.validator.checksum_digit("1111111111"), 0)
        self.assertTrue(self.validator.is_valid("11111111110"))

    def test_mixed_digits(self):
        """1..9,0 → 합계 85 → 체크 디짓 5"""
        self.assertTrue(self.validator.is_valid("12345678905"))
        self.assertFalse(self.validator.is_valid("12345678901"))

    def test_leading_zero_rejected(self):
        """첫 자리 0 불가"""
        self.assertFalse(self.validator.is_valid("01000000146"))

    def test_length_and_separators(self):
        """숫자 이외 문자 제거 후 정확히 11자리"""
        self.assertTrue(self.validator.is_valid("100-000-001-46"))
        self.assertFalse(self.validator.is_valid("1000000014"))
        self.assertFalse(self.validator.is_valid("100000001460"))
        self.assertIsNone(self.validator.checksum_digit("123"))


class TestEmailValidator(unittest.TestCase):
    """이메일 검증 테스트"""

    def setUp(self):
        self.validator = EmailValidator()

    def test_valid(self):
        for value in [
            "user@example.com",
            "first.last+tag@sub.example.co",
            "a_b%c-d@x-y.org",
        ]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_valid(value))

    def test_invalid(self):
        for value in [
            "not-an-email",
            "user@example",
            "user@example.c",
            "user@example.c0m",
            "user@@example.com",
            "@example.com",
            "user@.com",
            "user@exa_mple.com",
            "user name@example.com",
            "user@example.com\n",
        ]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))


class TestPasswordValidator(unittest.TestCase):
    """비밀번호 검증 테스트"""

    def setUp(self):
        self.validator = PasswordValidator()

    def test_valid(self):
        self.assertTrue(self.validator.is_valid("abc12345"))
        self.assertTrue(self.validator.is_valid("A1B2C3D4E5"))

    def test_invalid(self):
        for value, desc in [
            ("abcdefgh", "숫자 없음"),
            ("12345678", "영문 없음"),
            ("abc123", "8자 미만"),
            ("abc12345!", "특수문자"),
            ("abc 12345", "공백"),
            ("ábc12345", "비ASCII 문자"),
            ("abc1234５", "전각 숫자"),
        ]:
            with self.subTest(desc=desc):
                self.assertFalse(self.validator.is_valid(value))


class TestNameValidator(unittest.TestCase):
    """이름 검증 테스트"""

    def setUp(self):
        self.validator = NameValidator()

    def test_valid(self):
        for value in ["John", "a", "O'Neil", "Mary-Jane", "Jean Luc", "Smith, J. R", "Ann  Lee"]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_valid(value))

    def test_invalid(self):
        for value in ["John1", "-John", "John-", "John.", "Jo--hn", "'", " John"]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))

    def test_adversarial_input_is_rejected(self):
        """역추적 폭발 유도 입력도 즉시 False"""
        self.assertFalse(self.validator.is_valid("a" * 4000 + "1"))
        self.assertFalse(self.validator.is_valid("a a" * 1300 + "!"))


class TestURLValidator(unittest.TestCase):
    """URL 형식 검증 테스트"""

    def setUp(self):
        self.validator = URLValidator()

    def test_valid(self):
        for value in [
            "http://example.com",
            "HTTPS://Example.com/path?q=1#frag",
            "ftp://files.example.org/pub/file.txt",
            "http://example.com:8080",
            "http://user:pw@example.com/",
            "http://192.168.0.1/",
            "http://[::1]/",
            "http://example.com/a%20b",
        ]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_valid(value))

    def test_invalid(self):
        for value in [
            "example.com",
            "mailto:user@example.com",
            "javascript:alert(1)",
            "file:///etc/passwd",
            "http://",
            "http:///path",
            "http://exa mple.com",
            "http://example.com\r\n",
            "http://exa<mple.com",
            "http://exa\"mple.com",
            "http://ex{a}mple.com",
            "http://a@b@c",
            "http://example.com/%zz",
            "http://例え.jp/",
        ]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))


class TestPhoneValidator(unittest.TestCase):
    """전화번호 검증 테스트"""

    def setUp(self):
        self.validator = PhoneValidator()

    def test_single_format(self):
        self.assertTrue(self.validator.is_valid("555-123-4567"))
        for value in ["5551234567", "555-123-45678", "(555) 123-4567", "555.123.4567", "555-123-4567\n"]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))


class TestPostalCodeValidator(unittest.TestCase):
    """우편번호 검증 테스트"""

    def setUp(self):
        self.validator = PostalCodeValidator()

    def test_formats(self):
        for value in ["K1A 0B1", "k1a-0b1", "K1A0B1"]:
            with self.subTest(value=value):
                self.assertTrue(self.validator.is_valid(value))
        for value in ["K1A  0B1", "123 456", "K1A 0B", "KKA 0B1"]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))


class TestIPValidator(unittest.TestCase):
    """IPv4 형식 검증 테스트"""

    def setUp(self):
        self.validator = IPValidator()

    def test_valid(self):
        self.assertTrue(self.validator.is_valid("192.168.0.1"))
        self.assertTrue(self.validator.is_valid("0.0.0.0"))

    def test_octet_range_not_checked(self):
        """옥텟 범위 미검증 (기존 동작 유지)"""
        self.assertTrue(self.validator.is_valid("999.999.999.999"))

    def test_invalid(self):
        for value in ["1.2.3", "1.2.3.4.5", "1234.1.1.1", "a.b.c.d", "1.2.3.4 ", "١.٢.٣.٤"]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))


class TestISBNValidator(unittest.TestCase):
    """ISBN 형식 검증 테스트"""

    def setUp(self):
        self.validator = ISBNValidator()

    def test_valid(self):
        self.assertTrue(self.validator.is_valid("123456789X"))
        self.assertTrue(self.validator.is_valid("1234567890"))
        self.assertTrue(self.validator.is_valid("1234567890123"))

    def test_no_check_digit_verification(self):
        """체크 디짓 미검증: 형식만 맞으면 통과"""
        self.assertTrue(self.validator.is_valid("0000000001"))

    def test_invalid(self):
        for value in ["12345", "123456789x", "123456789|", "123456789012X", "978-3-16-148410-0"]:
            with self.subTest(value=value):
                self.assertFalse(self.validator.is_valid(value))

    def test_get_format(self):
        self.assertEqual(self.validator.get_format("123456789X"), "ISBN-10")
        self.assertEqual(self.validator.get_format("1234567890123"), "ISBN-13")
        self.assertIsNone(self.validator.get_format("12345"))


if __name__ == "__main__":
    unittest.main()
