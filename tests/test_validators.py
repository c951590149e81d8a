import unittest

from cryo_webhooks.utils.validators import (
    Submission,
    is_valid_name,
    is_valid_email,
    is_valid_phone_number,
    validate_submission,
)


class TestIsValidName(unittest.TestCase):
    def test_two_words(self):
        self.assertTrue(is_valid_name('John Smith'))

    def test_extra_whitespace_between_words(self):
        self.assertTrue(is_valid_name('  Mary   Jane \t Doe  '))

    def test_single_word(self):
        self.assertFalse(is_valid_name('John'))
        self.assertFalse(is_valid_name('   '))

    def test_digits_and_punctuation(self):
        for name in ['John Sm1th', "John O'Brien", 'John-Paul Smith', 'John Smith!', 'J. Smith']:
            with self.subTest(name=name):
                self.assertFalse(is_valid_name(name))

    def test_non_string_input(self):
        for value in [None, 42, ['John', 'Smith'], {'name': 'John Smith'}]:
            with self.subTest(value=value):
                self.assertFalse(is_valid_name(value))

    def test_max_words(self):
        self.assertTrue(is_valid_name('Ana Maria Lopez', max_words=3))
        self.assertFalse(is_valid_name('Ana Maria Lopez Garcia', max_words=3))
        self.assertTrue(is_valid_name('Ana Maria Lopez Garcia'))

    def test_min_words(self):
        self.assertTrue(is_valid_name('Cher', min_words=1))
        self.assertFalse(is_valid_name('John Smith', min_words=3))


class TestIsValidEmail(unittest.TestCase):
    def test_valid(self):
        self.assertTrue(is_valid_email('a@b.com'))
        self.assertTrue(is_valid_email('  jane.doe+spa@mail.example.org  '))

    def test_invalid(self):
        for email in ['a@b', 'ab.com', 'a b@c.com', 'a@@b.com', '@b.com', 'a@b.', '']:
            with self.subTest(email=email):
                self.assertFalse(is_valid_email(email))

    def test_non_string_input(self):
        self.assertFalse(is_valid_email(42))
        self.assertFalse(is_valid_email(None))


class TestIsValidPhoneNumber(unittest.TestCase):
    def test_international_format(self):
        self.assertTrue(is_valid_phone_number('+1 650 253 0000'))
        self.assertTrue(is_valid_phone_number('+16502530000', region='ZM'))

    def test_region_hint_for_local_numbers(self):
        self.assertTrue(is_valid_phone_number('(650) 253-0000', region='US'))
        self.assertFalse(is_valid_phone_number('(650) 253-0000'))

    def test_invalid_numbers(self):
        self.assertFalse(is_valid_phone_number('+1 123', region='US'))
        self.assertFalse(is_valid_phone_number('12345', region='ZM'))

    def test_parse_errors_are_not_raised(self):
        self.assertFalse(is_valid_phone_number('not a phone', region='ZM'))
        self.assertFalse(is_valid_phone_number('', region='ZM'))

    def test_non_string_input(self):
        self.assertFalse(is_valid_phone_number(6502530000))
        self.assertFalse(is_valid_phone_number(None))


class TestValidateSubmission(unittest.TestCase):
    def test_all_valid(self):
        result = validate_submission(Submission('John Smith', 'john@example.com', '+1 650 253 0000'))
        self.assertTrue(result.is_valid)
        self.assertEqual(result.invalid_fields, ())

    def test_reports_only_failed_fields_in_order(self):
        result = validate_submission(Submission('J0hn', 'john@example.com', '123'), phone_region='ZM')
        self.assertFalse(result.is_valid)
        self.assertFalse(result.name_valid)
        self.assertTrue(result.email_valid)
        self.assertFalse(result.phone_valid)
        self.assertEqual(result.invalid_fields, ('name', 'phone'))

    def test_result_is_immutable(self):
        result = validate_submission(Submission('John', 'john@example.com', '+1 650 253 0000'))
        self.assertIsInstance(result.invalid_fields, tuple)
        with self.assertRaises(AttributeError):
            result.invalid_fields.append('email')

    def test_submission_completeness(self):
        self.assertTrue(Submission('John Smith', 'a@b.com', '+1').is_complete())
        self.assertFalse(Submission('John Smith', ' ', '+1').is_complete())


if __name__ == '__main__':
    unittest.main()
