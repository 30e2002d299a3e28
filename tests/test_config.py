"""
Unit tests for settings
"""

import os
import unittest
from unittest import mock

import pydantic

from schooldesk.config import Settings


class TestSettings(unittest.TestCase):

    def test_defaults(self):
        s = Settings(_env_file=None)
        self.assertEqual(s.enrollment_number_prefix, "EN")
        self.assertTrue(s.seed_on_start)

    def test_environment_override(self):
        with mock.patch.dict(os.environ, {"SCHOOLDESK_SEED_ON_START": "false", "SCHOOLDESK_ENROLLMENT_NUMBER_PREFIX": "ST"}):
            s = Settings(_env_file=None)
        self.assertFalse(s.seed_on_start)
        self.assertEqual(s.enrollment_number_prefix, "ST")

    def test_id_suffix_bounds(self):
        with self.assertRaises(pydantic.ValidationError):
            Settings(_env_file=None, id_suffix_length=3)


if __name__ == '__main__':
    unittest.main()
