#!/usr/bin/env python3
import unittest
from datetime import datetime, timezone

from relay.utils import (
    format_amount,
    format_date,
    format_duration,
    format_event_type,
    format_rfc3339,
    safe_rfc3339,
)


class TestFormatDate(unittest.TestCase):
    def test_adapty_layout_with_microseconds_and_offset(self):
        self.assertEqual(format_date("2024-01-15T10:30:00.123456+0000"), "Jan 15, 2024 10:30 UTC")

    def test_rfc3339_layout(self):
        self.assertEqual(format_date("2024-01-15T10:30:00Z"), "Jan 15, 2024 10:30 UTC")
        self.assertEqual(format_date("2024-03-05T08:05:00+00:00"), "Mar 5, 2024 08:05 UTC")

    def test_non_utc_offset_is_converted_to_utc(self):
        self.assertEqual(format_date("2024-03-05T08:05:00+03:00"), "Mar 5, 2024 05:05 UTC")
        self.assertEqual(format_date("2024-01-15T23:30:00.000000-0200"), "Jan 16, 2024 01:30 UTC")

    def test_unparseable_value_is_returned_verbatim(self):
        for value in ["not a date", "2024-01-15", "15/01/2024 10:30"]:
            self.assertEqual(format_date(value), value)

    def test_empty_values_pass_through(self):
        self.assertIsNone(format_date(None))
        self.assertEqual(format_date(""), "")


class TestFormatEventType(unittest.TestCase):
    def test_known_event_types(self):
        self.assertEqual(format_event_type("subscription_started"), "Subscription Started")
        self.assertEqual(format_event_type("non_subscription_purchase"), "One-time Purchase")

    def test_unknown_event_type_is_title_cased(self):
        self.assertEqual(format_event_type("custom_event_name"), "Custom Event Name")
        self.assertEqual(format_event_type("isolated"), "Isolated")


class TestFormatDuration(unittest.TestCase):
    def test_magnitudes(self):
        start = 1700000000
        cases = [
            (0, "now"),
            (1, "1 second"),
            (45, "45 seconds"),
            (90, "1 minute"),
            (10 * 60, "10 minutes"),
            (3600, "1 hour"),
            (3 * 3600, "3 hours"),
            (30 * 3600, "1 day"),
            (3 * 86400, "3 days"),
            (10 * 86400, "1 week"),
            (20 * 86400, "2 weeks"),
            (45 * 86400, "1 month"),
            (100 * 86400, "3 months"),
            (400 * 86400, "1 year"),
            (600 * 86400, "2 years"),
            (1500 * 86400, "4 years"),
        ]
        for delta, expected in cases:
            self.assertEqual(format_duration(start, start + delta), expected, f"delta={delta}")

    def test_accepts_datetimes(self):
        start = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
        end = datetime(2024, 1, 1, 13, 0, tzinfo=timezone.utc)
        self.assertEqual(format_duration(start, end), "3 hours")


class TestSmallHelpers(unittest.TestCase):
    def test_format_rfc3339(self):
        self.assertEqual(format_rfc3339(1700000000), "2023-11-14T22:13:20Z")

    def test_safe_rfc3339_rejects_out_of_range_epochs(self):
        self.assertEqual(safe_rfc3339(1700000000), "2023-11-14T22:13:20Z")
        self.assertIsNone(safe_rfc3339(10 ** 15))
        self.assertIsNone(safe_rfc3339(-(10 ** 15)))

    def test_format_amount(self):
        self.assertEqual(format_amount(4.99, "USD"), "4.99 USD")
        self.assertEqual(format_amount("10", None), "10.00")
        self.assertIsNone(format_amount("abc", "USD"))


if __name__ == '__main__':
    unittest.main()
