import re
import unittest
from decimal import Decimal

from stock_tracker.schemas.quote import RawQuote
from stock_tracker.services.quote_format import (
    format_change_percent,
    format_fixed2,
    format_volume,
    normalize_quote,
)

CHANGE_PERCENT_PATTERN = re.compile(r"^[+-]\d+\.\d{2}%$")


class TestFormatFixed2(unittest.TestCase):
    def test_two_decimal_rendering(self):
        self.assertEqual(format_fixed2(168.97), "168.97")
        self.assertEqual(format_fixed2(168.2), "168.20")
        self.assertEqual(format_fixed2(5), "5.00")
        self.assertEqual(format_fixed2(-1.5), "-1.50")

    def test_exact_ties_round_away_from_zero(self):
        self.assertEqual(format_fixed2(0.125), "0.13")
        self.assertEqual(format_fixed2(-0.125), "-0.13")

    def test_rounding_follows_the_binary_value(self):
        # 2.675 is stored slightly below the tie
        self.assertEqual(format_fixed2(2.675), "2.67")

    def test_negative_zero_renders_unsigned(self):
        self.assertEqual(format_fixed2(-0.0), "0.00")

    def test_magnitudes_beyond_default_decimal_precision(self):
        for value in (1e26, -1e26, 1.7976931348623157e308):
            with self.subTest(value=value):
                text = format_fixed2(value)
                self.assertTrue(text.endswith(".00"))
                self.assertEqual(Decimal(text), Decimal(value))

    def test_reformatting_is_idempotent(self):
        for value in (0.0, 0.004, 0.005, 1.0, 99.995, 168.9700, 1234.5678, 100000.1):
            with self.subTest(value=value):
                once = format_fixed2(value)
                self.assertEqual(format_fixed2(float(once)), once)


class TestFormatChangePercent(unittest.TestCase):
    def test_positive_value_gets_plus_sign(self):
        self.assertEqual(format_change_percent(1.0889), "+1.09%")

    def test_negative_value_keeps_minus_sign(self):
        self.assertEqual(format_change_percent(-2.3456), "-2.35%")

    def test_zero_is_non_negative(self):
        self.assertEqual(format_change_percent(0.0), "+0.00%")
        self.assertEqual(format_change_percent(-0.0), "+0.00%")

    def test_tiny_negative_matches_pattern(self):
        self.assertEqual(format_change_percent(-0.001), "-0.00%")

    def test_output_always_matches_pattern(self):
        for value in (0.0, 0.5, -0.5, 12.3456, -99.999, 150.0):
            with self.subTest(value=value):
                self.assertRegex(format_change_percent(value), CHANGE_PERCENT_PATTERN)


class TestFormatVolume(unittest.TestCase):
    def test_digit_grouping(self):
        self.assertEqual(format_volume(3422109), "3,422,109")
        self.assertEqual(format_volume(999), "999")
        self.assertEqual(format_volume(0), "0")


class TestNormalizeQuote(unittest.TestCase):
    def test_builds_contract_fields(self):
        raw = RawQuote.model_validate(
            {
                "01. symbol": "IBM",
                "02. open": "168.2000",
                "03. high": "169.5100",
                "04. low": "167.7500",
                "05. price": "168.9700",
                "06. volume": "3422109",
                "07. latest trading day": "2024-05-10",
                "09. change": "-1.8200",
                "10. change percent": "-1.0889%",
            }
        )

        body = normalize_quote(raw).model_dump(by_alias=True)

        self.assertEqual(
            body,
            {
                "symbol": "IBM",
                "name": "IBM Corporation",
                "price": "168.97",
                "change": "-1.82",
                "changePercent": "-1.09%",
                "volume": "3,422,109",
                "high": "169.51",
                "low": "167.75",
                "open": "168.20",
                "lastUpdated": "2024-05-10",
            },
        )


if __name__ == "__main__":
    unittest.main()
