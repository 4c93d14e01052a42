"""Tests for first-year summary classification"""

import pytest

from fortune_app.data.models import Series
from fortune_app.summary.deriver import SummaryDeriver, TrendDirection
from fortune_app.zodiac.cycle import ZodiacSign
from fortune_app.zodiac.volatility import YearRelation


class TestTrendClassification:
    """Test rising/settling detection over the first twelve samples"""

    def test_rising(self, series_factory):
        series = series_factory([51, 52, 53, 54, 55, 56, 57, 58, 59, 60, 61, 62, 10])
        summary = SummaryDeriver().derive(series, ZodiacSign.OX, ZodiacSign.HORSE)

        assert summary.trend is TrendDirection.RISING
        assert summary.start_value == 50.0
        assert summary.end_value == 62

    def test_settling(self, series_factory):
        series = series_factory([49] * 12 + [90])
        summary = SummaryDeriver().derive(series, ZodiacSign.OX, ZodiacSign.HORSE)
        assert summary.trend is TrendDirection.SETTLING

    def test_equal_is_settling(self, series_factory):
        """Only a strictly higher twelfth close counts as rising"""
        series = series_factory([55, 45] * 5 + [55, 50])
        summary = SummaryDeriver().derive(series, ZodiacSign.OX, ZodiacSign.HORSE)
        assert summary.trend is TrendDirection.SETTLING

    def test_uses_twelfth_sample_only(self, series_factory):
        """Later samples do not affect the first-year trend"""
        series = series_factory([40] * 11 + [51] + [10] * 20)
        summary = SummaryDeriver().derive(series, ZodiacSign.OX, ZodiacSign.HORSE)
        assert summary.trend is TrendDirection.RISING

    def test_empty_series_is_insufficient(self):
        summary = SummaryDeriver().derive(Series(), ZodiacSign.HORSE, ZodiacSign.HORSE)

        assert summary.trend is TrendDirection.INSUFFICIENT_DATA
        assert summary.start_value is None
        assert summary.end_value is None

    def test_short_series_is_insufficient(self, series_factory):
        series = series_factory([60] * 11)
        summary = SummaryDeriver().derive(series, ZodiacSign.HORSE, ZodiacSign.HORSE)
        assert summary.trend is TrendDirection.INSUFFICIENT_DATA

    def test_custom_window(self, series_factory):
        series = series_factory([60, 40, 70])
        summary = SummaryDeriver(window=3).derive(series, ZodiacSign.HORSE, ZodiacSign.HORSE)
        assert summary.trend is TrendDirection.RISING

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            SummaryDeriver(window=0)


class TestYearRelation:
    """Test relation of the subject to the span's first year"""

    @pytest.mark.parametrize("user_sign,relation", [
        (ZodiacSign.HORSE, YearRelation.SELF_YEAR),
        (ZodiacSign.RAT, YearRelation.OPPOSITION_YEAR),
        (ZodiacSign.DOG, YearRelation.ORDINARY),
        (ZodiacSign.GOAT, YearRelation.ORDINARY),
    ])
    def test_relation(self, user_sign, relation):
        summary = SummaryDeriver().derive(Series(), user_sign, ZodiacSign.HORSE)
        assert summary.relation is relation
        assert summary.user_sign is user_sign
        assert summary.year_sign is ZodiacSign.HORSE
