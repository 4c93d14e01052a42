"""Tests for monthly series synthesis"""

import random
import re
from datetime import date

import orjson
import pytest

from fortune_app.config.defaults import SynthesisParams
from fortune_app.data.models import Period
from fortune_app.rendering.base import ChartPayload
from fortune_app.synthesis.random_source import FixedRandomSource, SequenceRandomSource
from fortune_app.synthesis.synthesizer import SeriesSynthesizer, round_value
from fortune_app.zodiac.cycle import ZodiacSign

START = Period(2026, 2)
END = Period(2036, 2)


class TestRoundValue:
    """Test one-decimal output rounding"""

    def test_rounds_to_one_decimal(self):
        assert round_value(49.1749) == 49.2
        assert round_value(49.14) == 49.1

    def test_exact_half_rounds_up(self):
        """Exactly representable ties go up like fixed-point formatting"""
        assert round_value(50.25) == 50.3
        assert round_value(0.75) == 0.8

    def test_precision(self):
        assert round_value(12.345678, 3) == 12.346
        assert round_value(12.5, 0) == 13.0


class TestSpan:
    """Test period enumeration"""

    def test_ten_year_span_length(self, synthesizer):
        """2026-02 through 2036-02 inclusive is 121 months"""
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)
        assert len(series) == 121

    def test_labels_strictly_increasing(self, synthesizer):
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)
        labels = series.labels
        assert labels[0] == "2026-02"
        assert labels[-1] == "2036-02"
        assert all(re.fullmatch(r"\d{4}-\d{2}", label) for label in labels)
        assert labels == sorted(labels)
        assert len(set(labels)) == len(labels)

    def test_dates_reduced_to_month(self, synthesizer):
        """Start day-of-month does not change the enumeration"""
        series = synthesizer.synthesize(date(2026, 2, 16), date(2036, 2, 16), ZodiacSign.HORSE)
        assert len(series) == 121
        assert series.labels[0] == "2026-02"

    def test_single_month_span(self, synthesizer):
        series = synthesizer.synthesize(START, START, ZodiacSign.HORSE)
        assert len(series) == 1

    def test_inverted_span_is_empty(self, synthesizer):
        series = synthesizer.synthesize(END, START, ZodiacSign.HORSE)
        assert series.is_empty
        assert len(series) == 0
        assert series.labels == []


class TestSampleProperties:
    """Test continuity and bounds across random walks"""

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 2026, 99999])
    @pytest.mark.parametrize("sign", [ZodiacSign.HORSE, ZodiacSign.RAT, ZodiacSign.DRAGON])
    def test_continuity_and_bounds(self, seed, sign):
        synthesizer = SeriesSynthesizer(random_source=random.Random(seed))
        series = synthesizer.synthesize(START, END, sign)

        for prev, curr in zip(series, series[1:]):
            assert curr.open == prev.close

        for sample in series:
            assert 10.0 <= sample.close <= 90.0
            assert 0.0 <= sample.low <= sample.high <= 100.0
            assert sample.low <= min(sample.open, sample.close)
            assert sample.high >= max(sample.open, sample.close)

    def test_first_open_is_baseline(self, synthesizer):
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)
        assert series[0].open == 50.0

    def test_custom_initial_price(self, fixed_source):
        synthesizer = SeriesSynthesizer(random_source=fixed_source,
                                        params=SynthesisParams(initial_price=30.0))
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)
        assert series[0].open == 30.0

    def test_one_decimal_precision(self):
        series = SeriesSynthesizer(random_source=random.Random(3)).synthesize(START, END, ZodiacSign.OX)
        for sample in series:
            for value in sample.as_values():
                assert value == round(value, 1)


class TestPerPeriodProcedure:
    """Test the per-month computation with controlled random values"""

    def test_midpoint_draw_moves_by_trend_only(self, synthesizer):
        """A 0.5 draw cancels the random step, leaving the sine trend"""
        series = synthesizer.synthesize(START, START, ZodiacSign.HORSE)
        expected_close = 50.0 + synthesizer.trend(START)
        assert series[0].close == round_value(expected_close)

    def test_wicks_use_high_volatility_in_self_year(self, synthesizer):
        """Wick spread is rand * 15 * 0.8 = 6 in a Horse year for a Horse subject"""
        close = 50.0 + synthesizer.trend(START)
        series = synthesizer.synthesize(START, START, ZodiacSign.HORSE)
        assert series[0].high == round_value(max(50.0, close) + 6.0)
        assert series[0].low == round_value(min(50.0, close) - 6.0)

    def test_wicks_use_low_volatility_in_ordinary_year(self):
        """Tiger subject in a Horse year: spread is 0.5 * 5 * 0.8 = 2"""
        synthesizer = SeriesSynthesizer(random_source=FixedRandomSource(0.5))
        close = 50.0 + synthesizer.trend(START)
        series = synthesizer.synthesize(START, START, ZodiacSign.TIGER)
        assert series[0].high == round_value(max(50.0, close) + 2.0)
        assert series[0].low == round_value(min(50.0, close) - 2.0)

    def test_random_draw_order(self):
        """Draws are consumed as delta, high wick, low wick"""
        source = SequenceRandomSource([0.5, 0.0, 0.9])
        synthesizer = SeriesSynthesizer(random_source=source)
        close = 50.0 + synthesizer.trend(START)
        series = synthesizer.synthesize(START, START, ZodiacSign.HORSE)

        assert source.calls == 3
        assert series[0].high == round_value(max(50.0, close))
        assert series[0].low == round_value(min(50.0, close) - 0.9 * 15 * 0.8)

    def test_three_draws_per_month(self, synthesizer, fixed_source):
        synthesizer.synthesize(START, END, ZodiacSign.HORSE)
        assert fixed_source.calls == 3 * 121

    def test_trend_amplitude(self, synthesizer):
        for offset in range(121):
            assert abs(synthesizer.trend(START.shift(offset))) <= 2.0


class TestClamping:
    """Test the close band and the wick range"""

    def test_close_pins_at_ceiling(self):
        """Near-one draws push the walk up to the close ceiling, never beyond"""
        synthesizer = SeriesSynthesizer(random_source=FixedRandomSource(0.999999))
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)

        closes = [s.close for s in series]
        assert max(closes) == 90.0
        assert all(c <= 90.0 for c in closes)

    def test_high_wick_clamped_to_value_ceiling(self):
        """At the ceiling a 15-point year wick would pass 100 and is clamped"""
        synthesizer = SeriesSynthesizer(random_source=FixedRandomSource(0.999999))
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)

        assert max(s.high for s in series) == 100.0

    def test_close_pins_at_floor(self):
        """Zero draws push the walk down to the close floor, never below"""
        synthesizer = SeriesSynthesizer(random_source=FixedRandomSource(0.0))
        series = synthesizer.synthesize(START, END, ZodiacSign.HORSE)

        closes = [s.close for s in series]
        assert min(closes) == 10.0
        assert all(c >= 10.0 for c in closes)
        # Zero wick draw leaves low at the body
        assert all(s.low == min(s.open, s.close) for s in series)


class TestDeterminism:
    """Test reproducibility with an injected source"""

    def test_constant_source_is_byte_identical(self):
        first = SeriesSynthesizer(random_source=FixedRandomSource(0.37)).synthesize(START, END, ZodiacSign.HORSE)
        second = SeriesSynthesizer(random_source=FixedRandomSource(0.37)).synthesize(START, END, ZodiacSign.HORSE)

        assert first == second
        assert (orjson.dumps(ChartPayload.from_series(first).to_dict())
                == orjson.dumps(ChartPayload.from_series(second).to_dict()))

    def test_seeded_sources_repeat(self):
        first = SeriesSynthesizer(random_source=random.Random(5)).synthesize(START, END, ZodiacSign.PIG)
        second = SeriesSynthesizer(random_source=random.Random(5)).synthesize(START, END, ZodiacSign.PIG)
        assert first == second


class TestFromConfig:
    """Test building from merged configuration"""

    def test_from_config_applies_sections(self, fixed_source):
        config = {
            "synthesis": {"initial_price": 40.0, "high_volatility": 20.0},
            "zodiac": {"anchor_year": 2020, "anchor_sign": "Rat"},
        }
        synthesizer = SeriesSynthesizer.from_config(config, fixed_source)

        assert synthesizer.params.initial_price == 40.0
        assert synthesizer.policy.high_magnitude == 20.0
        assert synthesizer.cycle.sign_of(2026) is ZodiacSign.HORSE
