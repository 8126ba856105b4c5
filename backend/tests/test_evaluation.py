"""Tests for the as-of evaluation loop and the indicator service."""

import random

import pytest

from candlechart.schemas.market import PriceSeries
from candlechart.services.indicators import (
    IndicatorService,
    build_snapshot,
    evaluate,
    get_indicator_service,
)
from candlechart.services.indicators.calculations import ema, rsi, sma


class TestEvaluate:
    def test_empty_series(self):
        result = evaluate("AAPL", [])
        assert result.symbol == "AAPL"
        assert result.data == []

    def test_one_record_per_bar(self, rising_bars):
        result = evaluate("AAPL", rising_bars)
        assert len(result.data) == 30
        assert [r.bar for r in result.data] == rising_bars

    def test_sma_at_twentieth_bar(self, rising_bars):
        result = evaluate("AAPL", rising_bars)
        assert result.data[19].indicators.sma_20 == 10.5
        assert result.data[18].indicators.sma_20 is None

    def test_warm_up_per_indicator(self, rising_bars):
        data = evaluate("AAPL", rising_bars).data

        first = {}
        for name in ("sma_20", "ema_20", "bollinger_bands", "macd", "rsi"):
            first[name] = next(
                i for i, r in enumerate(data) if getattr(r.indicators, name) is not None
            )

        assert first["sma_20"] == 19
        assert first["ema_20"] == 19
        assert first["bollinger_bands"] == 19
        assert first["macd"] == 25
        # Gated at 14 closes, but RSI itself needs 15
        assert first["rsi"] == 14

    def test_indicators_stay_populated_after_warm_up(self, rising_bars):
        data = evaluate("AAPL", rising_bars).data
        for record in data[25:]:
            ind = record.indicators
            assert ind.sma_20 is not None
            assert ind.ema_20 is not None
            assert ind.bollinger_bands is not None
            assert ind.macd is not None
            assert ind.rsi == 100.0

    def test_macd_signal_degenerate(self, bar_factory, mixed_closes):
        data = evaluate("AAPL", bar_factory(mixed_closes)).data
        for record in data[25:]:
            assert record.indicators.macd.signal is None
            assert record.indicators.macd.histogram == record.indicators.macd.macd

    def test_sorts_out_of_order_bars(self, bar_factory, mixed_closes):
        bars = bar_factory(mixed_closes)
        shuffled = bars[:]
        random.Random(7).shuffle(shuffled)

        result = evaluate("AAPL", shuffled)

        assert [r.bar for r in result.data] == bars
        assert result == evaluate("AAPL", bars)

    def test_no_look_ahead(self, bar_factory, mixed_closes):
        # Changing later bars must not change earlier snapshots
        full = evaluate("AAPL", bar_factory(mixed_closes)).data
        altered = mixed_closes[:30] + [1.0] * 10
        partial = evaluate("AAPL", bar_factory(altered)).data

        assert [r.indicators for r in full[:30]] == [r.indicators for r in partial[:30]]
        assert full[35].indicators != partial[35].indicators

    def test_snapshot_matches_direct_calculation(self, bar_factory, mixed_closes):
        data = evaluate("AAPL", bar_factory(mixed_closes)).data
        for i in (19, 27, 39):
            prefix = mixed_closes[: i + 1]
            ind = data[i].indicators
            assert ind.sma_20 == sma(prefix, 20)
            assert ind.ema_20 == ema(prefix, 20)
            assert ind.rsi == rsi(prefix, 14)
            assert ind.bollinger_bands.middle == ind.sma_20


class TestBuildSnapshot:
    def test_short_prefix_is_empty(self):
        snapshot = build_snapshot([1.0, 2.0, 3.0])
        assert snapshot.model_dump(exclude_none=True) == {}

    def test_zero_values_are_not_absent(self):
        # Flat prices give a real MACD of ~0, distinct from "not computed"
        snapshot = build_snapshot([10.0] * 26)
        assert snapshot.macd is not None
        assert snapshot.macd.macd == pytest.approx(0.0)


class TestIndicatorService:
    @pytest.mark.asyncio
    async def test_execute(self, rising_bars):
        service = IndicatorService()
        result = await service.execute(PriceSeries(symbol="AAPL", bars=rising_bars))
        assert result == evaluate("AAPL", rising_bars)

    @pytest.mark.asyncio
    async def test_health_check(self):
        assert await IndicatorService().health_check() is True

    def test_singleton(self):
        assert get_indicator_service() is get_indicator_service()
