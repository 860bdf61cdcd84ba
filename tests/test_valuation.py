"""
valuation 模組的測試
"""
import copy
import math

import pytest

from src.valuation import classify_valuation, compute_current_pb, enrich_analysis, score_safety


class TestComputeCurrentPb:
    """compute_current_pb 函式的測試"""

    def test_price_over_bvps(self):
        assert compute_current_pb(100.0, 100.0) == pytest.approx(1.0)
        assert compute_current_pb(30.0, 20.0) == pytest.approx(1.5)

    def test_zero_bvps_is_infinite(self):
        assert compute_current_pb(10.0, 0) == math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(compute_current_pb(0.0, 0))

    def test_missing_bvps_is_nan(self):
        assert math.isnan(compute_current_pb(10.0, None))

    def test_missing_price_is_nan(self):
        assert math.isnan(compute_current_pb(None, 10.0))


class TestClassifyValuation:
    """classify_valuation 函式的測試（皆為嚴格小於）"""

    @pytest.mark.parametrize("pb, expected", [
        (0.8, "cheap"),
        (1.0, "fair"),
        (1.3, "fair"),
        (1.4, "expensive"),
        (1.5, "expensive"),
        (1.6, "overvalued"),
        (3.0, "overvalued"),
    ])
    def test_boundaries(self, pb, expected):
        assert classify_valuation(pb, 1.0, 1.4, 1.6) == expected

    def test_infinite_pb_is_overvalued(self):
        assert classify_valuation(math.inf, 1.0, 1.4, 1.6) == "overvalued"

    def test_nan_pb_is_overvalued(self):
        assert classify_valuation(math.nan, 1.0, 1.4, 1.6) == "overvalued"


class TestScoreSafety:
    """score_safety 函式的測試"""

    def test_high_via_three_year_roe(self):
        stock = {"consecutiveDividendYears": 5, "roe": 3, "avgRoe3Y": 9}
        assert score_safety(stock) == "high"

    def test_high_via_roe(self):
        stock = {"consecutiveDividendYears": 8, "roe": 4.5, "avgRoe3Y": None}
        assert score_safety(stock) == "high"

    def test_low_when_dividend_history_short(self):
        stock = {"consecutiveDividendYears": 4, "roe": 10, "avgRoe3Y": 20}
        assert score_safety(stock) == "low"

    def test_low_when_roe_weak(self):
        stock = {"consecutiveDividendYears": 10, "roe": 4, "avgRoe3Y": 8}
        assert score_safety(stock) == "low"

    def test_missing_fields_count_as_zero(self):
        assert score_safety({"roe": 12}) == "low"


class TestEnrichAnalysis:
    """enrich_analysis 函式的測試"""

    def test_adds_derived_fields(self, analysis_payload):
        result = enrich_analysis(analysis_payload)
        assert result["currentPB"] == pytest.approx(0.8)
        assert result["status"] == "cheap"
        assert result["safetyScore"] == "high"
        assert result["chartData"] == analysis_payload["chartData"]

    def test_price_equal_to_bvps_is_fair(self, analysis_payload):
        analysis_payload["stock"]["currentPrice"] = 100.0
        result = enrich_analysis(analysis_payload)
        assert result["currentPB"] == pytest.approx(1.0)
        assert result["status"] == "fair"

    def test_zero_bvps_is_overvalued(self, analysis_payload):
        analysis_payload["stock"]["bvps"] = 0
        result = enrich_analysis(analysis_payload)
        assert result["status"] == "overvalued"

    def test_does_not_mutate_input(self, analysis_payload):
        before = copy.deepcopy(analysis_payload)
        enrich_analysis(analysis_payload)
        assert analysis_payload == before
