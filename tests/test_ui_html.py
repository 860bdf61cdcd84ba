"""
頁面 HTML 片段的測試
模型回傳的文字必須跳脫後才能放進 unsafe_allow_html 的內容。
"""
from src.ui.dashboard_tab import _market_summary_html
from src.ui.news_tab import _keywords_html, _news_meta_html
from src.ui.scanner_tab import _build_table


class TestMarketSummaryHtml:
    """_market_summary_html 函式的測試"""

    def test_escapes_name_and_signal(self, market_row):
        market_row["name"] = "<b>台灣50</b>"
        market_row["signal"] = "買進 & <script>alert(1)</script>"
        html = _market_summary_html([market_row])
        assert "<b>" not in html
        assert "<script>" not in html
        assert "&lt;b&gt;台灣50&lt;/b&gt;" in html
        assert "買進 &amp; &lt;script&gt;" in html
        assert 'class="badge badge-bull_pullback"' in html

    def test_empty_results(self):
        assert "數據分析完成" in _market_summary_html([])


class TestNewsHtml:
    """新聞卡片 HTML 片段的測試"""

    def test_escapes_keywords_and_tickers(self, news_payload):
        item = news_payload["news"][0]
        item["keywords"] = ["<img src=x onerror=alert(1)>", "A&B"]
        item["relatedTickers"] = ["2330</span>"]
        html = _keywords_html(item)
        assert "<img" not in html
        assert "#&lt;img src=x onerror=alert(1)&gt;" in html
        assert "#A&amp;B" in html
        assert "2330&lt;/span&gt;" in html

    def test_no_related_tickers(self, news_payload):
        item = news_payload["news"][0]
        item["relatedTickers"] = []
        assert "📌" not in _keywords_html(item)

    def test_meta_uses_validated_classes(self, news_payload):
        html = _news_meta_html(news_payload["news"][0])
        assert 'class="sentiment-positive"' in html
        assert 'class="badge badge-Hype"' in html
        assert "題材炒作" in html
        assert "影響 high" in html


class TestScannerTable:
    """_build_table 函式的測試"""

    def test_missing_numbers_shown_as_na(self, scanner_row):
        gap_row = {**scanner_row, "roe": None, "dividendYield": None, "consecutiveYears": 10.5}
        df = _build_table([scanner_row, gap_row])
        assert list(df["ROE"]) == ["12.5%", "N/A"]
        assert list(df["殖利率"]) == ["5.10%", "N/A"]
        assert list(df["連續配息"]) == ["10 年", "10 年"]
