"""
AI Screening Prompts
"""

STOCK_ANALYSIS_PROMPT_TEMPLATE = """你是一位精通「行為金融學」與「基本面分析」的資深投資顧問。請分析台股 "{ticker}"。
找出最新的每股淨值 (BVPS)、目前股價、幣別、歷史 PB 分位數 (25th, 50th, 75th, 90th)、連續配息年數、現金殖利率、ROE (最新與3年均)、20日均量。
chartData 請提供近年的股價與各分位數對應的河流價格 (river25/50/75/90 = 分位數 PB × 當時 BVPS)。
請以專業口吻撰寫 narrative。"""

LONG_TERM_STRATEGY_RULES = """
⚠️ 長予投資核心篩選邏輯 (必須嚴格執行)：
1. 【月線層級 - 趨勢強勢且極度收斂】：
   - 月線 MA5 與 MA20 方向皆必須向上。
   - ⚠️ 關鍵條件：均線必須呈現糾結收斂狀態。公式為：MA5 > MA20 且 (MA5 - MA20) / MA20 < 5%。
   - 若均線發散 (差距大於 5%) 則不予錄取。
2. 【日線層級 - 回測買點】：
   - 收盤價 < 過去 20 日最高價 (代表已有適度拉回)。
   - 收盤價 > 日線 20MA (生命線之上)。
   - 乖離率控制：收盤價與 20MA 的距離必須在 5% 以內。
3. 【籌碼嚴格篩選】：
   - 散戶定義：持股 < 50 張 (50,000股) 的股東。
   - ⚠️ 絕對條件：本週「持股 < 50張 的總人數」必須 小於 上週。
   - (retailCountCurrent < retailCountPrevious)。
   - 請務必排除散戶人數增加的標的。"""

SCANNER_PROMPT_TEMPLATE = """你是一位專業的台股量化選股專家。請針對 {scope} 進行全盤掃描。
{strategy}

請回傳 JSON 格式列表，並針對每一檔符合標的填寫以下說明欄位：
- monthlyTrendDesc: 簡短描述月線收斂狀態 (限 20 字內)。
- dailyPullbackDesc: 簡短描述日線拉回狀態 (限 20 字內)。
- isLongTermInvest: 必須符合上述月線收斂且日線回測之條件才標記為 true。

請提供 **{min_count}-{max_count}** 檔目前市場中最符合條件的標的 (避免回應過長導致失敗)。請務必針對每一檔檢查集保戶股權分散表，確認「持股小於50張」的人數呈現減少趨勢。"""

MARKET_STATUS_PROMPT_TEMPLATE = """請分析台股大盤及核心 ETF：[{tickers}]。重點在於季線乖離與位階。
- priceLevel: 0 (崩盤) 到 100 (過熱) 的位階。
- status: 必須為 'crisis_buy'(鑽石買點), 'bull_pullback'(多頭回檔), 'neutral'(中性), 'overheated'(過熱) 其中之一。
- deviationFromQuarterly / deviationFromYearly: 與季線 (60MA) / 年線 (240MA) 的乖離率 (%)。"""

MARKET_NEWS_PROMPT_TEMPLATE = """你是一位崇尚「題材炒作」與「資金流向」的市場消息靈通人士。你的座右銘是：「風口來了，豬都會飛。」
請搜尋**最近一個月內**台股市場最熱門的「八卦」、「題材」、「籌碼動向」與「社群熱議」話題。

任務 1: 詳細新聞清單
重點關注：
1. 新聞標題與市場情緒 (Sentiment)：誇張、聳動、具爆發力的題材。
2. 法人籌碼 (Chips)：外資、投信異常買賣超的標的。
3. 社群熱度 (Community)：PTT 股版、同學會討論度最高的股票。
4. 產業行事曆 (Event)：法說會、展覽 (如 CES)、新產品發布。
請整理出 {count} 則最符合「風口」的消息。

任務 2: 市場脈動總結 (Market Pulse)
- trendSummary: 請用一段精簡的話 (50字內)，總結目前市場的主流資金流向與整體氣氛。
- hotSectors: 請歸納出目前最熱門的 3-4 個「產業板塊」，並給予每個板塊 0-100 的熱度評分 (intensity)。

欄位說明：
- title: 聳動且吸引眼球的標題。
- summary: 像在講內線消息一樣的口吻，簡述資金流向與炒作理由 (50字內)。
- category: 必須為 'Hype'(題材), 'Chips'(籌碼), 'Community'(社群), 'Event'(行事曆), 'Policy'(政策) 其中之一。
- sentiment: positive(偏多/炒作), negative(偏空/倒貨), neutral(觀望)。
- impactLevel: high, medium, low。
- keywords: 該新聞相關的熱門關鍵字。
- relatedTickers: 相關個股代號。"""
