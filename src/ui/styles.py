"""
UI Styles module
Defines custom CSS for the Streamlit app.
Flat design; status colours follow the valuation zones of the river chart.
"""


def get_custom_css() -> str:
    """Returns the custom CSS for the application."""
    return """
<style>
    /* ========================================
       Color Tokens
       ======================================== */
    :root {
        --color-bg-secondary: #f8fafc;
        --color-text-primary: #0f172a;
        --color-text-muted: #94a3b8;
        --color-border: #e2e8f0;
        --color-cheap: #10b981;     /* emerald-500 */
        --color-fair: #f59e0b;      /* amber-500 */
        --color-expensive: #f97316; /* orange-500 */
        --color-overvalued: #ef4444;/* red-500 */
        --color-indigo: #4f46e5;
        --radius-md: 8px;
        --radius-lg: 16px;
        --shadow-sm: 0 1px 2px rgba(0,0,0,0.05);
    }

    /* ========================================
       Dashboard Cards
       ======================================== */
    .card-title {
        font-size: 1.1rem;
        font-weight: 800;
        color: var(--color-text-primary);
        margin-bottom: 0.25rem;
    }

    .card-figure {
        font-size: 2rem;
        font-weight: 900;
        font-variant-numeric: tabular-nums;
    }

    .card-caption {
        font-size: 0.75rem;
        font-weight: 700;
        color: var(--color-text-muted);
    }

    /* ========================================
       Badges
       ======================================== */
    .badge {
        display: inline-block;
        padding: 0.15rem 0.6rem;
        border-radius: 999px;
        font-size: 0.7rem;
        font-weight: 800;
        margin-right: 0.25rem;
    }
    .badge-crisis_buy { background: #059669; color: white; }
    .badge-bull_pullback { background: var(--color-indigo); color: white; }
    .badge-overheated { background: #e11d48; color: white; }
    .badge-neutral { background: #e2e8f0; color: #475569; }

    .badge-Hype { background: #fae8ff; color: #a21caf; }
    .badge-Chips { background: #fef3c7; color: #b45309; }
    .badge-Community { background: #dbeafe; color: #1d4ed8; }
    .badge-Event, .badge-Policy { background: #f1f5f9; color: #334155; }

    .keyword {
        color: var(--color-text-muted);
        font-size: 0.75rem;
        font-weight: 700;
        margin-right: 0.4rem;
    }

    /* ========================================
       Price Level Gauge (0-100)
       ======================================== */
    .gauge-labels {
        display: flex;
        justify-content: space-between;
        font-size: 0.6rem;
        font-weight: 700;
        color: var(--color-text-muted);
    }
    .gauge {
        position: relative;
        display: flex;
        height: 14px;
        border-radius: 999px;
        overflow: hidden;
        border: 1px solid var(--color-border);
    }
    .gauge-marker {
        position: absolute;
        top: 0;
        bottom: 0;
        width: 8px;
        background: #0f172a;
        border: 2px solid white;
        transform: translateX(-50%);
    }

    /* ========================================
       News sentiment
       ======================================== */
    .sentiment-positive { border-left: 4px solid var(--color-cheap); padding-left: 0.75rem; }
    .sentiment-negative { border-left: 4px solid #f43f5e; padding-left: 0.75rem; }
    .sentiment-neutral { border-left: 4px solid #cbd5e1; padding-left: 0.75rem; }

    /* ========================================
       Metric Improvements
       ======================================== */
    [data-testid="stMetricValue"] {
        font-size: 1.25rem;
        font-weight: 600;
        font-variant-numeric: tabular-nums;
    }

    [data-testid="stBaseButton-primary"] {
        background-color: #2563eb !important;
        color: white !important;
    }
</style>
"""
