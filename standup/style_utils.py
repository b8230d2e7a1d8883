import streamlit as st


PALETTE = {
    "background": "#F5F1EA",
    "surface": "#FFFFFF",
    "border": "#E5DDD1",
    "text": "#2C2420",
    "muted": "#6B5D52",
    "accent": "#8B7355",
}

TASK_COLORS = {
    "accomplished": ("#F0FDF4", "#BBF7D0", "#166534"),
    "next": ("#EFF6FF", "#BFDBFE", "#1E40AF"),
    "blocker": ("#FEF2F2", "#FECACA", "#991B1B"),
}

TASK_ICONS = {"accomplished": "✅", "next": "📌", "blocker": "⚠️"}


def theme_css() -> str:
    p = PALETTE
    task_rules = "\n".join(
        f"""
            .task-card.{kind} {{
                background: {bg};
                border: 2px solid {border};
                color: {fg};
            }}"""
        for kind, (bg, border, fg) in TASK_COLORS.items()
    )
    return f"""
        <style>
        [data-testid="stAppViewContainer"] {{
            background: {p["background"]};
            color: {p["text"]};
        }}
        .block-container {{
            padding-top: 2rem !important;
        }}
        .tag {{
            display: inline-block;
            padding: 0.15rem 0.8rem;
            margin: 0 0.3rem 0.3rem 0;
            border-radius: 999px;
            background: rgba(139, 115, 85, 0.1);
            color: {p["accent"]};
            font-size: 0.85rem;
        }}
        .muted {{
            color: {p["muted"]};
            font-weight: 300;
        }}
        .task-card {{
            border-radius: 0.75rem;
            padding: 0.75rem 1rem;
            margin-bottom: 0.6rem;
        }}
        .task-card .task-date {{
            font-size: 0.75rem;
            opacity: 0.7;
        }}{task_rules}
        </style>
    """


def apply_theme():
    """Inject the app palette. Markup does not survive a rerun, so call on every run."""
    st.markdown(theme_css(), unsafe_allow_html=True)
