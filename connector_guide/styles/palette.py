"""
Design tokens shared by cards, badges and the progress bar.
"""

from typing import Dict

COLORS: Dict[str, str] = {
    "bg_elevated": "#ffffff",
    "bg_muted": "#f8fafc",
    "border": "#e2e8f0",
    "text_primary": "#0f172a",
    "text_secondary": "#475569",
    "accent": "#2563eb",
    "success": "#10b981",
    "warning": "#d97706",
    "warning_bg": "#fffbeb",
}

# Badge gradient per catalog gender (Female / Male / PCB)
GENDER_COLORS: Dict[str, str] = {
    "Female": "linear-gradient(90deg, #2563eb, #4f46e5)",
    "Male": "linear-gradient(90deg, #ea580c, #dc2626)",
    "PCB": "linear-gradient(90deg, #16a34a, #059669)",
}

DEFAULT_BADGE_COLOR = "linear-gradient(90deg, #475569, #334155)"


def gender_color(gender: str) -> str:
    return GENDER_COLORS.get(gender, DEFAULT_BADGE_COLOR)
