"""Dark theme stylesheet for the Sketchbook windows."""

from gui.design_tokens import PALETTE

COLORS = {
    'background': PALETTE['bg_primary'],
    'card': PALETTE['bg_secondary'],
    'border': PALETTE['border_default'],
    'text': PALETTE['text_primary'],
    'muted': PALETTE['text_muted'],
    'accent': PALETTE['accent_primary'],
    'hover': PALETTE['bg_hover'],
    'selected': PALETTE['accent_selected'],
    'danger': PALETTE['error'],
}

DARK_THEME_STYLESHEET = f"""
QWidget {{
    background-color: {COLORS['background']};
    color: {COLORS['text']};
    font-size: 14px;
}}

QLineEdit#searchField {{
    background-color: {COLORS['card']};
    border: 1px solid {COLORS['border']};
    border-radius: 6px;
    padding: 6px 10px;
}}

QListWidget#sketchList {{
    background-color: {COLORS['card']};
    border: 1px solid {COLORS['border']};
    border-radius: 6px;
}}

QListWidget#sketchList::item {{
    padding: 10px 12px;
    border-bottom: 1px solid {COLORS['border']};
}}

QListWidget#sketchList::item:hover {{
    background-color: {COLORS['hover']};
}}

QListWidget#sketchList::item:selected {{
    background-color: {COLORS['selected']};
    color: {COLORS['text']};
}}

QLabel#countLabel:disabled {{
    color: {COLORS['muted']};
    font-size: 13px;
}}

QPushButton#primaryAction {{
    background-color: {COLORS['accent']};
    border: none;
    border-radius: 6px;
    padding: 6px 14px;
}}

QPushButton#dangerAction {{
    background-color: transparent;
    color: {COLORS['danger']};
    border: 1px solid {COLORS['border']};
    border-radius: 6px;
    padding: 6px 14px;
}}

QPushButton#dangerAction:disabled {{
    color: {COLORS['muted']};
}}

QPlainTextEdit#codeEditor {{
    background-color: {COLORS['card']};
    font-family: 'Menlo', 'Consolas', monospace;
    font-size: 13px;
}}
"""


def get_stylesheet() -> str:
    """Return the application stylesheet."""
    return DARK_THEME_STYLESHEET
