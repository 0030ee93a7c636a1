"""Design tokens shared by the stylesheet."""

from __future__ import annotations

from typing import Dict, Final

# Color palette
PALETTE: Final[Dict[str, str]] = {
    "bg_primary": "#0a0c10",
    "bg_secondary": "#161b22",
    "bg_hover": "rgba(255, 255, 255, 0.03)",
    "text_primary": "#d1d5db",
    "text_muted": "#7f8b9a",
    "accent_primary": "#4a7d89",
    "accent_selected": "rgba(74, 125, 137, 0.12)",
    "border_default": "#2c313a",
    "error": "#ef4444",
}
