"""
UI/view constants centralized for reuse across view modules.

Only presentation values live here; behavioural settings (scroll clearance,
settle delay, feature flags) come from settings.json via `ViewerConfig`.
"""

from __future__ import annotations

WINDOW_TITLE: str = "Portfolio"
BRAND_TEXT: str = "AMBER PROTO"
INDEX_TEXT: str = "INDEX"

# Status page texts
LOADING_TEXT: str = "LOADING..."
EMPTY_TEXT: str = "NO PROJECTS FOUND"
FAILED_TEXT: str = "COULD NOT LOAD PROJECTS"
RETRY_TEXT: str = "RETRY"

# Overlay texts
CLOSE_TEXT: str = "CLOSE"
CONTACT_SHEET_TEXT: str = "CONTACT SHEET"
END_OF_PROJECT_TEXT: str = "END OF PROJECT"
SCROLL_HINT_TEXT: str = "SCROLL TO EXPLORE"
ALL_FILTER_TEXT: str = "ALL"
LOCATION_FILTER_TEXT: str = "BY LOCATION"

# Colors
BACKGROUND: str = "#0a0a0a"
FOREGROUND: str = "#ffffff"
MUTED: str = "rgba(255,255,255,0.4)"
DIVIDER: str = "rgba(255,255,255,0.15)"
HIGHLIGHT_COLOR: str = "#ffd27a"

# Geometry
HERO_MIN_HEIGHT: int = 560
LIST_MAX_WIDTH: int = 1200
ROW_PREVIEW_COUNT: int = 4
ROW_PREVIEW_SIDE: int = 72
DETAIL_IMAGE_WIDTH_RATIO: float = 0.8
DETAIL_IMAGE_MAX_WIDTH: int = 1000
DETAIL_IMAGE_SPACING: int = 100
CONTACT_SHEET_COLUMNS: int = 6
CONTACT_SHEET_SPACING: int = 8
NAV_MENU_WIDTH: int = 320
PARALLAX_FACTOR: float = 0.4
HIGHLIGHT_BLUR_RADIUS: int = 48
WINDOW_SIZE_RATIO: float = 0.7

BASE_STYLESHEET: str = f"""
QWidget {{ background-color: {BACKGROUND}; color: {FOREGROUND};
           font-family: 'Helvetica Neue', Arial, sans-serif; }}
QPushButton {{ background: transparent; border: 1px solid rgba(255,255,255,0.5);
               border-radius: 14px; padding: 6px 16px; font-size: 12px; }}
QPushButton:checked {{ background: rgba(255,255,255,0.15); }}
QScrollArea {{ border: none; }}
"""
