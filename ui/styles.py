"""
Styling constants and theme configuration for the chart UI.
"""

# =============================================================================
# Color Palette
# =============================================================================

# Dark theme colors
BG_COLOR = "#111111"          # Main background
BG_COLOR_LIGHT = "#181818"    # Axes, panels
TEXT_COLOR = "#EEEEEE"        # Main text
TEXT_COLOR_DIM = "#CCCCCC"    # Axis labels, ticks
BORDER_COLOR = "#555555"      # Borders
GRID_COLOR = "#333333"        # Grid lines

# Chart series
BAND_COLOR = "#6496FF"        # Min/max range fill
BAND_ALPHA = 0.2
BOUND_COLOR = "#FF6464"       # Min and max dashed lines
MEDIAN_COLOR = "#32C832"      # Median line
CURSOR_COLOR = "#888888"      # Vertical line at current rpm

# Operating point
ECO_COLOR = "#00C800"
NORMAL_COLOR = "#FF9600"

# =============================================================================
# Chart layout
# =============================================================================

RPM_GRID_STEP = 1000
FLOW_GRID_STEP = 10
FLOW_UNIT = "L/h"

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

DARK_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QGroupBox {{
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QSlider::groove:horizontal {{
        height: 6px;
        background: {BG_COLOR_LIGHT};
        border: 1px solid {BORDER_COLOR};
        border-radius: 3px;
    }}
    QSlider::handle:horizontal {{
        background: {BAND_COLOR};
        width: 14px;
        margin: -5px 0;
        border-radius: 7px;
    }}
    QPushButton {{
        background-color: {BAND_COLOR};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: #5A88EF;
    }}
    QPushButton:checked {{
        background-color: {ECO_COLOR};
    }}
"""


def mode_badge_style(eco: bool) -> str:
    """Stylesheet for the eco/normal readout label."""
    color = ECO_COLOR if eco else NORMAL_COLOR
    return f"color: {color}; font-size: 14px; font-weight: bold;"
