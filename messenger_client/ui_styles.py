"""UI styling helpers shared by the messenger pages.

Keeps colors and widget styles in one place so the home, login and register
pages look alike.
"""

from PyQt5.QtGui import QFont # type: ignore
from PyQt5.QtWidgets import QPushButton, QLabel # type: ignore
from PyQt5.QtCore import Qt # type: ignore

PRIMARY_COLOR = "#667eea"
TEXT_COLOR = "#2d3748"
MUTED_COLOR = "#718096"
ERROR_COLOR = "#e53e3e"

# Background/foreground per message kind, as shown under the forms
MESSAGE_COLORS = {
    "success": ("#f0fff4", "#276749"),
    "error": ("#fff5f5", "#c53030"),
    "info": ("#ebf8ff", "#2b6cb0"),
}

BUTTON_CSS = f"""
QPushButton {{
  background-color: {PRIMARY_COLOR};
  color: white;
  border-radius: 8px;
  padding: 8px 12px;
}}
QPushButton:hover {{
  background-color: #5a67d8;
}}
QPushButton:disabled {{
  background-color: #a3bffa;
}}
"""

OUTLINE_BUTTON_CSS = f"""
QPushButton {{
  background-color: white;
  color: {PRIMARY_COLOR};
  border: 2px solid {PRIMARY_COLOR};
  border-radius: 8px;
  padding: 8px 12px;
}}
"""


def style_button(btn: QPushButton, min_height: int = 36, outline: bool = False):
    """Apply a consistent style to buttons."""
    btn.setStyleSheet(OUTLINE_BUTTON_CSS if outline else BUTTON_CSS)
    btn.setMinimumHeight(min_height)
    btn.setCursor(Qt.PointingHandCursor)


def set_title_label(lbl: QLabel, size: int = 16):
    f = QFont("Verdana", size)
    f.setBold(True)
    lbl.setFont(f)
    lbl.setStyleSheet(f"color: {TEXT_COLOR};")


def style_input(widget, min_height: int = 32, width: int = 280, has_error: bool = False):
    """Style a QLineEdit; the border turns red while the field has an error."""
    border = ERROR_COLOR if has_error else "#ccc"
    widget.setStyleSheet(f"""
    QLineEdit {{
      border: 1px solid {border};
      border-radius: 6px;
      padding: 6px 8px;
      font-size: 12px;
    }}
    """)
    widget.setMinimumHeight(min_height)
    widget.setFixedWidth(width)


def style_hint(lbl: QLabel, error: bool = False):
    color = ERROR_COLOR if error else MUTED_COLOR
    lbl.setStyleSheet(f"color: {color}; font-size: 11px;")
    lbl.setWordWrap(True)


def show_message(lbl: QLabel, text: str, kind: str = "info"):
    """Show `text` in a banner label, or hide the label when text is empty."""
    if not text:
        lbl.clear()
        lbl.setVisible(False)
        return
    background, foreground = MESSAGE_COLORS.get(kind, MESSAGE_COLORS["info"])
    lbl.setStyleSheet(
        f"background-color: {background}; color: {foreground}; border-radius: 6px; padding: 8px;"
    )
    lbl.setWordWrap(True)
    lbl.setText(text)
    lbl.setVisible(True)
