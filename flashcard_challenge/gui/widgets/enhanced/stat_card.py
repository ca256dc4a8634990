"""Stat card widget for displaying metrics."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

VALUE_FONT_PX = 28
LABEL_FONT_PX = 11


class StatCard(QFrame):
    """Card widget for displaying a single metric of a finished challenge.

    Shows a large value over a small uppercase label, e.g. score or
    average response time.
    """

    def __init__(self, value: str = "0", label: str = "", parent=None):
        """Initialize the stat card.

        Args:
            value: Value to display (as string to support formatted numbers)
            label: Label text describing the metric
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._value = value
        self._label = label
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setObjectName("stat-card")
        self.setFrameShape(QFrame.Shape.StyledPanel)

        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.value_label = QLabel(self._value)
        self.value_label.setObjectName("stat-value")
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        value_font = QFont()
        value_font.setPixelSize(VALUE_FONT_PX)
        value_font.setWeight(QFont.Weight.Bold)
        self.value_label.setFont(value_font)
        layout.addWidget(self.value_label)

        self.label_widget = QLabel(self._label.upper())
        self.label_widget.setObjectName("stat-label")
        self.label_widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label_font = QFont()
        label_font.setPixelSize(LABEL_FONT_PX)
        self.label_widget.setFont(label_font)
        layout.addWidget(self.label_widget)

        self.setLayout(layout)

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        """Update the displayed value.

        Args:
            value: New value to display
        """
        self._value = value
        self.value_label.setText(value)
