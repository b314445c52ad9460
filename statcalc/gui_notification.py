"""Transient notification banner shown above the result tabs."""

from PySide6.QtWidgets import QLabel
from PySide6.QtCore import Qt, QTimer

from .constants import NOTIFICATION_MS, NOTIFY_SUCCESS
from .theme import notification_stylesheet


class NotificationBanner(QLabel):
    """Coloured banner that hides itself after ``NOTIFICATION_MS``.

    A new message replaces the current one and restarts the timer.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setWordWrap(True)
        self.setVisible(False)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.hide)

    def show_message(self, message: str, kind: str = NOTIFY_SUCCESS,
                     duration_ms: int = NOTIFICATION_MS) -> None:
        self.setText(message)
        self.setStyleSheet(notification_stylesheet(kind))
        self.setVisible(True)
        self._timer.start(duration_ms)
