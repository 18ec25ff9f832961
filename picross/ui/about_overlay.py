"""In-window About overlay widget."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QEvent, Signal, QUrl
from PySide6.QtGui import QColor, QDesktopServices
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from picross.ui.colors import BoardColors


class AboutOverlay(QWidget):
    """In-window overlay for About — stays inside the main window and is clipped to it."""

    closed = Signal()

    def __init__(self, repository: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = QWidget(self)
        overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.2);")
        overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        overlay_bg.setMinimumSize(1, 1)

        def on_overlay_click(_e) -> None:
            self.hide()
            self.closed.emit()

        overlay_bg.mousePressEvent = on_overlay_click
        main_layout.addWidget(overlay_bg, 0, 0)

        container = QFrame(self)
        container.setObjectName("aboutContainer")
        container.setMinimumWidth(380)
        container.setStyleSheet(
            """
            QFrame#aboutContainer {
                background: #ffffff;
                border-radius: 20px;
            }
            """
        )
        shadow = QGraphicsDropShadowEffect(container)
        shadow.setBlurRadius(24)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(60, 40, 20, 40))
        container.setGraphicsEffect(shadow)

        layout = QVBoxLayout(container)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(12)

        title = QLabel("Picross")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {BoardColors.TEXT_PRIMARY}; font-size: 28px; font-weight: 800;")
        layout.addWidget(title)

        tagline = QLabel("Reveal every filled square. One wrong square and the game is lost.")
        tagline.setAlignment(Qt.AlignCenter)
        tagline.setWordWrap(True)
        tagline.setStyleSheet(f"color: {BoardColors.TEXT_MUTED}; font-size: 12px;")
        layout.addWidget(tagline)

        link = QPushButton(repository)
        link.setFlat(True)
        link.setCursor(Qt.CursorShape.PointingHandCursor)
        link.setStyleSheet(
            f"QPushButton {{ color: {BoardColors.PRIMARY_DARK}; border: none; font-weight: 600; }}"
        )
        link.clicked.connect(lambda: QDesktopServices.openUrl(QUrl(repository)))
        layout.addWidget(link)

        close_btn = QPushButton("Close")
        close_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        close_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {BoardColors.PRIMARY};
                color: white;
                padding: 10px 16px;
                border: none;
                border-radius: 12px;
                font-weight: 600;
            }}
            QPushButton:hover {{ background: {BoardColors.PRIMARY_DARK}; }}
            """
        )
        close_btn.clicked.connect(lambda: (self.hide(), self.closed.emit()))
        layout.addWidget(close_btn)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_geometry()

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
