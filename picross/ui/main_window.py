from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QColor, QKeySequence, QLinearGradient, QPainter
from PySide6.QtWidgets import (
    QFormLayout,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from picross.core.commands import (
    Command,
    GotoMenu,
    InputFilledCount,
    InputHeight,
    InputWidth,
    Mark,
    Reset,
    Reveal,
    StartPressed,
)
from picross.core.controller import Controller
from picross.core.session import GameSession, Winstate
from picross.ui.about_overlay import AboutOverlay
from picross.ui.board_widgets import BoardView
from picross.ui.colors import BoardColors
from picross.ui.models import winstate_text

logger = logging.getLogger(__name__)


class PaperBackground(QWidget):
    """Soft vertical gradient behind both screens."""

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        gradient = QLinearGradient(0, 0, 0, self.height())
        gradient.setColorAt(0.0, QColor(BoardColors.BG_TOP))
        gradient.setColorAt(1.0, QColor(BoardColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)


class Card(QFrame):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.setStyleSheet(
            f"""
            QFrame#card {{
                background: {BoardColors.CARD_BG};
                border: 1px solid {BoardColors.CARD_BORDER};
                border-radius: 20px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(60, 40, 20, 40))
        self.setGraphicsEffect(shadow)


def _button(text: str, color: str) -> QPushButton:
    button = QPushButton(text)
    button.setCursor(Qt.CursorShape.PointingHandCursor)
    button.setMinimumHeight(40)
    button.setStyleSheet(
        f"""
        QPushButton {{
            background: {color};
            color: white;
            padding: 8px 24px;
            border: none;
            border-radius: 12px;
            font-weight: 700;
        }}
        QPushButton:hover {{ background: {BoardColors.PRIMARY_DARK}; }}
        """
    )
    return button


class MainWindow(QMainWindow):
    """Two-screen window: the menu with board size inputs and the playfield.

    Every user action becomes a command for the controller; the window then
    re-reads the session and redraws.
    """

    def __init__(self, controller: Controller) -> None:
        super().__init__()
        self._controller = controller
        self._session: GameSession = controller.new_session()

        self._stack: Optional[QStackedWidget] = None
        self._menu_screen: Optional[QWidget] = None
        self._play_screen: Optional[QWidget] = None
        self._width_input: Optional[QLineEdit] = None
        self._height_input: Optional[QLineEdit] = None
        self._filled_input: Optional[QLineEdit] = None
        self._menu_error_label: Optional[QLabel] = None
        self._board_view: Optional[BoardView] = None
        self._status_label: Optional[QLabel] = None

        self._build_ui()
        self._render()

    @property
    def session(self) -> GameSession:
        return self._session

    def dispatch(self, command: Command) -> None:
        """Apply *command* to the session and redraw."""
        logger.debug("Dispatching %r", command)
        self._session = self._controller.apply(self._session, command)
        self._render()

    def _build_ui(self) -> None:
        """Construct the menu screen, the playfield screen, the menu bar and the About overlay."""
        self.setWindowTitle("Picross")
        self.setMinimumSize(640, 560)

        self._stack = QStackedWidget()
        self._menu_screen = PaperBackground()
        self._play_screen = PaperBackground()
        self._stack.addWidget(self._menu_screen)
        self._stack.addWidget(self._play_screen)
        self.setCentralWidget(self._stack)

        self._about_overlay = AboutOverlay(self._controller.settings.repository, self._stack)
        self._about_overlay.hide()
        self._about_overlay.closed.connect(self._on_about_closed)

        view_menu = self.menuBar().addMenu("View")
        about_action = QAction("About", self)
        about_action.setShortcut(QKeySequence("F1"))
        about_action.triggered.connect(self._toggle_about)
        view_menu.addAction(about_action)

        self._build_menu_screen()
        self._build_play_screen()

    def _build_menu_screen(self) -> None:
        outer = QVBoxLayout(self._menu_screen)
        outer.setContentsMargins(16, 16, 16, 16)
        outer.addStretch(1)

        card = Card()
        form = QFormLayout(card)
        form.setContentsMargins(32, 28, 32, 28)
        form.setSpacing(16)
        form.setLabelAlignment(Qt.AlignRight | Qt.AlignVCenter)

        def _input(on_edit) -> QLineEdit:
            box = QLineEdit()
            box.setFixedWidth(80)
            box.setAlignment(Qt.AlignCenter)
            box.textEdited.connect(on_edit)
            box.returnPressed.connect(lambda: self.dispatch(StartPressed()))
            return box

        self._width_input = _input(lambda text: self.dispatch(InputWidth(text)))
        self._height_input = _input(lambda text: self.dispatch(InputHeight(text)))
        self._filled_input = _input(lambda text: self.dispatch(InputFilledCount(text)))
        form.addRow("Width:", self._width_input)
        form.addRow("Height:", self._height_input)
        form.addRow("Filled boxes:", self._filled_input)

        self._menu_error_label = QLabel("")
        self._menu_error_label.setWordWrap(True)
        self._menu_error_label.setStyleSheet(f"color: {BoardColors.TEXT_ERROR}; font-size: 12px;")
        form.addRow(self._menu_error_label)

        start_button = _button("START", BoardColors.PRIMARY)
        start_button.setFixedSize(130, 55)
        start_button.clicked.connect(lambda: self.dispatch(StartPressed()))
        form.addRow(start_button)

        row = QHBoxLayout()
        row.addStretch(1)
        row.addWidget(card)
        row.addStretch(1)
        outer.addLayout(row)
        outer.addStretch(1)

    def _build_play_screen(self) -> None:
        outer = QVBoxLayout(self._play_screen)
        outer.setContentsMargins(20, 20, 20, 20)
        outer.setSpacing(16)

        self._board_view = BoardView(
            self._controller.settings.tile_size,
            on_reveal=lambda cell_id: self.dispatch(Reveal(cell_id)),
            on_mark=lambda cell_id: self.dispatch(Mark(cell_id)),
        )
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        holder = QWidget()
        holder.setStyleSheet("background: transparent;")
        holder_layout = QHBoxLayout(holder)
        holder_layout.addStretch(1)
        holder_layout.addWidget(self._board_view, 0, Qt.AlignVCenter)
        holder_layout.addStretch(1)
        scroll.setWidget(holder)
        outer.addWidget(scroll, 1)

        buttons = QHBoxLayout()
        buttons.setSpacing(20)
        buttons.addStretch(1)
        menu_button = _button("Menu", BoardColors.PRIMARY)
        menu_button.clicked.connect(lambda: self.dispatch(GotoMenu()))
        reset_button = _button("Reset", BoardColors.DESTRUCTIVE)
        reset_button.clicked.connect(lambda: self.dispatch(Reset()))
        buttons.addWidget(menu_button)
        buttons.addWidget(reset_button)
        buttons.addStretch(1)
        outer.addLayout(buttons)

        self._status_label = QLabel("")
        self._status_label.setAlignment(Qt.AlignCenter)
        self._status_label.setStyleSheet(
            f"color: {BoardColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 700;"
        )
        outer.addWidget(self._status_label)

    def _render(self) -> None:
        session = self._session
        if session.menu.started:
            self._render_playfield(session)
            self._stack.setCurrentWidget(self._play_screen)
        else:
            self._render_menu(session)
            self._stack.setCurrentWidget(self._menu_screen)

    def _render_menu(self, session: GameSession) -> None:
        menu = session.menu
        for box, text in (
            (self._width_input, menu.width_input),
            (self._height_input, menu.height_input),
            (self._filled_input, menu.filled_count_input),
        ):
            if box.text() != text:
                box.setText(text)
        self._menu_error_label.setText(menu.error or "")
        self._menu_error_label.setVisible(bool(menu.error))

    def _render_playfield(self, session: GameSession) -> None:
        interactive = session.winstate is Winstate.IN_PROGRESS
        self._board_view.show_board(session.board, interactive)
        self._status_label.setText(winstate_text(session.winstate))

    def _toggle_about(self) -> None:
        overlay = self._about_overlay
        if overlay.isVisible():
            overlay.hide()
            overlay.closed.emit()
            return
        overlay.setGeometry(self._stack.rect())
        overlay.raise_()
        overlay.show()

    def _on_about_closed(self) -> None:
        current = self._stack.currentWidget()
        if current is not None:
            current.setFocus()
