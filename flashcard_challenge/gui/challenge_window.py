"""Main window for the Flashcard Challenge GUI."""

import logging
from dataclasses import replace
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from flashcard_challenge import __version__
from flashcard_challenge.config import ChallengeConfig
from flashcard_challenge.exceptions import ChallengeException, EmptyPoolError
from flashcard_challenge.gui.presenters import GUIPresenter
from flashcard_challenge.gui.qt_scheduler import QtScheduler
from flashcard_challenge.gui.utils.config_manager import GUIConfigManager
from flashcard_challenge.gui.widgets.enhanced import StatCard
from flashcard_challenge.interfaces import HistoryRecorder
from flashcard_challenge.models import (
    Achievement,
    ChallengeDifficulty,
    ChallengeSettings,
    HistoryEntry,
    SessionStats,
    StudyCard,
)
from flashcard_challenge.models.settings import MAX_CARDS, MAX_DURATION, MIN_CARDS, MIN_DURATION
from flashcard_challenge.orchestration import ChallengeController
from flashcard_challenge.services import JsonFileCardSource
from flashcard_challenge.utils.format_utils import format_time, grade_for

logger = logging.getLogger(__name__)

PAGE_SETUP = 0
PAGE_CHALLENGE = 1
PAGE_RESULTS = 2

WINDOW_MIN_WIDTH = 640
WINDOW_MIN_HEIGHT = 520


class ChallengeWindow(QMainWindow):
    """Challenge window with setup, challenge and results pages.

    All session logic lives in ChallengeController; this window only turns
    button clicks into session actions and presenter signals into widget
    updates.
    """

    def __init__(
        self,
        config: ChallengeConfig,
        history: HistoryRecorder,
        pool: list[StudyCard] | None = None,
        parent=None,
    ):
        """Initialize the window.

        Args:
            config: Application configuration (provides setup defaults)
            history: Log that completed sessions are appended to
            pool: Initial card collection
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.config = config
        self.history = history
        self.pool: list[StudyCard] = list(pool or [])

        self.presenter = GUIPresenter(self)
        self.scheduler = QtScheduler(self)
        self.controller = ChallengeController(
            self.scheduler,
            history=history,
            presenter=self.presenter,
            tick_interval=config.tick_interval,
        )

        self._setup_ui()
        self._setup_shortcuts()
        self._connect_presenter_signals()
        self._apply_settings(config.default_settings())
        self._refresh_categories()
        self._refresh_history()

    # === UI construction ===

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(f"Flashcard Challenge {__version__}")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.pages = QStackedWidget()
        self.pages.addWidget(self._build_setup_page())
        self.challenge_page = self._build_challenge_page()
        self.pages.addWidget(self.challenge_page)
        self.pages.addWidget(self._build_results_page())
        self.setCentralWidget(self.pages)

    def _build_setup_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout()

        source_row = QHBoxLayout()
        self.pool_label = QLabel()
        source_row.addWidget(self.pool_label, 1)
        self.load_button = QPushButton("Load Cards...")
        self.load_button.clicked.connect(self._on_load_clicked)
        source_row.addWidget(self.load_button)
        layout.addLayout(source_row)

        form = QFormLayout()
        self.duration_spin = QSpinBox()
        self.duration_spin.setRange(MIN_DURATION, MAX_DURATION)
        self.duration_spin.setSingleStep(30)
        self.duration_spin.setSuffix(" s")
        form.addRow("Time limit:", self.duration_spin)

        self.count_spin = QSpinBox()
        self.count_spin.setRange(MIN_CARDS, MAX_CARDS)
        self.count_spin.setSingleStep(5)
        form.addRow("Number of cards:", self.count_spin)

        self.difficulty_combo = QComboBox()
        for difficulty in ChallengeDifficulty:
            self.difficulty_combo.addItem(difficulty.value.capitalize(), difficulty.value)
        form.addRow("Difficulty:", self.difficulty_combo)

        self.hints_check = QCheckBox("Show hints during challenge")
        form.addRow("", self.hints_check)
        layout.addLayout(form)

        layout.addWidget(QLabel("Categories (none checked = all):"))
        self.categories_list = QListWidget()
        layout.addWidget(self.categories_list, 1)

        self.start_button = QPushButton("Start Challenge")
        self.start_button.clicked.connect(self._on_start_clicked)
        layout.addWidget(self.start_button)

        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        layout.addWidget(QLabel("Recent challenges:"))
        self.history_list = QListWidget()
        layout.addWidget(self.history_list, 1)

        page.setLayout(layout)
        return page

    def _build_challenge_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout()

        top_row = QHBoxLayout()
        self.timer_label = QLabel("00:00")
        timer_font = QFont()
        timer_font.setPixelSize(24)
        timer_font.setWeight(QFont.Weight.Bold)
        self.timer_label.setFont(timer_font)
        top_row.addWidget(self.timer_label)
        top_row.addStretch()
        self.streak_label = QLabel()
        top_row.addWidget(self.streak_label)
        layout.addLayout(top_row)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        layout.addWidget(self.progress_bar)

        self.card_meta_label = QLabel()
        layout.addWidget(self.card_meta_label)

        self.question_label = QLabel()
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        question_font = QFont()
        question_font.setPixelSize(18)
        self.question_label.setFont(question_font)
        layout.addWidget(self.question_label, 1)

        self.hint_label = QLabel()
        self.hint_label.setWordWrap(True)
        layout.addWidget(self.hint_label)

        self.answer_label = QLabel()
        self.answer_label.setWordWrap(True)
        self.answer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.answer_label, 1)

        buttons = QHBoxLayout()
        self.reveal_button = QPushButton("Reveal Answer")
        self.reveal_button.clicked.connect(self._on_reveal_clicked)
        buttons.addWidget(self.reveal_button)
        self.correct_button = QPushButton("Correct")
        self.correct_button.clicked.connect(lambda: self._on_respond_clicked(True))
        buttons.addWidget(self.correct_button)
        self.incorrect_button = QPushButton("Incorrect")
        self.incorrect_button.clicked.connect(lambda: self._on_respond_clicked(False))
        buttons.addWidget(self.incorrect_button)
        self.skip_button = QPushButton("Skip")
        self.skip_button.clicked.connect(self._on_skip_clicked)
        buttons.addWidget(self.skip_button)
        self.end_button = QPushButton("End")
        self.end_button.clicked.connect(self._on_end_clicked)
        buttons.addWidget(self.end_button)
        layout.addLayout(buttons)

        page.setLayout(layout)
        return page

    def _build_results_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout()

        grid = QGridLayout()
        self.stat_cards: dict[str, StatCard] = {}
        for i, (key, label) in enumerate(
            [
                ("score", "Score"),
                ("grade", "Grade"),
                ("correct", "Correct"),
                ("incorrect", "Incorrect"),
                ("skipped", "Skipped"),
                ("avg_time", "Avg Time"),
                ("streak", "Longest Streak"),
                ("remaining", "Time Left"),
            ]
        ):
            card = StatCard("0", label)
            self.stat_cards[key] = card
            grid.addWidget(card, i // 4, i % 4)
        layout.addLayout(grid)

        layout.addWidget(QLabel("Achievements unlocked:"))
        self.achievements_list = QListWidget()
        layout.addWidget(self.achievements_list, 1)

        buttons = QHBoxLayout()
        self.play_again_button = QPushButton("Play Again")
        self.play_again_button.clicked.connect(self._on_start_clicked)
        buttons.addWidget(self.play_again_button)
        self.back_button = QPushButton("Back to Setup")
        self.back_button.clicked.connect(self._show_setup)
        buttons.addWidget(self.back_button)
        layout.addLayout(buttons)

        page.setLayout(layout)
        return page

    def _setup_shortcuts(self) -> None:
        """Keyboard shortcuts, active only while the challenge page has focus."""
        bindings = [
            ("Space", self._on_reveal_clicked),
            ("1", lambda: self._on_respond_clicked(True)),
            ("2", lambda: self._on_respond_clicked(False)),
            ("S", self._on_skip_clicked),
        ]
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self.challenge_page)
            shortcut.setContext(Qt.ShortcutContext.WidgetWithChildrenShortcut)
            shortcut.activated.connect(handler)

    def _connect_presenter_signals(self) -> None:
        self.presenter.info_signal.connect(self.status_label.setText)
        self.presenter.success_signal.connect(self.status_label.setText)
        self.presenter.warning_signal.connect(self.status_label.setText)
        self.presenter.error_signal.connect(self.status_label.setText)
        self.presenter.card_signal.connect(self._on_card)
        self.presenter.answer_signal.connect(self._on_answer)
        self.presenter.tick_signal.connect(self._on_tick)
        self.presenter.results_signal.connect(self._on_results)
        self.presenter.history_signal.connect(self._on_history)

    # === Setup page ===

    def _apply_settings(self, settings: ChallengeSettings) -> None:
        self.duration_spin.setValue(settings.duration)
        self.count_spin.setValue(settings.cards_count)
        index = self.difficulty_combo.findData(settings.difficulty.value)
        self.difficulty_combo.setCurrentIndex(index)
        self.hints_check.setChecked(settings.include_hints)

    def current_settings(self) -> ChallengeSettings:
        """Build ChallengeSettings from the setup widgets."""
        categories = set()
        for i in range(self.categories_list.count()):
            item = self.categories_list.item(i)
            if item.checkState() == Qt.CheckState.Checked:
                categories.add(item.text())
        return ChallengeSettings(
            duration=self.duration_spin.value(),
            cards_count=self.count_spin.value(),
            difficulty=self.difficulty_combo.currentData(),
            categories=frozenset(categories),
            include_hints=self.hints_check.isChecked(),
        )

    def set_pool(self, pool: list[StudyCard]) -> None:
        """Replace the card collection offered on the setup page."""
        self.pool = list(pool)
        self._refresh_categories()

    def load_cards_from(self, path: Path) -> bool:
        """Load the card collection from a JSON file.

        Returns:
            True if the file was loaded
        """
        try:
            cards = JsonFileCardSource(path).load_cards()
        except ChallengeException as e:
            self.presenter.show_error(str(e))
            return False
        self.set_pool(cards)
        self.config = replace(self.config, cards_file=Path(path))
        self.presenter.show_success(f"Loaded {len(cards)} cards from {Path(path).name}")
        return True

    def _refresh_categories(self) -> None:
        self.pool_label.setText(f"{len(self.pool)} cards loaded")
        self.categories_list.clear()
        for name in self.controller.available_categories(self.pool):
            item = QListWidgetItem(name)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(Qt.CheckState.Unchecked)
            self.categories_list.addItem(item)

    def _refresh_history(self) -> None:
        self.presenter.show_history(self.history.entries(limit=self.config.history_display_limit))

    def _remember_settings(self, settings: ChallengeSettings) -> None:
        self.config = replace(
            self.config,
            default_duration=settings.duration,
            default_cards_count=settings.cards_count,
            default_difficulty=settings.difficulty.value,
            default_include_hints=settings.include_hints,
        )
        try:
            GUIConfigManager.save_config(self.config)
        except OSError as e:
            logger.warning(f"Could not save GUI config: {e}")

    def _on_load_clicked(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Load Study Cards", "", "JSON files (*.json);;All files (*)"
        )
        if path:
            self.load_cards_from(Path(path))

    def _on_start_clicked(self) -> None:
        settings = self.current_settings()
        try:
            session = self.controller.start(self.pool, settings)
        except EmptyPoolError as e:
            self.presenter.show_error(str(e))
            self._show_setup()
            return
        if session is None:
            return
        self._remember_settings(settings)
        self.timer_label.setText(format_time(session.time_left))
        self.pages.setCurrentIndex(PAGE_CHALLENGE)
        self.reveal_button.setFocus()

    def _show_setup(self) -> None:
        self._refresh_history()
        self.pages.setCurrentIndex(PAGE_SETUP)

    # === Challenge page ===

    def _on_reveal_clicked(self) -> None:
        session = self.controller.session
        if session is not None:
            session.reveal()

    def _on_respond_clicked(self, correct: bool) -> None:
        session = self.controller.session
        if session is not None:
            session.respond(correct)

    def _on_skip_clicked(self) -> None:
        session = self.controller.session
        if session is not None:
            session.skip()

    def _on_end_clicked(self) -> None:
        session = self.controller.session
        if session is not None:
            session.end()

    def _on_card(self, index: int, total: int, card: StudyCard, hint: str | None) -> None:
        self.progress_bar.setValue(int(index / total * 100) if total else 0)
        self.card_meta_label.setText(
            f"Card {index + 1} of {total}  ·  {card.category or 'General'}  ·  "
            f"{card.difficulty.value}"
        )
        self.question_label.setText(card.question)
        self.hint_label.setText(f"Hint: {hint}" if hint else "")
        self.answer_label.setText("")
        session = self.controller.session
        streak = session.streak if session is not None else 0
        self.streak_label.setText(f"Streak: {streak}")
        self._set_answer_buttons(revealed=False)

    def _on_answer(self, card: StudyCard) -> None:
        self.answer_label.setText(card.answer)
        self._set_answer_buttons(revealed=True)

    def _set_answer_buttons(self, revealed: bool) -> None:
        self.reveal_button.setEnabled(not revealed)
        self.correct_button.setEnabled(revealed)
        self.incorrect_button.setEnabled(revealed)

    def _on_tick(self, time_left: int) -> None:
        self.timer_label.setText(format_time(time_left))

    # === Results page ===

    def _on_results(self, stats: SessionStats, achievements: list[Achievement]) -> None:
        self.stat_cards["score"].set_value(str(stats.score))
        self.stat_cards["grade"].set_value(grade_for(stats.accuracy))
        self.stat_cards["correct"].set_value(str(stats.correct_answers))
        self.stat_cards["incorrect"].set_value(str(stats.incorrect_answers))
        self.stat_cards["skipped"].set_value(str(stats.skipped_answers))
        self.stat_cards["avg_time"].set_value(f"{stats.average_response_time:.1f}s")
        self.stat_cards["streak"].set_value(str(stats.longest_streak))
        self.stat_cards["remaining"].set_value(format_time(stats.time_remaining))

        self.achievements_list.clear()
        for achievement in achievements:
            self.achievements_list.addItem(
                f"{achievement.icon} {achievement.name} - {achievement.description}"
            )
        if not achievements:
            self.achievements_list.addItem("None this time")

        self.progress_bar.setValue(100)
        self._refresh_history()
        self.pages.setCurrentIndex(PAGE_RESULTS)

    def _on_history(self, entries: list[HistoryEntry]) -> None:
        self.history_list.clear()
        for entry in entries:
            when = entry.timestamp.astimezone().strftime("%Y-%m-%d %H:%M")
            self.history_list.addItem(
                f"{when}  {entry.score} pts  {entry.correct_answers}/{entry.total_cards}  "
                f"{entry.difficulty}  {', '.join(entry.categories)}"
            )
