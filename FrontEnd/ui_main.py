from PySide6.QtWidgets import (
	QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QMessageBox
)
from PySide6.QtCore import Qt
from BackEnd.core.models import Phase
from FrontEnd.presenter import FocusPresenter
from FrontEnd.components.footer_today import FooterToday
from FrontEnd.components.history_list import HistoryList
from FrontEnd.components.study_chart import StudyChart
from FrontEnd.styles.design_tokens import COLORS, FONTS


class MainWindow(QMainWindow):
	def __init__(self, timer, store, confirm=None):
		super().__init__()
		self.setWindowTitle("Focus Timer")
		self.resize(900, 700)

		self.presenter = FocusPresenter(timer, store, confirm or self._confirm)

		container = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(32, 32, 32, 32)
		self.timer_card = self._build_timer_card()
		layout.addWidget(self.timer_card)
		layout.addWidget(self._build_history_section(), stretch=1)
		self.footer_today = FooterToday()
		layout.addWidget(self.footer_today)
		container.setLayout(layout)
		container.setObjectName("Root")
		container.setStyleSheet(f"#Root {{ background: {COLORS['background']}; }} QWidget {{ font-family: {FONTS['family']}; }}")
		self.setCentralWidget(container)

		self.presenter.display_changed.connect(self._update_display)
		self.presenter.history_changed.connect(self._update_history)
		# "today" moves at midnight; recompute totals whenever the timer changes state
		timer.state_changed.connect(lambda _state: self._update_history())
		self._update_display()
		self._update_history()

	def _build_timer_card(self):
		card = QWidget()
		card.setObjectName("TimerCard")
		card_layout = QVBoxLayout()
		card_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

		self.timer_label = QLabel("0:00")
		self.timer_label.setObjectName("TimerLabel")
		self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.timer_label.setStyleSheet(f"font-size: {FONTS['timer_size']}px; font-weight: bold; color: {COLORS['text_strong']};")
		self.status_label = QLabel("")
		self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
		self.status_label.setStyleSheet(f"font-size: {FONTS['status_size']}px; color: {COLORS['text']};")
		card_layout.addWidget(self.timer_label)
		card_layout.addWidget(self.status_label)

		btn_layout = QHBoxLayout()
		btn_layout.setSpacing(24)
		self.start_btn = QPushButton("Start")
		self.start_btn.setObjectName("StartBtn")
		self.pause_btn = QPushButton("Pause")
		self.pause_btn.setObjectName("PauseBtn")
		self.reset_btn = QPushButton("Reset")
		self.reset_btn.setObjectName("ResetBtn")
		for btn in (self.start_btn, self.pause_btn, self.reset_btn):
			btn.setMinimumHeight(48)
			btn.setStyleSheet(f"font-size: {FONTS['button_size']}px;")
			btn_layout.addWidget(btn)
		card_layout.addSpacing(16)
		card_layout.addLayout(btn_layout)
		card.setLayout(card_layout)

		self.start_btn.clicked.connect(self.presenter.start)
		self.pause_btn.clicked.connect(self.presenter.pause)
		self.reset_btn.clicked.connect(self.presenter.reset)
		return card

	def _build_history_section(self):
		w = QWidget()
		layout = QVBoxLayout()
		layout.setContentsMargins(0, 16, 0, 0)

		self.chart = StudyChart()
		layout.addWidget(self.chart, stretch=1)

		header = QHBoxLayout()
		header.addWidget(QLabel("History"))
		header.addStretch()
		self.delete_all_btn = QPushButton("Delete All")
		self.delete_all_btn.setObjectName("DeleteAllBtn")
		self.delete_all_btn.setStyleSheet(f"color: {COLORS['danger']};")
		header.addWidget(self.delete_all_btn)
		layout.addLayout(header)

		self.history_list = HistoryList()
		layout.addWidget(self.history_list, stretch=1)
		w.setLayout(layout)

		self.delete_all_btn.clicked.connect(self.presenter.delete_all)
		self.history_list.delete_requested.connect(self.presenter.delete_record)
		return w

	def _confirm(self, message):
		answer = QMessageBox.question(self, "Confirm", message)
		return answer == QMessageBox.StandardButton.Yes

	def _update_display(self):
		self.timer_label.setText(self.presenter.clock_text())
		self.status_label.setText(self.presenter.status_text())
		start_enabled, pause_enabled = self.presenter.controls_enabled()
		self.start_btn.setEnabled(start_enabled)
		self.pause_btn.setEnabled(pause_enabled)
		bg = COLORS['study_bg'] if self.presenter.timer.phase is Phase.STUDY else COLORS['break_bg']
		self.timer_card.setStyleSheet(f"#TimerCard {{ background: {bg}; border-radius: 16px; }}")

	def _update_history(self):
		self.history_list.set_rows(self.presenter.history_rows())
		self.footer_today.set_today(self.presenter.today_total(), self.presenter.streak())
		self.footer_today.set_totals(self.presenter.total_minutes(), self.presenter.days_studied())
		self.delete_all_btn.setEnabled(len(self.presenter.store) > 0)
		self.chart.plot(*self.presenter.chart_series())

	def closeEvent(self, event):
		# stop timers; an unfinished study phase is not recorded
		self.presenter.timer.reset()
		super().closeEvent(event)
