from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS

class FooterToday(QWidget):
    def __init__(self, minutes=0):
        super().__init__()
        layout = QHBoxLayout()
        self.totals_label = QLabel()
        self.totals_label.setObjectName("TotalsLabel")
        layout.addWidget(self.totals_label)
        layout.addStretch()
        self.label = QLabel()
        self.label.setObjectName("TodayLabel")
        layout.addWidget(self.label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 16px; padding: 8px 24px; color: {COLORS['footer_text']}; font-size: 16px; font-weight: 500;")
        self.set_today(minutes)
        self.set_totals(0, 0)

    def set_today(self, minutes, streak=0):
        text = f"Today: {minutes:.0f} mins"
        if streak > 1:
            text += f"  ·  {streak} day streak"
        self.label.setText(text)

    def set_totals(self, minutes, days):
        hours = minutes / 60
        self.totals_label.setText(f"All time: {hours:.1f} h over {days} day{'s' if days != 1 else ''}")
