from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from FrontEnd.styles.design_tokens import COLORS


class StudyChart(FigureCanvas):
    """Bar chart of study minutes per date."""

    def __init__(self):
        super().__init__(Figure(figsize=(5, 2.5)))

    def plot(self, labels, values, suggested_max):
        self.figure.clear()
        ax = self.figure.add_subplot(111)
        ax.bar(labels, values, color=COLORS['chart_bar'], alpha=0.75)
        ax.set_ylim(0, suggested_max)
        ax.set_ylabel("Minutes")
        ax.set_xlabel("Date")
        ax.set_title("Study Progress (by date)")
        ax.grid(True, axis='y', alpha=0.25, linestyle='--', color=COLORS['chart_grid'])
        ax.set_axisbelow(True)
        for spine in ['top', 'right']:
            ax.spines[spine].set_visible(False)
        if len(labels) > 7:
            ax.tick_params(axis='x', rotation=45)
        self.figure.tight_layout()
        self.draw()
