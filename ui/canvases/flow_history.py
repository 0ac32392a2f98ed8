"""
Recent fuel-flow readings over time.
"""
import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from engine.config import MAX_FUEL_FLOW, MIN_FUEL_FLOW
from ui import styles


class FlowHistoryCanvas(FigureCanvas):
    """
    Strip chart of the live fuel-flow reading.

    The line shows the noisy reading; dots are colored by the eco/normal
    classification at the time of each reading.
    """

    def __init__(self, parent=None, width=8, height=1.8, dpi=100):
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.fig.patch.set_facecolor(styles.BG_COLOR)
        self.ax.set_facecolor(styles.BG_COLOR_LIGHT)

        for spine in self.ax.spines.values():
            spine.set_color(styles.TEXT_COLOR_DIM)
        self.ax.tick_params(colors=styles.TEXT_COLOR_DIM, labelsize=7)
        self.ax.xaxis.label.set_color(styles.TEXT_COLOR_DIM)
        self.ax.title.set_color("#FFFFFF")

        self.ax.set_title(f"Fuel Flow History [{styles.FLOW_UNIT}]", fontsize=8)
        self.ax.grid(True, color=styles.GRID_COLOR, alpha=0.6)
        self.ax.set_xlabel("Time [s]", fontsize=7)
        self.ax.set_ylim(MIN_FUEL_FLOW, MAX_FUEL_FLOW)

        self.line, = self.ax.plot([], [], linewidth=1.2, color=styles.TEXT_COLOR_DIM)
        self.dots = self.ax.scatter([], [], s=8, zorder=3)

        self.fig.tight_layout(pad=0.5)

    def update_history(self, t: np.ndarray, flow: np.ndarray, eco: np.ndarray):
        """
        Update the strip chart.

        Args:
            t: Time array (X-axis), seconds from the oldest reading
            flow: Fuel flow readings (Y-axis)
            eco: Boolean eco flag per reading
        """
        if t.size == 0 or flow.size == 0:
            return

        self.line.set_data(t, flow)
        self.dots.set_offsets(np.column_stack([t, flow]))
        self.dots.set_color(np.where(eco, styles.ECO_COLOR, styles.NORMAL_COLOR))

        self.ax.set_xlim(0.0, max(float(t[-1]), 1.0))
        self.draw_idle()
