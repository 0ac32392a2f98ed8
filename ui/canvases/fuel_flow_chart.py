"""
Fuel flow versus RPM chart with the live operating point.
"""
import numpy as np
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from engine.config import MAX_FUEL_FLOW, MAX_RPM, MIN_FUEL_FLOW, MIN_RPM
from engine.sample_table import SampleTable
from ui import styles


class FuelFlowChartCanvas(FigureCanvas):
    """
    Matplotlib canvas for the fuel-flow performance chart.

    Draws the min/max band, the dashed min and max curves, the median
    curve, and a marker at the current operating point colored by mode
    (eco = green, normal = orange).
    """

    def __init__(self, parent=None, width=8, height=5, dpi=100):
        """
        Initialize the chart canvas.

        Args:
            parent: Parent QWidget
            width: Figure width in inches
            height: Figure height in inches
            dpi: Dots per inch resolution
        """
        self.fig = Figure(figsize=(width, height), dpi=dpi)
        self.ax = self.fig.add_subplot(111)
        super().__init__(self.fig)
        self.setParent(parent)

        self.fig.patch.set_facecolor(styles.BG_COLOR)
        self.ax.set_facecolor(styles.BG_COLOR_LIGHT)

        for spine in self.ax.spines.values():
            spine.set_color(styles.TEXT_COLOR_DIM)
        self.ax.tick_params(colors=styles.TEXT_COLOR_DIM, labelsize=8)
        self.ax.xaxis.label.set_color(styles.TEXT_COLOR_DIM)
        self.ax.yaxis.label.set_color(styles.TEXT_COLOR_DIM)
        self.ax.title.set_color("#FFFFFF")

        # Fixed chart domain
        self.ax.set_xlim(MIN_RPM, MAX_RPM)
        self.ax.set_ylim(MIN_FUEL_FLOW, MAX_FUEL_FLOW)
        self.ax.set_xticks(np.arange(MIN_RPM, MAX_RPM + 1, styles.RPM_GRID_STEP))
        self.ax.set_yticks(np.arange(MIN_FUEL_FLOW, MAX_FUEL_FLOW + 1, styles.FLOW_GRID_STEP))
        self.ax.grid(True, color=styles.GRID_COLOR, alpha=0.6, linestyle=":")
        self.ax.set_title("Fuel Flow vs RPM", fontsize=10)
        self.ax.set_xlabel("RPM", fontsize=9)
        self.ax.set_ylabel(f"Fuel Flow ({styles.FLOW_UNIT})", fontsize=9)

        self.band = None
        self.min_line, = self.ax.plot([], [], color=styles.BOUND_COLOR, linewidth=1.5, linestyle="--")
        self.max_line, = self.ax.plot([], [], color=styles.BOUND_COLOR, linewidth=1.5, linestyle="--")
        self.median_line, = self.ax.plot([], [], color=styles.MEDIAN_COLOR, linewidth=2.5)

        self.cursor_line = self.ax.axvline(MIN_RPM, color=styles.CURSOR_COLOR, linewidth=1.5, linestyle=":")
        self.point, = self.ax.plot(
            [], [], marker="o", markersize=10, markeredgecolor="black",
            markeredgewidth=1.5, markerfacecolor=styles.NORMAL_COLOR, linestyle="none",
        )
        self.label = self.ax.text(
            0, 0, "", color=styles.TEXT_COLOR, fontsize=9, fontweight="bold",
            verticalalignment="bottom",
        )

        self._build_legend()
        self.fig.tight_layout(pad=1.0)

    def _build_legend(self):
        handles = [
            Patch(facecolor=styles.BAND_COLOR, alpha=styles.BAND_ALPHA,
                  edgecolor=styles.BOUND_COLOR, linestyle="--", label="Min/Max Range"),
            Line2D([], [], color=styles.MEDIAN_COLOR, linewidth=2.5, label="Median"),
            Line2D([], [], marker="o", linestyle="none", markerfacecolor=styles.ECO_COLOR,
                   markeredgecolor="black", label="Eco Mode"),
            Line2D([], [], marker="o", linestyle="none", markerfacecolor=styles.NORMAL_COLOR,
                   markeredgecolor="black", label="Normal"),
        ]
        legend = self.ax.legend(
            handles=handles, loc="upper left", fontsize=8, framealpha=0.8,
            facecolor=styles.BG_COLOR, edgecolor=styles.BORDER_COLOR,
        )
        for text in legend.get_texts():
            text.set_color(styles.TEXT_COLOR)

    def set_samples(self, table: SampleTable):
        """
        Redraw the band and curves from a sample table.

        Args:
            table: Generated samples (fewer than 2 samples draws nothing)
        """
        if self.band is not None:
            self.band.remove()
            self.band = None

        if len(table) < 2:
            for line in (self.min_line, self.max_line, self.median_line):
                line.set_data([], [])
            self.draw_idle()
            return

        self.band = self.ax.fill_between(
            table.rpm, table.min_flow, table.max_flow,
            color=styles.BAND_COLOR, alpha=styles.BAND_ALPHA, linewidth=0,
        )
        self.min_line.set_data(table.rpm, table.min_flow)
        self.max_line.set_data(table.rpm, table.max_flow)
        self.median_line.set_data(table.rpm, table.median_flow)
        self.draw_idle()

    def set_operating_point(self, rpm: float, fuel_flow: float, eco: bool):
        """
        Move the current-point marker and its label.

        Args:
            rpm: Current engine rpm
            fuel_flow: Current fuel flow (L/h)
            eco: True when running below the median
        """
        self.cursor_line.set_xdata([rpm, rpm])
        self.point.set_data([rpm], [fuel_flow])
        self.point.set_markerfacecolor(styles.ECO_COLOR if eco else styles.NORMAL_COLOR)

        self.label.set_text(
            f"RPM: {rpm:.0f}\nFuel: {fuel_flow:.1f} {styles.FLOW_UNIT}\n"
            f"{'ECO MODE' if eco else 'NORMAL'}"
        )
        # Keep the label inside the plot near the right edge
        offset = 0.02 * (MAX_RPM - MIN_RPM)
        if rpm > 0.8 * MAX_RPM:
            self.label.set_horizontalalignment("right")
            self.label.set_position((rpm - offset, fuel_flow + 1.0))
        else:
            self.label.set_horizontalalignment("left")
            self.label.set_position((rpm + offset, fuel_flow + 1.0))

        self.draw_idle()
