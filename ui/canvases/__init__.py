"""
Matplotlib canvas widgets for the fuel-flow chart.
"""
from ui.canvases.fuel_flow_chart import FuelFlowChartCanvas
from ui.canvases.flow_history import FlowHistoryCanvas

__all__ = ['FuelFlowChartCanvas', 'FlowHistoryCanvas']
