"""
Environment checks: the GUI stack imports and a Qt application can start.
"""
import platform


def test_pyqt5(qapp):
    from PyQt5 import QtCore
    assert QtCore.QT_VERSION_STR


def test_matplotlib_qt_backend():
    import matplotlib
    from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg
    assert matplotlib.__version__
    assert FigureCanvasQTAgg is not None


def test_numpy():
    import numpy
    assert numpy.__version__


def test_dotenv():
    from dotenv import load_dotenv
    assert callable(load_dotenv)


def test_platform():
    assert platform.system()
