#!/usr/bin/env python3
"""
Boat Performance Chart - Main Entry Point

Fuel flow vs RPM chart for a simulated boat engine, with a live
operating-point marker and eco/normal mode indicator.

Usage:
    python main.py              # Manual RPM (slider)
    python main.py --demo       # Start the simulated RPM sweep on launch
    python main.py --demo --walk  # Random-walk RPM instead of a sweep
"""
import sys
import logging
from PyQt5 import QtWidgets

# Configure logging FIRST - before any other imports
logging.basicConfig(
    level=logging.INFO,
    format='[%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

import numpy as np

from engine.config import load_settings
from engine.rpm_feed import SimulatedRpmFeed
from engine.simulation import EngineSimulation
from ui.main_window import MainWindow


def main(demo: bool = False, feed_mode: str = "sweep"):
    """
    Entry point for the chart application.

    Args:
        demo: Start the simulated RPM feed immediately
        feed_mode: "sweep" or "walk"
    """
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)

    print("=" * 60)
    print("🚤 BOAT PERFORMANCE CHART STARTING...")
    print("=" * 60)

    print("🔧 Creating Qt application...")
    app = QtWidgets.QApplication(sys.argv)

    rng = np.random.default_rng(settings.seed)
    if settings.seed is not None:
        print(f"🎲 Using seed {settings.seed}")

    print("📈 Generating sample data...")
    simulation = EngineSimulation(default_rpm=settings.default_rpm, rng=rng)
    simulation.generate_sample_data()
    print(f"✅ {len(simulation.samples)} samples ready")

    feed = SimulatedRpmFeed(
        mode=feed_mode,
        interval_ms=settings.feed_interval_ms,
        start_rpm=settings.default_rpm,
        rng=rng,
    )

    print("🖥️  Creating main window...")
    window = MainWindow(simulation, feed=feed, history_size=settings.history_size)

    if demo:
        print(f"🔁 Starting simulated RPM feed ({feed_mode})...")
        window.feed_button.setChecked(True)

    window.show()

    print("\n" + "=" * 60)
    print("✅ CHART READY")
    print("=" * 60 + "\n")

    # Run Qt event loop
    result = app.exec_()

    print("\n👋 Goodbye!")
    sys.exit(result)


if __name__ == "__main__":
    demo = "--demo" in sys.argv
    feed_mode = "walk" if "--walk" in sys.argv else "sweep"

    try:
        main(demo, feed_mode)
    except Exception as e:
        print("\n" + "=" * 60)
        print("❌ FATAL ERROR:")
        print("=" * 60)
        print(f"Error type: {type(e).__name__}")
        print(f"Error message: {e}")
        import traceback
        print("\nFull traceback:")
        traceback.print_exc()
        print("=" * 60)
        sys.exit(1)
