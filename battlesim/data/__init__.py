"""Data files bundled with the simulator."""
