"""
User interface module for the simulator.

Provides the console report used by the command-line entry point.
"""
