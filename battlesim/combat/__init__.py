"""
Combat system module for the Battle Sim encounter simulator.

This module handles targeting, attack resolution, the round engine, the
simulation driver, and the chaining of encounters.
"""
