"""
Epic Fails Popularity Simulator

A small CLI tool that simulates how many likes an epic fail video gets per day
and per week, based on how dramatic the failure is and whether it features animals.
"""

__version__ = "0.1.0"

from .cli import main

__all__ = ["main"]
