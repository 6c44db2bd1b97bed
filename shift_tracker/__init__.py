"""
Shift Tracker - Source Package

A small personal ledger for hourly work shifts, driven from the
command line.

DESIGN PRINCIPLES:
1. The backing file is the single source of truth between runs
2. Fail early, fail visibly
3. No silent corrections
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Shift Tracker Team"
