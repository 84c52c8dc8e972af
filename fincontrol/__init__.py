"""
FinControl - Source Package

A personal finance ledger: dated income and expense entries,
monthly summaries and a 12-month category report.

DESIGN PRINCIPLES:
1. Reports are pure functions of a collection snapshot
2. Amounts are never signed; the kind decides the sign
3. Malformed input degrades to "no constraint" or "skipped", never a crash
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "FinControl Team"
