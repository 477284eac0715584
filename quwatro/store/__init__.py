"""
Store package for the QUWATRO suite.

Re-exports the bounded record store and its sort disciplines.
"""

from quwatro.store.record_store import RecordStore, SortDiscipline

__all__ = [
    "RecordStore",
    "SortDiscipline",
]
