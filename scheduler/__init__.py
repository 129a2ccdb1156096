"""
scheduler
---------

Scheduling ledger. Initializes key components:

- `ledger`: Lesson validation against double-booking, reassignment and cancellation.
- `extractor`: Utilization, course type tally and tabular schedule reports.
"""
from . import extractor, ledger
from .ledger import SchedulingLedger
