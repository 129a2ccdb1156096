"""
registry
--------

Registration ledger. Initializes key components:

- `ledger`: Enrollment, course registration, grading and status changes.
- `rules`: Guard clauses raising the typed errors from `exceptions.custom_errors`.
- `extractor`: Grade averages, honor roll and per-faculty summaries.
"""
from . import extractor, ledger, rules
from .ledger import RegistrationLedger
