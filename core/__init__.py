"""
core
----

Core components shared by the ledgers:

- HardRule & define_hard_rules:
  Name the double-booking rules a new lesson is checked against, in reporting order.

- ConstraintManager:
  Register and apply guard functions in a controlled sequence.

- ScheduleState & RegistryState:
  Encapsulate the collections owned by one scheduling or registration ledger.
"""
