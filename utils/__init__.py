"""
utils package
-------------

Contains utility modules shared by both ledgers.

Includes the JSON-backed constants, logging setup and numeric helpers used by the reports.
"""
