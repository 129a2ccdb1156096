"""
exceptions package
------------------

Typed business-rule errors raised by the registration ledger.
"""
