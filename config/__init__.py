"""
config package
--------------

Project paths, environment overrides (read from `.env`) and the JSON file of
ledger constants.
"""
