"""
Package marker for source code under `src.access`.
It groups token issuance, bearer header parsing, and the daily word quota.
Most functionality lives in the sibling modules; this file intentionally stays lightweight.
"""
