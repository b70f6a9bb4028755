"""Core primitives: value buffer, statistical formulas, the measurement series.

Formulas are pure functions over a snapshot of values; the series memoizes
their results per snapshot and clears them whenever a value is added.
"""
