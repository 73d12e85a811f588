"""
Frequency recommendation engine.

Responsibilities:
- Accept a client's normalized intake signal.
- Score every catalog candidate with fixed, additive weighted rules.
- Pick the best match, breaking ties at random among equals.
- Fall back to a deterministic default so a frequency is always returned.
- Resolve a chosen frequency back to display metadata.
"""
