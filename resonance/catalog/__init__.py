"""
Catalog access layer.

Responsibilities:
- Read the audio/frequency catalog from the hosted store, a CSV file, or memory.
- Normalize raw rows into ``Candidate`` objects at the boundary.
- Never raise on backend failure: an unreachable catalog reads as empty.
"""
