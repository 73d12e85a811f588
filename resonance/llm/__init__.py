"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Reword rule-based recommendation reasons into a short personal note.
- Graceful fallback to template text when the LLM is unavailable or misbehaves.
"""
