"""
Transformation Layer - Pure, Deterministic Functions

Turns raw response bodies into documents, models, collections and pages.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
