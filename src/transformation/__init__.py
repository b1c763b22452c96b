"""
Transformation Layer - Pure, Deterministic Functions

Fills "api:<path>" header columns from API response documents.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
