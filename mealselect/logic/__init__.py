"""Core business logic layer.

Subpackages:
- difficulty: recipe difficulty estimation and generation strategy
- selection: catalog compatibility filter, cultural meal decision, scoring and quota
- planning: slot-by-slot plan scheduler
- reporting: plan summaries and cultural insertion checks
"""
__all__ = ["difficulty", "selection", "planning", "reporting"]
