"""
Bugboard Backend — Application Package
========================================

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Routes + Middleware (HTTP)      │  ← identity binding, status codes
    ├─────────────────────────────────────┤
    │   Services (Request Pipeline)       │  ← auth, validation, ownership
    ├─────────────────────────────────────┤
    │     Schemas & Normalization         │  ← ids become strings here
    ├─────────────────────────────────────┤
    │  Document Store (SQLAlchemy/async)  │  ← posts, bugs
    └─────────────────────────────────────┘

    app.ui holds the bug-tracker UI components; they only depend on the
    JSON shapes produced by the API.
"""

__version__ = "1.0.0"
