"""
Exercise Tracker - Package Initializer
========================================

A small HTTP API that records users and their exercise sessions and answers
date-filtered log queries.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← lookup, coercion, filtering
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Record Store)      │  ← Database handle, sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
