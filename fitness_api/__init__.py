"""
Fitness API — Package Initializer
===================================

Layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← one MongoDB call per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← document layouts + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← AsyncMongoClient lifecycle
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
