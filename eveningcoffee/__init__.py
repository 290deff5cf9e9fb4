"""
Evening Coffee Backend - Application Package Initializer
=========================================================

What: Marks the `eveningcoffee` directory as a Python package.
Who:  Imported by uvicorn (`eveningcoffee.main:app`), pytest, and any host
      server that embeds the café application.

Architecture Note:

    ┌─────────────────────────────────────┐
    │     Middleware (CORS, errors, log)   │  ← cross-cutting, every request
    ├─────────────────────────────────────┤
    │           Routes (API Layer)         │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Café Content)      │  ← menu, store info, intake
    ├─────────────────────────────────────┤
    │            Schemas (Data)            │  ← Pydantic response contracts
    └─────────────────────────────────────┘

    There is no persistence layer: menu and store info are constants, and
    submissions are logged and discarded.
"""

__version__ = "1.0.0"
