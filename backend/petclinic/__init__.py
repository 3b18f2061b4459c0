"""
PetClinic Backend - Application Package
=======================================

What: The `petclinic` package: owner records, their pets and visit history,
      served as server-rendered HTML forms.
Who:  Imported by uvicorn (`petclinic.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │        Routes (HTTP + templates)    │  ← request parsing, redirects, rendering
    ├─────────────────────────────────────┤
    │     Services (controller logic)     │  ← view selection, search branching
    ├─────────────────────────────────────┤
    │  Binding │ Schemas │ Repositories   │  ← form binding, view models, data access
    ├─────────────────────────────────────┤
    │    Models & Database (SQLAlchemy)   │  ← async sessions, ORM tables
    └─────────────────────────────────────┘

    Routes never touch the database directly; services never touch HTTP.
"""

__version__ = "1.0.0"
