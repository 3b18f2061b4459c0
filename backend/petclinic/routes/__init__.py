# Routes package init
"""
PetClinic Backend - Routes Package
==================================

What:  HTTP route handlers: read the request, call a service, render a page.

Route Inventory:
    - welcome.py:  GET /
    - owners.py:   /owners, /owners/new, /owners/find,
                   /owners/{owner_id}, /owners/{owner_id}/edit
    - health.py:   GET /health (JSON)

Routes stay thin: page rules live in services, data access in repositories.
"""
