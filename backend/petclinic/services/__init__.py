# Services package init
"""
PetClinic Backend - Services Layer
==================================

What:  Controller logic sitting between routes (HTTP) and repositories.
How:   Services receive repositories, apply the page rules, and return a
       ModelAndView or a Redirect for the route to render.

Service Inventory:
    - OwnerService: owner create / find / edit / show pages
"""
