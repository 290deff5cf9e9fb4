# Routes package init
"""
Evening Coffee Backend - API Routes Package
=============================================

Route Inventory ({prefix} is "" standalone, "/api/{app_id}" embedded):
    - submissions.py: POST {prefix}/contact, POST {prefix}/reservation
    - catalog.py:     GET  {prefix}/menu,    GET  {prefix}/info
    - health.py:      GET  {prefix}/health
    - static.py:      GET  /,  GET /{path}  (never prefixed, registered last)

Routes stay thin: they read the request, call a service, and return a schema.
Error translation for the JSON endpoints lives in eveningcoffee.routing.
"""
