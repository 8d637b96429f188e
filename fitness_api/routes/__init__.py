# Routes package init
"""
Fitness API — API Routes Package
==================================

Route Inventory:
    - blogs.py:   GET/POST /blogs, GET/DELETE /blogs/{id}
    - users.py:   GET/POST /users, PUT/DELETE /users/{id}
    - health.py:  GET /health

Routes are thin: extract the request data, call the service, return the
response model. Errors propagate to the handlers registered in main.py.
"""
