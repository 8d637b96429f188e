# Services package init
"""
Fitness API — Services Layer
==============================

What:  Business logic between routes (HTTP) and MongoDB (persistence).

Service Inventory:
    - BlogService: list, create, get, delete blogs
    - UserService: list, create, update, delete users
"""
