# Models package init
"""
Fitness API — Document Models
===============================

What:  Collection names and stored-document layouts for each entity.
How:   MongoDB is schemaless; these modules are the single place that knows
       which keys a stored blog or user document carries.

Collections:
    - blogs:  title, image, description, content
    - users:  name, age, email, number, plan, isAdmin
"""
