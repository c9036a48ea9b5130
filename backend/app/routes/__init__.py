"""
Bugboard Backend — API Routes Package
=======================================

Route Inventory:
    - posts.py:   /api/posts, /api/posts/{id}   (owner-gated mutation)
    - bugs.py:    /api/bugs, /api/bugs/{id}     (open to anonymous callers)
    - health.py:  GET /health

Routes stay THIN: extract identity/params/body, call a service, return its
result. Authorization and ownership rules live in the services.
"""
