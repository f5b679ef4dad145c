# Routes package init
"""
Exercise Tracker - API Routes Package
=======================================

Route Inventory:
    - pages.py:      GET  /                              (landing page)
    - users.py:      POST /api/users                     (register or fetch)
                     GET  /api/users                     (list)
                     POST /api/users/{id}/exercises      (add exercise)
                     GET  /api/users/{id}/logs           (log query)
                     GET  /api/users/delete              (admin reset)
    - exercises.py:  GET  /api/exercises/delete          (admin reset)
    - health.py:     GET  /health                        (service health check)

Routes stay thin: extract inputs, call a service, return its response model.
"""
