# Services package init
"""
Exercise Tracker - Services Layer
===================================

Service Inventory:
    - UserService:      register-or-fetch, list, bulk delete
    - ExerciseService:  add entry, log query, bulk delete
    - coercion:         truncating int parsing, date parsing and rendering

Services are stateless; each call receives the request's AsyncSession.
"""
