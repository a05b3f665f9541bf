"""
API layer for the Happy Thoughts service.

Exposes the HTTP endpoints: thoughts (list, random, popular, liked, CRUD,
likes), users, register, login and the authenticated /secrets route.
"""
