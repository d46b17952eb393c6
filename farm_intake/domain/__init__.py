"""
Domain records module.

Plain value holders for articles, farmers, delivery schedules and inventory.
"""
