"""
Farm Intake - Farm-Supply Request Processing

Runs a single farm-supply request (article, farmer, date, quantity) through a
fixed chain of rule stages and records the outcome in an in-memory store of
articles, farmers, schedules and inventory.
"""

__version__ = "0.1.0"
__author__ = "Farm Intake Team"
