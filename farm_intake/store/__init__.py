"""
In-memory store module.

Holds the articles, farmers, schedules and inventory recorded by the rule
pipeline for the lifetime of a single run.
"""
