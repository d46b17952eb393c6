"""
Report rendering module.

Formats the store contents for standard output.
"""
