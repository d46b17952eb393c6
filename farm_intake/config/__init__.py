"""
Configuration module.

Default profile, YAML profile loading and validation of the six intake flags.
"""
