"""
HTTP API for the Sleep Coach engine.
"""
