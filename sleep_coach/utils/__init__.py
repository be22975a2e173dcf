"""
Utility modules for the Sleep Coach engine: constants, boundary
validation and the injectable clock.
"""
