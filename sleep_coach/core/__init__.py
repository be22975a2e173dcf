"""
Core modules for the Sleep Coach engine.

This package contains the core functionality for:
- Sleep cycle calculation
- Schedule analysis and pattern detection
- Coaching insight generation
- Storage of history, settings and reminders
"""
