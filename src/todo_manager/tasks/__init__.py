"""
Task subsystem.

Components:
- task_store.py: ordered in-memory storage (add / list / delete by index)
- task_api.py: small helpers used by the menu (numbered rendering, number parsing)
"""
