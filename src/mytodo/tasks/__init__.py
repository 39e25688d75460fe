"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: in-memory storage with id allocation
"""
