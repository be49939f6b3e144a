"""
Task subsystem.

Components:
- task_models.py: data structures (Task, StoreState)
- task_store.py: ordered in-memory store that persists after every mutation
"""
