"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_store.py: SQLite-backed storage
- task_service.py: validation and the create/toggle transitions
- task_seeds.py: sample data for local runs
"""
