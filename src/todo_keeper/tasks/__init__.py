"""
Task subsystem.

Components:
- task_models.py: the Task record, its display/file forms and parse errors
- task_store.py: in-memory store + flat-file load/save
"""
