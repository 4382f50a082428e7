"""
Task subsystem.

Components:
- task_models.py: the Task record and title normalization
- task_codec.py: JSON encode/decode of the whole task list
- task_persistence.py: save/load of the list under one fixed key
- task_store.py: the ordered list and its mutations
"""
