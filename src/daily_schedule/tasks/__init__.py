"""
Task subsystem.

Components:
- task_errors.py: error hierarchy shared by the store and the shell
- task_models.py: data structures (Task, Priority)
- task_factory.py: builds validated tasks from raw "HH:mm" strings
- task_store.py: in-memory schedule with overlap checks + observers
"""
