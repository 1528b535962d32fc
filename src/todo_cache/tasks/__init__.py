"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- errors.py: error taxonomy shared by the cache and its helpers
- task_cache.py: in-memory task repository (TaskCache)
- task_api.py: small high-level helpers used by the rest of the app
"""
