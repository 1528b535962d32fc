"""
In-memory to-do task repository.

Packages:
- tasks/: task record, error taxonomy, TaskCache and helpers
- core/: AppState context and the TaskRepo port
- cli/: composition root, slash commands, console entrypoint
- connectors/: interactive console loop
"""
