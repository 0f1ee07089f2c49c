"""
Console to-do list manager.

Subpackages:
- tasks/: in-memory task store and list/number helpers
- core/: application state and ports
- cli/: entrypoint, composition root, numbered menu commands
- connectors/: interactive console loop
"""
