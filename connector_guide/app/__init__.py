"""
App Package

Application shell modules.

Structure:
- routing.py: Query-parameter routing (page, language, connector id)
- sidebar.py: Sidebar rendering and controls
"""

__all__ = []
