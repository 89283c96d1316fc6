"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with live streaming updates and citations
    - Image attachment with preview
    - Send, stop, and clear controls

Holds no conversation logic. Renders ChatStore snapshots and forwards
user actions to ChatController.
"""
