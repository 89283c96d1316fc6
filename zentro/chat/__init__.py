"""Conversation state and the send pipeline.

Responsibilities:
    - Immutable transcript snapshots with update-by-id replacement
    - Pending input (draft text and one image attachment)
    - Streaming a reply into a placeholder message
    - Deduplicating citation sources by URI

Independent of NiceGUI; the UI subscribes to the store and renders.
"""
