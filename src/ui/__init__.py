"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with user/assistant bubbles
    - Citation labels rendered as links when they embed a URL
    - Pending indicator and disabled input while a reply is outstanding

Contains no conversation logic. Delegates submissions to ConversationStore.
"""
