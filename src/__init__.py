"""Citation Chat - conversational client for a remote chat service.

Sends user messages to a JSON chat endpoint and renders the replies,
splitting out the citation footer the service appends.

Components:
    - client: Configuration, HTTP transport and conversation state
    - parsing: Citation footer parsing
    - ui: NiceGUI chat page
    - api: FastAPI host and health probe
    - models: Turn and wire schemas
"""

__version__ = "0.1.0"
