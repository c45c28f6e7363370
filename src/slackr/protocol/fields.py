"""Protocol constants.

Keep these in one place to avoid stringly-typed frame handling.
"""

# Envelope keys
ENVELOPE_ID = "envelope_id"
TYPE = "type"
PAYLOAD = "payload"

# Payload keys
EVENT = "event"
EVENT_ID = "event_id"

# Event keys
USER = "user"
TEXT = "text"
CHANNEL = "channel"

# Event types
MESSAGE = "message"

# Web API methods
CONNECTIONS_OPEN = "apps.connections.open"
USERS_LIST = "users.list"
CONVERSATIONS_LIST = "conversations.list"
POST_MESSAGE = "chat.postMessage"
