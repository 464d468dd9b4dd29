"""Network configuration and event names for the coordinating service."""

DEFAULT_SERVER_URL: str = "http://localhost:4000"
CONNECT_WAIT_TIMEOUT_SECONDS: int = 5

# Outbound
EVENT_CREATE_ROOM: str = "create-room"
EVENT_JOIN: str = "join"
EVENT_SEND_QUESTIONS: str = "send-multiple-questions"
EVENT_START_QUIZ: str = "start-quiz"
EVENT_KICK_PLAYER: str = "kick-player"

# Inbound
EVENT_LOBBY_UPDATE: str = "lobby-update"
EVENT_ROOM_ERROR: str = "room-error"
EVENT_SCORE_SNAPSHOT: str = "score-snapshot"
EVENT_SESSION_ENDED: str = "session-ended"
EVENT_NEW_QUESTION: str = "new-question"
