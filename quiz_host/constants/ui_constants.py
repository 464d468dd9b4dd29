"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizHost Console"
STATE_REFRESH_INTERVAL_MS: int = 250

ROOM_CODE_PLACEHOLDER: str = "Enter Room Code"
ROOM_CREATE_BUTTON: str = "Create Room"
ROOM_CAPACITY_LABEL: str = "Max players:"
ROOM_STATUS_TEMPLATE: str = "Room status: {status}"

LOBBY_TITLE: str = "Waiting Lobby"
LOBBY_EMPTY_STATE: str = "No players have joined yet."
LOBBY_COUNT_TEMPLATE: str = "{count} player(s) waiting"
LOBBY_KICK_BUTTON: str = "Kick Selected Player"

QUESTION_COUNT_LABEL: str = "Number of questions:"
QUESTION_TITLE_TEMPLATE: str = "Question {number}"
QUESTION_PLACEHOLDER: str = "Enter Question"
OPTION_PLACEHOLDER_TEMPLATE: str = "Option {number}"
CORRECT_PLACEHOLDER: str = "Correct answer (0-3)"
TIME_LIMIT_LABEL: str = "Time limit:"
BULK_PASTE_PLACEHOLDER: str = "Paste question, four options and the correct number, one per line"
BULK_PASTE_BUTTON: str = "Apply Paste"
SEND_QUESTIONS_BUTTON: str = "Send Questions and Start Quiz"

COUNTDOWN_TEMPLATE: str = "Time Left: {seconds}s"
COUNTDOWN_IDLE: str = "Countdown not running"
ROUND_TEMPLATE: str = "Round {number} of {total}"
LEADERBOARD_TITLE: str = "Leaderboard"
LEADERBOARD_FINAL_TITLE: str = "Final Ranking"
LEADERBOARD_EMPTY_STATE: str = "No scores yet."
LEADERBOARD_ROW_TEMPLATE: str = "{rank}. {glyph}{name}: {score}"

ROOM_ERROR_TITLE: str = "Room Error"
VALIDATION_ERROR_TITLE: str = "Check your input"
CONNECTION_ERROR_TITLE: str = "Connection problem"
