"""Static metadata describing QuizHost."""

APP_NAME = "QuizHost"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizHost is a host console for live quiz rooms built with Qt and Socket.IO. "
    "Create a room, watch players join, push a batch of questions and follow the leaderboard."
)

HELP_TEXT = (
    "1. Enter a room code and capacity, then create the room.\n"
    "2. Choose how many questions to ask. Changing the number clears the editor.\n"
    "3. Fill in each question, or paste six lines into the bulk box:\n\n"
    "Capital of France?\n"
    "Paris\nRome\nBerlin\nMadrid\n0\n\n"
    "The last line is the number (0-3) of the correct option.\n"
    "4. Send the questions. The quiz starts right away and the countdown begins."
)
