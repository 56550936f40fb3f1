"""Static metadata describing RevealQt."""

APP_NAME = "RevealQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "RevealQt presents the final standings of a live quiz session: podium, "
    "awards, leaderboard and summary statistics, timed automatically or "
    "advanced by the presenter."
)
