"""Timing constants for the staged results reveal (milliseconds)."""

SPLASH_DURATION_MS: int = 4000
PODIUM_DURATION_MS: int = 8000
AWARDS_REVEAL_INTERVAL_MS: int = 1500
AWARDS_HOLD_AFTER_MS: int = 3000
AWARDS_EMPTY_DURATION_MS: int = 2000
STATS_DELAY_MS: int = 1200

# Podium blocks appear 3rd, then 2nd, then 1st.
PODIUM_FIRST_REVEAL_MS: int = 100
PODIUM_STAGGER_MS: int = 400

PODIUM_SOUND_DELAY_MS: int = 300
LEADERBOARD_SOUND_DELAY_MS: int = 200

MAX_VISIBLE_RECIPIENTS: int = 3
STREAK_HIGHLIGHT_MIN: int = 3
