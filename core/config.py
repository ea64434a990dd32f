"""Configuration constants for tango application."""

LEVELS = (1, 2, 3)
DIRECTIONS = ('ja2en', 'en2ja')
MODES = ('mc10', 'type10', 'mix10')

# Session plan
SESSION_LENGTH = 10
MIXED_VERB_COUNT = 5      # Verb-form questions in a mixed session
MIXED_SERIES_COUNT = 5    # Series questions in a mixed session

# Rank criteria
ROLLING_N = 50                # Max recent answers kept in the rolling window
MIN_HISTORY_FOR_RANK = 30     # Answers needed before rank can change
PROMOTE_ACC = 0.85            # Accuracy at or above this promotes
DEMOTE_ACC = 0.70             # Accuracy below this demotes
MIN_RANK = 1

# Selection bounds
UNIQUE_PICK_ATTEMPTS = 3000
VERB_PICK_ATTEMPTS = 4000
SERIES_PICK_ATTEMPTS = 1000
DISTRACTOR_ATTEMPTS = 9000
SERIES_DISTRACTOR_ATTEMPTS = 12000
DISTRACTOR_COUNT = 3

# Corpus thresholds
MIN_SERIES_SIZE = 8
MIN_VERB_CANDIDATES = 10
DEFAULT_SERIES = '名詞/その他'

# Persistence
STORAGE_KEY = 'jh_vocab_v4_state'

# Console pacing between answer feedback and the next question
AUTO_NEXT_MS = 1200
