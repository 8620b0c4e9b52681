import os

# Number of words per group
GROUPING: int = 3

# Number of groupings to return
TOP: int = 100

# Bytes pulled from the source per read
CHUNK_SIZE: int = 64 * 1024

# Largest buffered word the scanner accepts before giving up
MAX_TOKEN_SIZE: int = 64 * 1024

# Progress logging (set WORDY_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("WORDY_VERBOSE") == "1"
