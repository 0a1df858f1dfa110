# src/wordheat/config.py

# Input file read from the current working directory
DEFAULT_INPUT_FILE = "declaration.txt"

# Only the head of the file is rendered
MAX_LINES = 15

# Frequency buckets: 1 -> rare, up to COMMON_MAX_COUNT -> common, else frequent
RARE_MAX_COUNT = 1
COMMON_MAX_COUNT = 5
