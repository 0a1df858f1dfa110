# src/wordheat/cli.py
import sys
import argparse
from pathlib import Path
from typing import Union

from colorama import just_fix_windows_console

# Module imports
from wordheat.config import DEFAULT_INPUT_FILE, MAX_LINES
from wordheat.core.reader import FileAccessError, read_file_content
from wordheat.core.counter import get_word_counts
from wordheat.core.renderer import print_colored_lines

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description=f"Print the first {MAX_LINES} lines of a text file with words colored by frequency "
                    "(blue: once, green: 2-5 times, red: more)."
    )
    parser.add_argument(
        "file",
        type=str,
        nargs="?",
        default=DEFAULT_INPUT_FILE,
        help=f"Text file to read (default: ./{DEFAULT_INPUT_FILE})"
    )
    return parser

def process_file(path: Union[str, Path] = DEFAULT_INPUT_FILE) -> None:
    """Reads the file, counts its words and prints the colored head."""
    content = read_file_content(path)
    word_counts = get_word_counts(content)
    print_colored_lines(content, word_counts)

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        # ANSI codes need enabling on legacy Windows consoles
        just_fix_windows_console()

        # 2. Read -> Count -> Render
        process_file(args.file)

    except FileAccessError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

if __name__ == "__main__":
    main()
