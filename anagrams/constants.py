"""Word list locations used when no explicit path is given."""

from pathlib import Path

# Repository-level data directory (not shipped; see load_default_dictionary)
DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"

# One lowercase word per line, as distributed with most Linux systems
WORDLIST_NAME = "linuxwords.txt"
DEFAULT_WORDLIST: Path = DATA_DIR / WORDLIST_NAME
