"""Reading dictionaries: one word per line."""
import logging
from pathlib import Path
from typing import List, Union


def parse_dictionary(text: str) -> List[str]:
    """Split text into words, one per line.

    Only line terminators are removed. Blank lines are kept as empty words,
    but a final terminator does not start another word.
    """
    words = text.split("\n")
    if words and words[-1] == "":
        words.pop()
    return [word[:-1] if word.endswith("\r") else word for word in words]


def read_dictionary(path: Union[str, Path], encoding: str = "utf-8") -> List[str]:
    """Read a dictionary file.

    Raises:
        OSError: If the file can't be opened or read
        UnicodeDecodeError: If the file isn't valid in `encoding`
    """
    with open(path, encoding=encoding, newline="") as f:
        words = parse_dictionary(f.read())
    logging.info(f"Read {len(words)} words from {path}", extra={"path": str(path), "word_count": len(words)})
    return words
