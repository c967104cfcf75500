from pathlib import Path
from typing import Iterable, List, Union


def tokenize(text: str) -> List[str]:
    """Split on runs of whitespace. Empty tokens never appear."""
    return (text or "").split()


def join_lines(lines: Iterable[str]) -> str:
    """
    Join corpus lines with a single space so words on either side of a
    line break stay separate while still counting as adjacent.
    """
    return " ".join(line.rstrip("\r\n") for line in lines)


def read_corpus(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a plain-text corpus file into one blob of text.

    Raises:
        OSError: the file is missing, unreadable or not valid `encoding`
    """
    try:
        with open(path, encoding=encoding) as fh:
            return join_lines(fh)
    except UnicodeDecodeError as exc:
        raise OSError(f"cannot decode corpus {path}: {exc}") from exc
