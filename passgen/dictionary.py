#!/usr/bin/env python3
"""
Passphrase Generator - Dictionaries
Fixed pools of units (words, syllables, characters) to sample from.

Supported sources:
- built-in dictionaries (EFF and Diceware word lists, BIP39 words,
  Koremutake syllables, character sets)
- external word lists, one unit per line, optionally in Diceware
  "11111<TAB>word" form
"""

import os
import re
import string
from importlib import resources
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Tuple, Union

from mnemonic import Mnemonic
from xkcdpass import xkcd_password as xp

from .exceptions import ConfigurationError, DictionaryLoadError, EmptyDictionary
from .logger import get_logger


logger = get_logger(__name__)

MAX_FILE_BYTES = 128 * 1024 * 1024

DICEWARE_LINE = re.compile(r"^\d+\s+(\S.*)$")


class Dictionary:
    """An ordered, read-only pool of at least 2 units"""

    def __init__(
        self,
        units: Iterable[str],
        name: str = "custom",
        separator: str = " ",
        description: str = "",
    ):
        self._units: Tuple[str, ...] = tuple(units)
        self.name = name
        self.separator = separator
        self.description = description
        if len(self._units) < 2:
            raise EmptyDictionary(
                f"{name}: dictionary too short ({len(self._units)} entries)",
                size=len(self._units),
                name=name,
            )

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        name: str = "custom",
        separator: str = " ",
        description: str = "",
    ) -> "Dictionary":
        """Build a dictionary from raw lines

        Lines are trimmed and blank lines dropped. Duplicates are removed
        keeping the first occurrence, since a repeated unit only lowers the
        real entropy. When every line looks like a Diceware entry the dice
        numbers are stripped, and that is logged at INFO so a list whose
        units really start with digits can be spotted.
        """
        entries = [line.strip() for line in lines]
        entries = [entry for entry in entries if entry]

        matches = [DICEWARE_LINE.match(entry) for entry in entries]
        if entries and all(matches):
            entries = [m.group(1).strip() for m in matches]
            logger.info(f"{name}: stripped Diceware roll numbers from {len(entries)} entries")

        units = list(dict.fromkeys(entries))
        if len(units) != len(entries):
            logger.warning(
                f"{name}: dropped {len(entries) - len(units)} duplicate entries"
            )
        return cls(units, name=name, separator=separator, description=description)

    def size(self) -> int:
        return len(self._units)

    def unit_at(self, index: int) -> str:
        if not 0 <= index < len(self._units):
            raise IndexError(f"index {index} outside dictionary of {len(self._units)}")
        return self._units[index]

    @property
    def units(self) -> Tuple[str, ...]:
        return self._units

    def __len__(self) -> int:
        return len(self._units)

    def __getitem__(self, index: int) -> str:
        return self.unit_at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)

    def __repr__(self) -> str:
        return f"Dictionary(name={self.name!r}, size={len(self._units)})"


# ============================================================================
# External word lists
# ============================================================================

def load_file(path: Union[str, Path], max_bytes: int = MAX_FILE_BYTES) -> Dictionary:
    """Load a line-separated word list

    Args:
        path: UTF-8 text file
        max_bytes: refuse files larger than this

    Raises:
        DictionaryLoadError: unreadable, too large or not UTF-8
        EmptyDictionary: fewer than 2 distinct entries
    """
    path = Path(path)
    try:
        file_size = path.stat().st_size
        if file_size > max_bytes:
            raise DictionaryLoadError(
                f"{path}: {file_size} bytes exceeds the {max_bytes} byte limit",
                path=str(path),
            )
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"{path}: not valid UTF-8 ({e})", path=str(path)) from e
    except OSError as e:
        raise DictionaryLoadError(f"Failed to read word list from {path}: {e}", path=str(path)) from e

    dictionary = Dictionary.from_lines(
        text.splitlines(),
        name=str(path),
        separator=" ",
        description=f"External word list {path}",
    )
    logger.info(f"Loaded {dictionary.size()} entries from {path}")
    return dictionary


# ============================================================================
# Built-in dictionaries
# ============================================================================

def _eff_words(wordfile: str) -> Callable[[], List[str]]:
    """Factory reading one of the EFF lists bundled with xkcdpass"""
    def load() -> List[str]:
        path = xp.locate_wordfile(wordfile)
        # locate_wordfile falls back to system word lists when the name is missing
        if path is None or os.path.basename(path) != wordfile:
            raise DictionaryLoadError(
                f"xkcdpass does not ship the {wordfile!r} word list", path=str(path)
            )
        try:
            with open(path, encoding="utf-8") as f:
                return f.read().splitlines()
        except OSError as e:
            raise DictionaryLoadError(f"Failed to read word list from {path}: {e}", path=path) from e
    return load


def _diceware_words() -> List[str]:
    wordlist = resources.files(__package__) / "wordlists" / "diceware.txt"
    return wordlist.read_text(encoding="utf-8").splitlines()


def _bip39_words() -> List[str]:
    return list(Mnemonic("english").wordlist)


def _koremutake_syllables() -> List[str]:
    syllables = [c + v for c in "bdfghjklmnprstv" for v in "aeiouy"]
    syllables += [c + v for c in ("br", "dr", "fr", "gr", "pr", "st") for v in "aeiouy"]
    syllables += ["tra", "tre"]
    return syllables


@dataclass(frozen=True)
class BuiltinDictionary:
    """Name, separator, description and a factory for a bundled dictionary"""
    name: str
    separator: str
    description: str
    factory: Callable[[], Iterable[str]]

    def load(self) -> Dictionary:
        return Dictionary(
            self.factory(),
            name=self.name,
            separator=self.separator,
            description=self.description,
        )


BUILTIN_DICTIONARIES: Dict[str, BuiltinDictionary] = {
    d.name: d
    for d in (
        BuiltinDictionary("eff", " ", "EFF Long Wordlist\n  https://www.eff.org/dice", _eff_words("eff-long")),
        BuiltinDictionary(
            "eff-short1", " ", "EFF Short Wordlist - Fewer, shorter words", _eff_words("eff-short"),
        ),
        BuiltinDictionary(
            "eff-short2", " ", "EFF Short Wordlist - Fewer, longer words", _eff_words("eff-special"),
        ),
        BuiltinDictionary(
            "diceware", " ",
            "Arnold G. Reinhold's Diceware word list\n  https://theworld.com/~reinhold/diceware.html",
            _diceware_words,
        ),
        BuiltinDictionary(
            "bip39", " ",
            "BIP39 English mnemonic word list\n  https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki",
            _bip39_words,
        ),
        BuiltinDictionary(
            "koremutake", " ",
            "A \"way to express any large number as a sequence of syllables\"\n  https://shorl.com/koremutake.php",
            _koremutake_syllables,
        ),
        BuiltinDictionary("alpha", "", "Lower-case a-z", lambda: string.ascii_lowercase),
        BuiltinDictionary("mixedalpha", "", "Mixed-case a-z", lambda: string.ascii_letters),
        BuiltinDictionary(
            "mixedalphanumeric", "", "Mixed-case a-z 0-9",
            lambda: string.ascii_letters + string.digits,
        ),
        BuiltinDictionary(
            "alphanumeric", "", "Lower-case a-z 0-9",
            lambda: string.ascii_lowercase + string.digits,
        ),
        BuiltinDictionary("pin", "", "Numeric", lambda: string.digits),
        BuiltinDictionary("hex", "", "Hexadecimal", lambda: "0123456789abcdef"),
        BuiltinDictionary(
            "printable", "", "Mixed-case a-z 0-9 plus standard ASCII symbols",
            lambda: string.ascii_letters + string.digits + string.punctuation,
        ),
    )
}


def list_builtin() -> List[BuiltinDictionary]:
    return list(BUILTIN_DICTIONARIES.values())


def load_builtin(name: str) -> Dictionary:
    """Load a bundled dictionary by name

    Raises:
        ConfigurationError: no built-in dictionary has that name
    """
    try:
        builtin = BUILTIN_DICTIONARIES[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown dictionary {name!r}, choose from: {', '.join(BUILTIN_DICTIONARIES)}",
            param_name="dictionary",
        ) from None
    return builtin.load()
