"""
------------------------------------------------------------------------------
Project:        EstateBook
File:           core/parser/tokenizer.py
Version:        1.0.0
Description:    Splits an argument string such as 'n/John p/123 t/friend' into
                a preamble and prefix -> values mapping. A prefix is only
                recognised at the start of the string or after whitespace.
------------------------------------------------------------------------------
"""

import re
from collections import defaultdict
from typing import Dict, List, Optional

from core.exceptions import ParseError
from core.messages import MESSAGE_DUPLICATE_PREFIXES
from core.parser.cli_syntax import Prefix


class ArgumentMultimap:
    """Stores every value given for each prefix, in input order."""

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: Dict[Prefix, List[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """Returns the last value given for prefix, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> List[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return bool(self._values.get(prefix))

    def get_preamble(self) -> str:
        return self._preamble

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_PREFIXES.format(" ".join(str(p) for p in duplicated)))


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Tokenizes args_string against the given prefixes.
    Unknown 'x/' tokens are not prefixes and stay part of the preceding value.
    """
    if not prefixes:
        return ArgumentMultimap(args_string.strip())

    by_text = {p.prefix: p for p in prefixes}
    # Longest first so that e.g. 'ah/' is never shadowed by a shorter prefix
    alternatives = sorted(by_text, key=len, reverse=True)
    pattern = re.compile(r"(?<!\S)(" + "|".join(re.escape(a) for a in alternatives) + ")")

    matches = list(pattern.finditer(args_string))
    if not matches:
        return ArgumentMultimap(args_string.strip())

    multimap = ArgumentMultimap(args_string[:matches[0].start()].strip())
    for position, match in enumerate(matches):
        end = matches[position + 1].start() if position + 1 < len(matches) else len(args_string)
        multimap.put(by_text[match.group(1)], args_string[match.end():end].strip())
    return multimap
