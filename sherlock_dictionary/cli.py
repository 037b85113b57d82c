#!/usr/bin/env python3
"""
sherlock-dictionary
===================
Look up a word with the free Dictionary API (https://dictionaryapi.dev/) and
print one JSON line for the Sherlock launcher's pipe mode.

Usage:
    sherlock-dictionary <word>

The launcher reads stdout, so keep the contract minimal:
exit code 0 -> one JSON envelope printed (lookup errors included)
exit code 1 -> missing word or network failure, nothing on stdout
"""
from __future__ import annotations

import sys
from typing import List, Optional

import requests

from sherlock_dictionary.classify import respond
from sherlock_dictionary.lookup import InvalidTemplate, fetch

USAGE = "Error: No word provided. Usage: sherlock-dictionary <word_to_define>"


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv if argv is None else argv
    if len(argv) < 2:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    word = argv[1]

    try:
        status, body = fetch(word)
    except requests.RequestException as exc:
        print(f"[ERROR] Network error: {exc}", file=sys.stderr)
        sys.exit(1)
    except InvalidTemplate as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        sys.exit(1)

    print(respond(word, status, body).to_json())


if __name__ == "__main__":  # pragma: no cover
    main()
