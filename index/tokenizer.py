from __future__ import annotations

import re

# whitespace plus . , ! ? ; : ( ) [ ] { } " '
_SPLIT = re.compile(r"[\s.,!?;:()\[\]{}\"']+")


def tokenize(text: str) -> list[str]:
    return [t for t in _SPLIT.split(text.lower()) if t]
