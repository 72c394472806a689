"""Depth-aware splitting of a middleware argument list.

A span such as ``requireAuth, upload.single('file'), requireAdmin`` is split
on commas that sit outside any call expression, so nested argument lists stay
attached to their middleware.
"""

import re

# Handler parameters like `req`, `res` or `(req: Request, res)` that the
# route pattern can pull into the span. Whole identifiers only, so that
# `requireAuth` or `resolveTenant` survive.
HANDLER_PARAM_MARKER = re.compile(r"\b(?:req|res)\b")


def split_middleware(span: str) -> list[str]:
    """Split a middleware span on top-level commas.

    Unbalanced parentheses are tolerated: depth may go negative and splitting
    simply continues wherever depth is zero.
    """
    segments = []
    depth = 0
    current: list[str] = []

    for char in span:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            segments.append("".join(current))
            current = []
            continue
        current.append(char)

    segments.append("".join(current))
    return [s.strip() for s in segments if _is_middleware(s.strip())]


def _is_middleware(segment: str) -> bool:
    return bool(segment) and not HANDLER_PARAM_MARKER.search(segment)
