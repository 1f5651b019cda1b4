"""Splitting of comma separated, parenthesised element strings such as ``"(1,2)"``."""

from __future__ import annotations


def _remove_pars(s: str) -> str:
    """Strip the outer parentheses that enclose the whole of ``s``."""
    length = len(s)
    outer = 0
    while (
        length >= outer * 2
        and outer < length
        and s[outer] == "("
        and s[length - 1 - outer] == ")"
    ):
        outer += 1

    depth = 0
    min_depth = 0
    for ch in s[outer:length - 2 * outer]:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        min_depth = min(min_depth, depth)

    strip = outer + min_depth
    if strip < 0:
        raise ValueError(f"unbalanced parentheses in {s!r}")
    if strip == 0:
        return s
    return s[strip:length - strip]


def split_par_str(s: str) -> list[str]:
    """Split ``s`` on top-level commas, dropping whitespace and enclosing parentheses.

    A string that is a single parenthesised group is unwrapped and split again,
    so ``"((1,2))"`` gives ``["1", "2"]``.
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in s:
        if ch.isspace():
            continue
        if ch == "," and depth == 0:
            parts.append(_remove_pars("".join(current)))
            current = []
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        current.append(ch)
    parts.append(_remove_pars("".join(current)))

    if len(parts) > 1:
        return parts

    inner = _remove_pars(parts[0])
    stripped = "".join(ch for ch in s if not ch.isspace())
    if inner == stripped:
        return [inner]
    return split_par_str(inner)