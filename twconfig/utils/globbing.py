"""Glob helpers for descriptor content patterns.

Content patterns follow the engine's glob dialect: ``**`` matches any number of
directories, ``{a,b}`` expands to alternatives and a leading ``!`` excludes
matches of the other patterns.
"""
import glob
import os
from pathlib import Path
from typing import Iterable, List, Tuple


def _split_alternatives(body: str) -> List[str]:
    """Split a brace body on commas that are not nested in inner braces."""
    parts = []
    depth = 0
    current = []
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def expand_braces(pattern: str) -> List[str]:
    """
    Expand ``{a,b}`` groups in a glob pattern.

    Groups may be nested. A group without a comma is kept literally.

    >>> expand_braces("templates/**/*.{html,tera}")
    ['templates/**/*.html', 'templates/**/*.tera']
    """
    depth = 0
    start = None
    for index, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0:
                alternatives = _split_alternatives(pattern[start + 1:index])
                if len(alternatives) < 2:
                    start = None
                    continue
                prefix, suffix = pattern[:start], pattern[index + 1:]
                expanded: List[str] = []
                for alternative in alternatives:
                    for candidate in expand_braces(prefix + alternative + suffix):
                        if candidate not in expanded:
                            expanded.append(candidate)
                return expanded
    return [pattern]


def split_negated(patterns: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Separate include patterns from ``!``-prefixed exclude patterns."""
    includes, excludes = [], []
    for pattern in patterns:
        if pattern.startswith("!"):
            excludes.append(pattern[1:])
        else:
            includes.append(pattern)
    return includes, excludes


def normalize_pattern(pattern: str) -> str:
    """Strip a leading ``./`` so the pattern is relative to the base directory."""
    while pattern.startswith("./"):
        pattern = pattern[2:]
    return pattern


def glob_paths(base_dir: Path, pattern: str) -> List[Path]:
    """Return every path matching ``pattern`` (braces expanded) under ``base_dir``."""
    matches = set()
    for expanded in expand_braces(normalize_pattern(pattern)):
        if os.path.isabs(expanded):
            full_pattern = expanded
        else:
            # the base directory is a literal path, only the pattern carries wildcards
            full_pattern = os.path.join(glob.escape(str(base_dir)), expanded)
        for match in glob.glob(full_pattern, recursive=True):
            matches.add(Path(match).resolve())
    return sorted(matches)
