"""Pattern tables used by the commit message checks.

All heuristics live here so they can be tuned without touching the
validation chain.
"""
import re

CONVENTIONAL_TYPES = (
    "feat", "fix", "docs", "style", "refactor", "perf",
    "test", "build", "ci", "chore", "revert",
)

_TYPES = "|".join(CONVENTIONAL_TYPES)

# #123, GH-456, JIRA-789 (prefix needs at least two letters)
REFERENCE_PATTERN = re.compile(r"(#\d+|\bgh-\d+|\b[a-z]{2,}-\d+)", re.IGNORECASE)

CONVENTIONAL_PATTERN = re.compile(rf"^({_TYPES})(\(.+\))?!?: .+")

# Prefix stripped before looking at the first word of the description
CONVENTIONAL_PREFIX_PATTERN = re.compile(
    rf"^(?:{_TYPES})(?:\([^)]+\))?!?:\s*", re.IGNORECASE
)

VAGUE_VERBS = (
    r"fix(?:ed|es|ing)?",
    r"update[ds]?",
    r"change[ds]?",
    r"modif(?:y|ied|ies)",
    r"tweak(?:ed|s)?",
    r"adjust(?:ed|s)?",
)

VAGUE_OBJECTS = (
    "it", "this", "that", "thing", "stuff", "code",
    "bug", "issue", "error", "problem",
)

# Words that carry no information wherever they appear
VAGUE_WORDS = ("stuff", "things", "misc", "various")

# Subjects made up of nothing but one of these
GENERIC_SUBJECTS = (
    "update", "updates", "fix", "fixes", "change", "changes",
    "cleanup", "tweak", "tweaks", "wip", "tmp", "temp", "commit",
)

VAGUE_PATTERNS = (
    re.compile(
        rf"\b({'|'.join(VAGUE_VERBS)})\s+({'|'.join(VAGUE_OBJECTS)})s?\b",
        re.IGNORECASE,
    ),
    re.compile(rf"\b({'|'.join(VAGUE_WORDS)})\b", re.IGNORECASE),
    re.compile(
        rf"^\s*({'|'.join(GENERIC_SUBJECTS)})\s*[.!]*\s*$", re.IGNORECASE
    ),
)

# "wip" as a word anywhere, so "[WIP]", "(wip)" and "WIP:" all match
WIP_PATTERN = re.compile(
    r"(\bwip\b|\bwork.?in.?progress\b|^fixup!|^squash!|^amend!"
    r"|\bdo\s*not\s*merge\b|\bdon'?t\s*merge\b)",
    re.IGNORECASE,
)

NON_IMPERATIVE_SUFFIXES = ("ed", "ing", "s")

# Endings that look like tense/agreement markers but usually are not
IMPERATIVE_ENDINGS = ("ss", "us", "is")

# Imperative verbs that happen to end in a non-imperative suffix
IMPERATIVE_EXCEPTIONS = frozenset({
    "bring", "embed", "exceed", "feed", "need", "ping", "proceed",
    "seed", "shed", "shred", "sing", "speed", "string", "succeed",
    "swing", "wring",
})

FIRST_WORD_PATTERN = re.compile(r"[A-Za-z][A-Za-z'-]*")
