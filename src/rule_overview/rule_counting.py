"""Counting the rules defined in rule files and rule directories."""

import logging
from pathlib import Path

from .constants import (
    COMMENT_REGEX,
    FALSE_FRIEND_MARKER_TEMPLATE,
    JAVA_SOURCE_SUFFIX,
    RULE_GROUP_RULE_MARKER,
    RULE_MARKER,
    RULES_TAG_REGEX,
)

logger = logging.getLogger(__name__)


def strip_rule_markup(text: str) -> str:
    """Remove comments and the opening `<rules ...>` tag from a rule file.

    Args:
        text:
            The raw content of the rule file.

    Returns:
        The content with all comments and the wrapper tag removed.
    """
    text = COMMENT_REGEX.sub("", text)
    return RULES_TAG_REGEX.sub("", text)


def read_rule_file(path: Path) -> str | None:
    """Read a rule file and strip its markup.

    Args:
        path:
            The path to the rule file.

    Returns:
        The stripped content, or None if the file does not exist.
    """
    if not path.is_file():
        return None
    return strip_rule_markup(path.read_text(encoding="utf-8"))


def count_occurrences(text: str, marker: str) -> int:
    """Count the non-overlapping, case-sensitive occurrences of a marker."""
    return text.count(marker)


def count_xml_rules(text: str) -> int:
    """Count the pattern-based rules in a stripped grammar file.

    Both stand-alone rules (`<rule id=...>`) and rules inside a rule group
    (`<rule>`) are counted.

    Args:
        text:
            The grammar file content, with markup stripped.

    Returns:
        The number of rules.
    """
    return count_occurrences(text=text, marker=RULE_MARKER) + count_occurrences(
        text=text, marker=RULE_GROUP_RULE_MARKER
    )


def count_false_friends(text: str, code: str) -> int:
    """Count the false-friend patterns written in a given language.

    Args:
        text:
            The false-friends file content, with markup stripped.
        code:
            The language code. Matched as a prefix of the `lang` attribute.

    Returns:
        The number of patterns.
    """
    marker = FALSE_FRIEND_MARKER_TEMPLATE.format(code=code)
    return count_occurrences(text=text, marker=marker)


def is_java_source(path: Path) -> bool:
    """Whether a path names a Java source file."""
    return path.name.endswith(JAVA_SOURCE_SUFFIX)


def count_java_rules(directory: Path) -> int:
    """Count the programmatic rules in a language's rule directory.

    Every directory holds the `<Language>Rule.java` base class, which is not a
    rule itself, so it is subtracted from the number of source files.

    Args:
        directory:
            The Java rule directory of the language.

    Returns:
        The number of Java rules.
    """
    java_files = list(filter(is_java_source, directory.iterdir()))
    if not java_files:
        logger.warning(
            f"No Java source files in {directory}, so the base rule class is "
            "missing and the count will be negative."
        )
    return len(java_files) - 1
