"""Constants used in the project."""

import re

# The demo language is a placeholder used by the grammar checker's own tests
DEMO_LANGUAGE_CODE = "xx"

# Codes the language identifier handles on top of its own supported languages
ADDITIONAL_AUTO_DETECTED_CODES = frozenset(
    {"be", "ca", "eo", "gl", "ro", "sk", "sl", "uk"}
)

GRAMMAR_FILE_NAME = "grammar.xml"
JAVA_SOURCE_SUFFIX = ".java"

COMMENT_REGEX = re.compile(r"<!--.*?-->", flags=re.DOTALL)
RULES_TAG_REGEX = re.compile(r"<rules.*?>", flags=re.DOTALL)

RULE_MARKER = "<rule "
RULE_GROUP_RULE_MARKER = "<rule>"
FALSE_FRIEND_MARKER_TEMPLATE = '<pattern lang="{code}'
