"""Data models used in the project."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Contributor:
    """A maintainer of the rules for a language.

    Attributes:
        name:
            The name of the contributor.
        url:
            An optional URL to the contributor's home page.
        remark:
            An optional remark, shown in parentheses after the name.
    """

    name: str
    url: str | None = None
    remark: str | None = None


@dataclass(frozen=True)
class Language:
    """A language supported by the grammar checker.

    Attributes:
        code:
            The short code of the language, e.g. 'en' or 'de'.
        name:
            The display name of the language.
        maintainers:
            The rule maintainers of the language. May be empty.
    """

    code: str
    name: str
    maintainers: list[Contributor] = field(default_factory=list)

    def has_website(self, website_dir: Path) -> bool:
        """Whether a language-specific website directory exists.

        Args:
            website_dir:
                The root directory of the website.

        Returns:
            True if `website_dir/<code>` is a directory.
        """
        return Path(website_dir, self.code).is_dir()


@dataclass
class ReportRow:
    """The counts shown for a single language in the report.

    A count is None when its input file or directory does not exist.

    Attributes:
        language:
            The language the row describes.
        xml_rule_count:
            The number of pattern-based rules in the grammar file.
        java_rule_count:
            The number of programmatic rules in the Java rule directory.
        false_friend_count:
            The number of false-friend patterns tagged with the language.
        auto_detected:
            Whether automatic language identification supports the language.
        has_website:
            Whether the language has its own website directory.
    """

    language: Language
    xml_rule_count: int | None
    java_rule_count: int | None
    false_friend_count: int | None
    auto_detected: bool
    has_website: bool
