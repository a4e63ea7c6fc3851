"""Building the HTML rule overview report."""

import logging
from collections.abc import Iterable
from datetime import date
from html import escape
from pathlib import Path

from omegaconf import DictConfig
from tqdm.auto import tqdm

from .constants import GRAMMAR_FILE_NAME
from .data_models import Contributor, Language, ReportRow
from .languages import get_sorted_languages, is_auto_detected, load_languages
from .rule_counting import (
    count_false_friends,
    count_java_rules,
    count_xml_rules,
    read_rule_file,
)

logger = logging.getLogger(__name__)

CELL = '<td valign="top">{}</td>'
NUMBER_CELL = '<td valign="top" align="right">{}</td>'
LEFT_CELL = '<td valign="top" align="left">{}</td>'


class NoJavaRulesFoundError(RuntimeError):
    """Raised when none of the languages has a Java rule directory."""


def build_report(config: DictConfig, today: date | None = None) -> str:
    """Build the HTML report listing the rules of every language.

    Args:
        config:
            The Hydra configuration object.
        today:
            The date to show in the report. Defaults to the current date.

    Returns:
        The HTML report.

    Raises:
        NoJavaRulesFoundError:
            If no language has a Java rule directory, which means that the rule
            data has not been set up.
    """
    languages = get_sorted_languages(languages=load_languages(config=config))

    false_friends_path = Path(config.false_friends_file)
    false_friend_rules = read_rule_file(path=false_friends_path)
    if false_friend_rules is None:
        logger.warning(
            f"The false friends file {false_friends_path} does not exist, so no "
            "false friends, auto-detection or maintainers will be shown."
        )

    lines = [render_header(config=config, today=today or date.today())]
    num_languages_with_java_rules = 0
    for language in tqdm(languages, desc="Counting rules"):
        row = compute_report_row(
            language=language,
            config=config,
            false_friend_rules=false_friend_rules,
            supported_codes=config.auto_detected_codes,
        )
        if row.java_rule_count is not None:
            num_languages_with_java_rules += 1
        lines.append(render_row(row=row, config=config))

    if num_languages_with_java_rules == 0:
        logger.error(
            f"None of the {len(languages):,} languages has a Java rule directory "
            f"in {config.java_rules_dir}."
        )
        raise NoJavaRulesFoundError("No Java rules found")

    lines.append(render_footer())
    logger.info(f"Built the rule overview for {len(languages):,} languages.")
    return "\n".join(lines) + "\n"


def compute_report_row(
    language: Language,
    config: DictConfig,
    false_friend_rules: str | None,
    supported_codes: Iterable[str],
) -> ReportRow:
    """Count the rules of a single language.

    Args:
        language:
            The language to count the rules for.
        config:
            The Hydra configuration object.
        false_friend_rules:
            The stripped content of the false friends file, or None if it does
            not exist.
        supported_codes:
            The codes supported by the language identifier.

    Returns:
        The report row for the language.
    """
    grammar_path = Path(config.rules_dir, language.code, GRAMMAR_FILE_NAME)
    xml_rules = read_rule_file(path=grammar_path)
    if xml_rules is None:
        logger.info(f"No grammar file for {language.name} at {grammar_path}.")
        xml_rule_count = None
    else:
        xml_rule_count = count_xml_rules(text=xml_rules)

    java_dir = Path(config.java_rules_dir, language.code)
    if java_dir.is_dir():
        java_rule_count = count_java_rules(directory=java_dir)
    else:
        logger.info(f"No Java rule directory for {language.name} at {java_dir}.")
        java_rule_count = None

    false_friend_count = None
    if false_friend_rules is not None:
        false_friend_count = count_false_friends(
            text=false_friend_rules, code=language.code
        )

    return ReportRow(
        language=language,
        xml_rule_count=xml_rule_count,
        java_rule_count=java_rule_count,
        false_friend_count=false_friend_count,
        auto_detected=is_auto_detected(
            code=language.code, supported_codes=supported_codes
        ),
        has_website=language.has_website(website_dir=Path(config.website_dir)),
    )


def render_header(config: DictConfig, today: date) -> str:
    """Render the banner and the table header of the report.

    Args:
        config:
            The Hydra configuration object.
        today:
            The date to show in the banner.

    Returns:
        The HTML preceding the table rows.
    """
    return "\n".join(
        [
            f"<b>Rules in {escape(config.product_name)} {escape(str(config.version))}"
            "</b><br />",
            f"Date: {today:%Y-%m-%d}<br /><br />",
            "",
            '<table class="tablesorter sortable">',
            "<thead>",
            "<tr>",
            "  <th valign='bottom' width=\"70\">Language</th>",
            "  <th valign='bottom' align=\"left\" width=\"60\">XML<br/>rules</th>",
            "  <th></th>",
            '  <th align="left" width="60">Java<br/>rules</th>',
            '  <th align="left" width="60">False<br/>friends</th>',
            "  <th valign='bottom' width=\"65\">Auto-<br/>detected</th>",
            "  <th valign='bottom' align=\"left\">Rule Maintainers</th>",
            "</tr>",
            "</thead>",
            "<tbody>",
        ]
    )


def render_row(row: ReportRow, config: DictConfig) -> str:
    """Render a single table row.

    Args:
        row:
            The counts of the language.
        config:
            The Hydra configuration object.

    Returns:
        The `<tr>` element for the language.
    """
    code = row.language.code
    name = escape(row.language.name)
    if row.has_website:
        cells = [CELL.format(f'<a href="../{escape(code)}/">{name}</a>')]
    else:
        cells = [CELL.format(name)]

    # The show/browse links are only meaningful if the grammar file exists
    if row.xml_rule_count is None:
        cells.append(NUMBER_CELL.format(0))
    else:
        source_url = escape(config.source_url_template.format(code=code))
        browse_url = escape(config.browse_url_template.format(code=code))
        cells.append(NUMBER_CELL.format(row.xml_rule_count))
        cells.append(
            NUMBER_CELL.format(
                f'<a href="{source_url}">show</a>/<a href="{browse_url}">browse</a>'
            )
        )

    cells.append(NUMBER_CELL.format(row.java_rule_count or 0))

    if row.false_friend_count is None:
        cells.append(NUMBER_CELL.format(0))
    else:
        cells.append(NUMBER_CELL.format(row.false_friend_count))
        cells.append(CELL.format("yes" if row.auto_detected else "-"))
        cells.append(
            LEFT_CELL.format(render_maintainers(maintainers=row.language.maintainers))
        )

    return "<tr>" + "".join(cells) + "</tr>"


def render_maintainers(maintainers: Iterable[Contributor]) -> str:
    """Render the maintainers of a language as a comma-separated list.

    Args:
        maintainers:
            The maintainers to render.

    Returns:
        The HTML for the maintainers, which is empty if there are none.
    """
    entries: list[str] = list()
    for maintainer in maintainers:
        entry = escape(maintainer.name)
        if maintainer.url is not None:
            entry = f'<a href="{escape(maintainer.url)}">{entry}</a>'
        if maintainer.remark is not None:
            entry += f"&nbsp;({escape(maintainer.remark)})"
        entries.append(entry)
    return ", ".join(entries)


def render_footer() -> str:
    """Render the end of the table."""
    return "</tbody>\n</table>"
