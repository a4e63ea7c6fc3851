"""Loading the languages of the grammar checker."""

import logging
from collections.abc import Iterable

from omegaconf import DictConfig, ListConfig

from .constants import ADDITIONAL_AUTO_DETECTED_CODES, DEMO_LANGUAGE_CODE
from .data_models import Contributor, Language

logger = logging.getLogger(__name__)


def load_languages(config: DictConfig) -> list[Language]:
    """Load the languages from the configuration.

    Args:
        config:
            The Hydra configuration object.

    Returns:
        The languages, in the order they are configured.
    """
    languages = [
        Language(
            code=language_config.code,
            name=language_config.name,
            maintainers=load_maintainers(
                maintainer_configs=language_config.get("maintainers") or []
            ),
        )
        for language_config in config.languages
    ]
    logger.info(f"Loaded {len(languages):,} languages from the configuration.")
    return languages


def load_maintainers(
    maintainer_configs: ListConfig | list[DictConfig],
) -> list[Contributor]:
    """Load the maintainers of a language.

    Args:
        maintainer_configs:
            The maintainer entries, each with a `name` and an optional `url` and
            `remark`.

    Returns:
        The maintainers.
    """
    return [
        Contributor(
            name=maintainer_config.name,
            url=maintainer_config.get("url"),
            remark=maintainer_config.get("remark"),
        )
        for maintainer_config in maintainer_configs
    ]


def get_sorted_languages(languages: Iterable[Language]) -> list[Language]:
    """Sort the languages by display name, leaving out the demo language.

    Args:
        languages:
            The languages to sort.

    Returns:
        The sorted languages.
    """
    return sorted(
        (language for language in languages if language.code != DEMO_LANGUAGE_CODE),
        key=lambda language: language.name,
    )


def is_auto_detected(code: str, supported_codes: Iterable[str]) -> bool:
    """Whether automatic language identification supports a language.

    Args:
        code:
            The language code.
        supported_codes:
            The codes supported by the language identifier.

    Returns:
        True if the code is supported by the language identifier, or if it is
        one of the additional codes handled on top of it.
    """
    return code in set(supported_codes) or code in ADDITIONAL_AUTO_DETECTED_CODES
