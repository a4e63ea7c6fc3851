"""Print an HTML overview of the rules available for each language.

Usage:
    uv run src/scripts/build_rule_overview.py <config_key>=<config_value> ...
"""

import logging

import hydra
from dotenv import load_dotenv
from omegaconf import DictConfig

from rule_overview.report_building import build_report

load_dotenv()

logger = logging.getLogger("build_rule_overview")


@hydra.main(config_path="../../config", config_name="overview", version_base=None)
def main(config: DictConfig) -> None:
    """Main function.

    Args:
        config:
            The Hydra config for your project.
    """
    logger.info(f"Building the rule overview for {config.project_dir}...")
    report = build_report(config=config)
    print(report, end="")


if __name__ == "__main__":
    main()
