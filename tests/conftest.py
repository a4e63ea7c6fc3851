"""Fixtures shared by the tests."""

from pathlib import Path

import pytest
from omegaconf import DictConfig, OmegaConf

ENGLISH_GRAMMAR = """<?xml version="1.0" encoding="UTF-8"?>
<!-- <rule id="COMMENTED_OUT"> must not be counted -->
<rules lang="en" xsi:noNamespaceSchemaLocation="../rules.xsd">
  <category name="Miscellaneous">
    <rule id="EN_A_VS_AN" name="a/an">
      <pattern><token>a</token></pattern>
    </rule>
    <rulegroup id="EN_GROUP" name="group">
      <rule>
        <pattern><token>b</token></pattern>
      </rule>
      <rule>
        <pattern><token>c</token></pattern>
      </rule>
    </rulegroup>
  </category>
</rules>
"""

GERMAN_GRAMMAR = """<?xml version="1.0" encoding="UTF-8"?>
<rules lang="de">
  <category name="Grammatik">
    <rule id="DE_AGREEMENT" name="Kongruenz">
      <pattern><token>der</token></pattern>
    </rule>
  </category>
</rules>
"""

FALSE_FRIENDS = """<?xml version="1.0" encoding="UTF-8"?>
<rules>
  <rulegroup id="GIFT">
    <rule>
      <pattern lang="en"><token>gift</token></pattern>
      <translation lang="de">Geschenk</translation>
    </rule>
    <rule>
      <pattern lang="de"><token>Gift</token></pattern>
      <translation lang="en">poison</translation>
    </rule>
  </rulegroup>
  <!-- <pattern lang="en"><token>commented</token></pattern> -->
  <rulegroup id="BECOME">
    <rule>
      <pattern lang="en"><token>become</token></pattern>
      <translation lang="de">werden</translation>
    </rule>
  </rulegroup>
</rules>
"""


@pytest.fixture
def grammar_checker_dir(tmp_path: Path) -> Path:
    """A grammar checker checkout with rules for English and German."""
    rules_dir = tmp_path / "src" / "rules"
    for code, grammar in [("en", ENGLISH_GRAMMAR), ("de", GERMAN_GRAMMAR)]:
        (rules_dir / code).mkdir(parents=True)
        (rules_dir / code / "grammar.xml").write_text(grammar, encoding="utf-8")
    (rules_dir / "false-friends.xml").write_text(FALSE_FRIENDS, encoding="utf-8")

    java_rules_dir = tmp_path / "src" / "java" / "org" / "languagetool" / "rules"
    java_files = {
        "en": ["EnglishRule.java", "AvsAnRule.java", "CompoundRule.java", "notes.txt"],
        "de": ["GermanRule.java"],
    }
    for code, file_names in java_files.items():
        (java_rules_dir / code).mkdir(parents=True)
        for file_name in file_names:
            (java_rules_dir / code / file_name).write_text("", encoding="utf-8")

    (tmp_path / "website" / "www" / "en").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def config(grammar_checker_dir: Path) -> DictConfig:
    """A configuration pointing at the grammar checker checkout."""
    return OmegaConf.create(
        {
            "project_dir": str(grammar_checker_dir),
            "rules_dir": "${project_dir}/src/rules",
            "java_rules_dir": "${project_dir}/src/java/org/languagetool/rules",
            "website_dir": "${project_dir}/website/www",
            "false_friends_file": "${rules_dir}/false-friends.xml",
            "product_name": "LanguageTool",
            "version": "1.0",
            "source_url_template": "http://example.org/src/rules/{code}/grammar.xml",
            "browse_url_template": "http://example.org/rule/list?lang={code}",
            "auto_detected_codes": ["de", "en"],
            "languages": [
                {
                    "code": "en",
                    "name": "English",
                    "maintainers": [
                        {"name": "Marcin Miłkowski", "url": "http://marcinmilkowski.pl"}
                    ],
                },
                {
                    "code": "de",
                    "name": "German",
                    "maintainers": [
                        {"name": "Daniel Naber", "url": "http://www.danielnaber.de"}
                    ],
                },
                {
                    "code": "fr",
                    "name": "French",
                    "maintainers": [
                        {"name": "Dominique Pellé"},
                        {"name": "Agnes Souque", "remark": "until 2007"},
                    ],
                },
                {"code": "ca", "name": "Catalan"},
                {"code": "xx", "name": "Testlanguage"},
            ],
        }
    )
