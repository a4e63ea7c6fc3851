"""Overview of the rules available for each language of the grammar checker."""
