"""Default LanguageTool rules to disable and words to ignore.

Rules already covered by the built-in detectors are disabled by default.
"""

# Default rules to disable (can be extended via ``LanguageToolManager``)
DEFAULT_DISABLED_RULES = {
    "WHITESPACE_RULE",
    "CONSECUTIVE_SPACES",
    "SENTENCE_WHITESPACE",
    "DOUBLE_PUNCTUATION",
    "EN_EXCESSIVE_EXCLAMATION",
    "ENGLISH_WORD_REPEAT_BEGINNING_RULE",
    "UPPERCASE_SENTENCE_START",
    "DASH_RULE",
    "EN_UNPAIRED_BRACKETS",
}


# Default words to ignore (case-sensitive). Acronyms also match their plural
# form, so "CV" covers "CVs".
DEFAULT_IGNORED_WORDS = {
    # --- Workplace acronyms ---
    "HR", "CV", "ASAP", "FYI", "TMI", "PTO", "OOO", "KPI",

    # --- Academic shorthand ---
    "et", "al", "PhD", "MSc", "BSc", "APA", "MLA", "DOI",
}
