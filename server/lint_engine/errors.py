"""
Failure types raised by the lintface engine.

A tree full of error or missing nodes is not a failure: it surfaces as
ordinary diagnostics. These exceptions cover the cases where no diagnostic
list can be produced at all.
"""


class LintError(Exception):
    """Base class for classified engine failures."""

    kind = "lint_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedLanguageError(LintError):
    """The requested language id has no registered binding."""

    kind = "unsupported_language"

    def __init__(self, language: str):
        super().__init__(f"Unsupported language: {language}")
        self.language = language


class ParserConfigurationError(LintError):
    """The grammar for a language could not be bound to a parser."""

    kind = "parser_configuration"

    def __init__(self, language: str, reason: str):
        super().__init__(f"Failed to set tree-sitter language for {language}: {reason}")
        self.language = language
        self.reason = reason


class ParseFailureError(LintError):
    """The parser returned no tree for the given source."""

    kind = "parse_failure"

    def __init__(self, language: str):
        super().__init__(
            f"Tree-sitter failed to parse the {language} source. This may indicate "
            "highly unusual syntax or an internal tree-sitter issue."
        )
        self.language = language
