"""
Diagnostics for the Auralite lexer.

The lexer itself never fails: anything it does not recognize becomes an
identifier. It can still record warnings (an unterminated string, say), and
the diagnostic type defined here is shared with the parser's errors.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop transpilation.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """Helpers for building friendlier diagnostics."""

    @staticmethod
    def suggest_keyword_corrections(word: str, candidates: List[str]) -> List[str]:
        """Suggest the candidates within two edits of `word`, closest first."""
        word = word.lower()

        suggestions = [k for k in candidates if ErrorRecovery._edit_distance(word, k) <= 2]
        return sorted(suggestions, key=lambda k: (ErrorRecovery._edit_distance(word, k), k))[:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


def create_unterminated_string_warning(lexeme: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a string literal that runs to the end of its line."""
    quote = lexeme[0]
    return LexerWarning(
        message=f"Unterminated string literal: {lexeme}",
        location=location,
        code="L001",
        help_text=f"String literals should be closed with a matching {quote} quote on the same line.",
        suggestions=[f"Add a closing {quote} quote"]
    )
