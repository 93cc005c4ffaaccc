"""
Phrase substitution rules for Auralite expressions.

Expressions reach the generator as raw text. These rules turn the dialect's
idioms into JavaScript by ordered find/replace. Order matters: every rule
sees the output of the rules before it.

Author: xwest
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Pattern, Tuple


@dataclass(frozen=True)
class RewriteRule:
    """A single regex find/replace over expression text."""
    name: str
    pattern: Pattern
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str) -> RewriteRule:
    return RewriteRule(name, re.compile(r'\b' + pattern), replacement)


# Between a phrase and what follows it: whitespace, or nothing before `(`
_GAP = r'(?:\s+|(?=\())'


@lru_cache(maxsize=None)
def expression_rules(loop_variable: str = "item") -> Tuple[RewriteRule, ...]:
    """
    The ordered expression rules.

    Args:
        loop_variable: Iteration variable used by the `loop through` rule

    Returns:
        Rules in the order they must be applied
    """
    return (
        _rule("create_function", r'create a function (\w+)', r'function \1()'),
        _rule("build_class", r'build a class (\w+)', r'class \1'),
        _rule("when_then", rf'when{_GAP}(.+) then', r'if (\1)'),
        _rule("unless_then", rf'unless{_GAP}(.+) then', r'if (!\1)'),
        _rule("loop_through", rf'loop through{_GAP}(.+)', rf'for (let {loop_variable} of \1)'),
        _rule("repeat_until", rf'repeat until{_GAP}(.+)', r'while (!\1)'),
        _rule("give_back", rf'give back{_GAP}(.+)', r'return \1'),
        _rule("send_output", rf'send output{_GAP}(.+)', r'console.log(\1)'),
        _rule("use", rf'use{_GAP}(.+)', r'import \1'),
        _rule("share", rf'share{_GAP}(.+)', r'export \1'),
        _rule("try_to", rf'try to{_GAP}(.+)', r'try { \1 }'),
        _rule("handle_error", rf'handle error{_GAP}(.+)', r'catch (error) { \1 }'),
        _rule("wait_for", rf'wait for{_GAP}(.+)', r'await \1'),
        _rule("test_that", rf'test that{_GAP}(.+)', r'assert(\1)'),
    )


# Quoted text is set aside while the rules run. A quote only opens a string
# at the start of a word, as in the lexer (`don't` is one word).
STRING_PATTERN = re.compile(r'(?<!\w)(?:"(?:[^"\\]|\\.)*"?|\'(?:[^\'\\]|\\.)*\'?)')
_PLACEHOLDER_PATTERN = re.compile(r'\x00(\d+)\x00')


def apply_rules(text: str, rules: Tuple[RewriteRule, ...]) -> str:
    """Run `text` through `rules` in order. String literals are not rewritten."""
    literals = []

    def _stash(match):
        literals.append(match.group(0))
        return f"\x00{len(literals) - 1}\x00"

    text = STRING_PATTERN.sub(_stash, text)
    for rule in rules:
        text = rule.apply(text)
    return _PLACEHOLDER_PATTERN.sub(lambda m: literals[int(m.group(1))], text)


# Loop conditions written with the phrase introducers keep the phrase's tail
# word ("until done", "through items"). These turn that word into the loop's
# own semantics; `until` is the only negation applied to a while loop.
UNTIL_PATTERN = re.compile(r'^until\b\s*(.*)$')
THROUGH_PATTERN = re.compile(r'^through\b\s*(.*)$')


def rewrite_loop_condition(text: str, repeat_form: bool) -> str:
    """Rewrite a loop's raw condition text for the while / for-of header."""
    if repeat_form:
        match = UNTIL_PATTERN.match(text)
        if match:
            return f"!({match.group(1)})"
        return text

    match = THROUGH_PATTERN.match(text)
    if match:
        return match.group(1)
    return text
