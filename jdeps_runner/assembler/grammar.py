"""Flag grammar tables: option name -> jdeps token + emission rule.

The order of ``FlagGrammar.rules`` is the order tokens are emitted in.
jdeps keeps the last value it sees for repeated options, so the order is
observable when ``include`` and ``regex`` are both set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Emit(Enum):
    FLAG = "flag"          # bare token when the field is true
    VALUE = "value"        # two tokens: flag, value
    JOINED = "joined"      # one token: flag + value
    REPEATED = "repeated"  # flag, value pair per list item
    CHOICE = "choice"      # one token: flag + value, only for known values


@dataclass(frozen=True)
class FlagRule:
    field: str
    flag: str
    emit: Emit
    choices: frozenset[str] = frozenset()


@dataclass(frozen=True)
class FlagGrammar:
    name: str
    rules: tuple[FlagRule, ...]


FILTER_MODES = frozenset({"package", "archive", "none"})


def _grammar(name: str, flags: dict[str, str]) -> FlagGrammar:
    return FlagGrammar(
        name=name,
        rules=(
            FlagRule("api_only", flags["api_only"], Emit.FLAG),
            FlagRule("classpath", flags["classpath"], Emit.VALUE),
            FlagRule("dot_output", flags["dot_output"], Emit.VALUE),
            # include shares the regex flag; whichever comes later wins inside jdeps
            FlagRule("include", flags["regex"], Emit.VALUE),
            FlagRule("jdk_internals", flags["jdk_internals"], Emit.FLAG),
            FlagRule("packages", flags["package"], Emit.REPEATED),
            FlagRule("profile", flags["profile"], Emit.FLAG),
            FlagRule("regex", flags["regex"], Emit.VALUE),
            FlagRule("recursive", flags["recursive"], Emit.FLAG),
            FlagRule("summary", flags["summary"], Emit.FLAG),
            FlagRule("verbose", "-verbose", Emit.FLAG),
            FlagRule("verbose_level", "-verbose:", Emit.JOINED),
            FlagRule("filter_pattern", "-filter", Emit.VALUE),
            FlagRule("filter_mode", "-filter:", Emit.CHOICE, FILTER_MODES),
            FlagRule("print_version", flags["version"], Emit.FLAG),
        ),
    )


JDK8 = _grammar(
    "jdk8",
    {
        "api_only": "-apionly",
        "classpath": "-classpath",
        "dot_output": "-dotoutput",
        "regex": "-regex",
        "jdk_internals": "-jdkinternals",
        "package": "-package",
        "profile": "-profile",
        "recursive": "-recursive",
        "summary": "-summary",
        "version": "-version",
    },
)

JDK9 = _grammar(
    "jdk9",
    {
        "api_only": "--api-only",
        "classpath": "--class-path",
        "dot_output": "--dot-output",
        "regex": "--regex",
        "jdk_internals": "--jdk-internals",
        "package": "--package",
        "profile": "-profile",
        "recursive": "--recursive",
        "summary": "-summary",
        "version": "--version",
    },
)

GRAMMARS = {g.name: g for g in (JDK8, JDK9)}


def get_grammar(name: str) -> FlagGrammar:
    g = GRAMMARS.get((name or "").lower())
    if g is None:
        available = ", ".join(sorted(GRAMMARS))
        raise ValueError(f"Unknown flag grammar '{name}'. Available: {available}")
    return g
