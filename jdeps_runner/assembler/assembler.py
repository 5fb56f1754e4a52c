from __future__ import annotations

import os
from pathlib import Path

from jdeps_runner.domain.schemas import InvocationConfig

from .grammar import JDK8, Emit, FlagGrammar, FlagRule


def _render(value: object, path_separator: str) -> str:
    if isinstance(value, (list, tuple)):
        return path_separator.join(str(v) for v in value)
    return str(value)


def _emit(rule: FlagRule, value: object, path_separator: str) -> list[str]:
    # Unset options and empty lists emit nothing; jdeps rejects an empty classpath
    if value is None or value is False or value == [] or value == "":
        return []

    if rule.emit is Emit.FLAG:
        return [rule.flag]
    if rule.emit is Emit.VALUE:
        return [rule.flag, _render(value, path_separator)]
    if rule.emit is Emit.JOINED:
        return [rule.flag + _render(value, path_separator)]
    if rule.emit is Emit.REPEATED:
        tokens: list[str] = []
        for item in value:
            tokens += [rule.flag, str(item)]
        return tokens
    if rule.emit is Emit.CHOICE:
        return [rule.flag + value] if value in rule.choices else []
    raise ValueError(f"Unhandled emission rule {rule.emit}")


def assemble_arguments(
    config: InvocationConfig,
    grammar: FlagGrammar = JDK8,
    path_separator: str = os.pathsep,
) -> list[str]:
    """Turn a config into the jdeps argument vector (executable excluded).

    Pure: the same config and grammar always give the same list. The
    destination is always the last, positional token.
    """
    argv: list[str] = []
    for rule in grammar.rules:
        argv += _emit(rule, getattr(config, rule.field), path_separator)
    argv.append(str(Path(config.destination)))
    return argv
