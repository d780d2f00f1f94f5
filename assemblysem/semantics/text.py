# assemblysem/semantics/text.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Line-based text form of a Semantics value, as typed by hand into a
constraints editor.

Each non-blank line is one configuration, e.g. ``M1.A, M2:X`` or
``(M1.A,M2.X)``. Pairs use ``machine.state`` or ``machine:state``. A line
denotes the configurations satisfying all of its pairs, and the text denotes
the union of its lines.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from assemblysem.core.propositions import BasicStateProposition
from assemblysem.semantics.semantics import Semantics

if TYPE_CHECKING:
    from assemblysem.core.assembly import Assembly

logger = logging.getLogger(__name__)


def _strip_parentheses(line: str) -> str:
    if line.startswith("(") and line.endswith(")"):
        return line[1:-1]
    return line


def parse_pair(token: str) -> Optional[BasicStateProposition]:
    """
    Parse ``machine:state`` or ``machine.state``; ``:`` wins when both
    appear. Returns None for a token with neither separator.
    """
    token = token.strip()
    for separator in (":", "."):
        if separator in token:
            machine, state = token.split(separator, 1)
            return BasicStateProposition(machine.strip(), state.strip())
    return None


def parse_configuration_line(line: str, template: "Assembly", top: Optional[Semantics] = None) -> Semantics:
    """
    Semantics of a single line: ``top`` restricted by every pair on it.

    :param top: Precomputed universe of ``template``, computed if omitted.
    """
    result = top if top is not None else Semantics.top(template)
    for token in _strip_parentheses(line.strip()).split(","):
        atom = parse_pair(token)
        if atom is None:
            if token.strip():
                logger.warning("Ignoring malformed configuration pair %r", token.strip())
            continue
        result = result.AND(atom.to_semantics(template))
    return result


def parse_configurations(text: str, template: "Assembly") -> Semantics:
    """Union of the semantics of every non-blank line of ``text``."""
    result = Semantics.bottom(template)
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if not lines:
        return result
    top = Semantics.top(template)
    for line in lines:
        result = result.OR(parse_configuration_line(line, template, top))
    return result


def format_configurations(semantics: Semantics) -> str:
    """One configuration per line, without parentheses, pairs split by ``", "``."""
    return "".join(", ".join(str(p) for p in c.pairs) + "\n" for c in semantics)
