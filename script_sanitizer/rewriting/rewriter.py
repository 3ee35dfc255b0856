"""Term rewriter: replace risky terms across batches of generated scripts.

Public entry points
-------------------
    TermRewriter(term_map).filter_text(text)        -> str
    TermRewriter(term_map).filter_scripts(scripts)  -> list[Script]
    TermRewriter(term_map).scan_scripts(scripts)    -> list[TermHit]

plus module-level filter_text / filter_scripts bound to DEFAULT_TERM_MAP.

Rewrite semantics
-----------------
- terms are applied longest first (ties lexicographic), one pass per term
- every pass runs over the output of the previous pass, so a replacement that
  contains a shorter term is rewritten again later in the same call
  ("flash sale" -> "giảm giá chớp nhoáng" -> "ưu đãi chớp nhoáng")
- replacements are inserted verbatim, whatever the casing of the match
- inputs are never mutated; no I/O, no shared mutable state
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from script_sanitizer.generation.models import Script, ScriptScene
from script_sanitizer.rewriting.matcher import build_term_pattern
from script_sanitizer.rewriting.term_map import DEFAULT_TERM_MAP, TermMap


@dataclass(frozen=True)
class TermHit:
    """One term found in one field of one script."""

    script_id: str
    field: str  # e.g. "hook", "scenes[1].voiceover"
    term: str
    count: int


class TermRewriter:
    """Applies a TermMap to text and to script batches.

    Matchers are compiled once, in application order, at construction.
    """

    def __init__(self, term_map: TermMap = DEFAULT_TERM_MAP):
        self._term_map = term_map
        self._passes: Tuple[Tuple[str, re.Pattern, str], ...] = tuple(
            (term, build_term_pattern(term), term_map[term])
            for term in term_map.ordered_terms()
        )

    @property
    def term_map(self) -> TermMap:
        return self._term_map

    # ── Text ──────────────────────────────────────────────────────────────

    def filter_text(self, text: Optional[str]) -> Optional[str]:
        """Rewrite every risky term in *text*; empty or None passes through."""
        if not text:
            return text
        for _term, pattern, replacement in self._passes:
            # A callable keeps backslashes and group refs in the replacement literal.
            text = pattern.sub(lambda _m, r=replacement: r, text)
        return text

    def scan_text(self, text: Optional[str]) -> List[Tuple[str, int]]:
        """Return (term, count) for every term filter_text would replace.

        Runs the same cascading passes, so a term only reachable through an
        earlier replacement is reported too.
        """
        if not text:
            return []
        found: List[Tuple[str, int]] = []
        for term, pattern, replacement in self._passes:
            text, count = pattern.subn(lambda _m, r=replacement: r, text)
            if count:
                found.append((term, count))
        return found

    # ── Scripts ───────────────────────────────────────────────────────────

    def filter_scene(self, scene: ScriptScene) -> ScriptScene:
        return scene.model_copy(update={
            "visual": self.filter_text(scene.visual),
            "voiceover": self.filter_text(scene.voiceover),
        })

    def filter_script(self, script: Script) -> Script:
        """Shallow copy of *script* with every natural-language field rewritten.

        id, saved and hashtags are carried over untouched.
        """
        update = {
            "title": self.filter_text(script.title),
            "hook": self.filter_text(script.hook),
            "cta": self.filter_text(script.cta),
            "scenes": [self.filter_scene(scene) for scene in script.scenes],
        }
        if script.post_content:
            update["post_content"] = self.filter_text(script.post_content)
        return script.model_copy(update=update)

    def filter_scripts(self, scripts: Optional[Iterable[Script]]) -> List[Script]:
        """Filtered copies of *scripts*, same length and order."""
        if scripts is None:
            return []
        return [self.filter_script(script) for script in scripts]

    def scan_scripts(self, scripts: Optional[Iterable[Script]]) -> List[TermHit]:
        """Every term hit across *scripts*, in traversal order."""
        hits: List[TermHit] = []
        for script in scripts or ():
            for field, text in _script_texts(script):
                for term, count in self.scan_text(text):
                    hits.append(TermHit(script.id, field, term, count))
        return hits


def _script_texts(script: Script) -> List[Tuple[str, str]]:
    """(field path, text) pairs in the order filter_script rewrites them."""
    texts = [("title", script.title), ("hook", script.hook), ("cta", script.cta)]
    if script.post_content:
        texts.append(("postContent", script.post_content))
    for i, scene in enumerate(script.scenes):
        texts.append((f"scenes[{i}].visual", scene.visual))
        texts.append((f"scenes[{i}].voiceover", scene.voiceover))
    return texts


# ── Default rewriter ──────────────────────────────────────────────────────────

_DEFAULT_REWRITER = TermRewriter(DEFAULT_TERM_MAP)


def filter_text(text: Optional[str]) -> Optional[str]:
    """filter_text over DEFAULT_TERM_MAP."""
    return _DEFAULT_REWRITER.filter_text(text)


def filter_scripts(scripts: Optional[Iterable[Script]]) -> List[Script]:
    """filter_scripts over DEFAULT_TERM_MAP."""
    return _DEFAULT_REWRITER.filter_scripts(scripts)
