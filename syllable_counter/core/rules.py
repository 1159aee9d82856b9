"""Orthographic adjustment rules applied on top of vowel-cluster counting.

Counting runs of vowels over-counts silent letters and suffixes and under-counts
adjacent vowels that are pronounced separately. Each :class:`SyllableRule` below
corrects one such pattern by a single syllable. Rules are independent: every rule
whose pattern occurs in the word fires once, so their order never changes the
result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SyllableRule:
    """A named pattern that adjusts the syllable estimate when it matches."""

    name: str
    pattern: re.Pattern[str]
    example: str

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None


def _rule(name: str, pattern: str, example: str) -> SyllableRule:
    return SyllableRule(name=name, pattern=re.compile(pattern), example=example)


# One syllable fewer than the vowel clusters suggest.
SUBTRACT_RULES: Tuple[SyllableRule, ...] = (
    # give, love, bone, done, ride
    _rule("silent_e", r"[^aeiou]e$", "bone"),
    # bared, liked, called, tricked, bashed, matched
    _rule(
        "inflected_ending",
        r"[aeiou](?:([cfghklmnprsvwz])\1?|ck|sh|[rt]ch)e[ds]$",
        "matched",
    ),
    # absolutely, nicely, likeness, basement, hopeless, hopeful, tastefully
    _rule(
        "silent_e_derivative",
        r".e(?:ly|less(?:ly)?|ness?|ful(?:ly)?|ments?)$",
        "hopeful",
    ),
    # action, diction, fiction
    _rule("ion", r"ion", "action"),
    # special, initial, physician, christian
    _rule("cia_tia", r"[ct]ia[nl]", "special"),
    # illustrious, but not spacious, gracious, anxious, noxious
    _rule("iou", r"[^cx]iou", "illustrious"),
    # amnesia, polynesia
    _rule("final_sia", r"sia$", "amnesia"),
    # dialogue, intrigue, colleague
    _rule("final_gue", r".gue$", "dialogue"),
)

# One syllable more than the vowel clusters suggest.
ADD_RULES: Tuple[SyllableRule, ...] = (
    # alias, science, phobia
    _rule("i_vowel", r"i[aiou]", "alias"),
    # salient, gradient, transient
    _rule("ien", r"[dls]ien", "salient"),
    # capable, humble
    _rule("vowel_ble", r"[aeiouym]ble$", "capable"),
    # agreeable
    _rule("triple_vowel", r"[aeiou]{3}", "agreeable"),
    _rule("mc_prefix", r"^mc", "mcdonald"),
    # sexism, racism
    _rule("final_ism", r"ism$", "racism"),
    # bubble, cattle, cackle, sample, angle
    _rule("consonant_le", r"(?:([^aeiouy])\1|ck|mp|ng)le$", "bubble"),
    # couldn't with the apostrophe removed
    _rule("final_dnt", r"dnt$", "couldnt"),
    # annoying, layer
    _rule("vowel_y_vowel", r"[aeiou]y[aeiou]", "annoying"),
)


__all__ = ["SyllableRule", "SUBTRACT_RULES", "ADD_RULES"]
