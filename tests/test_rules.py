import dataclasses

import pytest

from syllable_counter.core.rules import ADD_RULES, SUBTRACT_RULES

RULES = {rule.name: rule for rule in SUBTRACT_RULES + ADD_RULES}

# rule name -> (word that triggers it, similar word that does not)
CASES = {
    "silent_e": ("bone", "bee"),
    "inflected_ending": ("baked", "wanted"),
    "silent_e_derivative": ("likeness", "playful"),
    "ion": ("action", "violet"),
    "cia_tia": ("physician", "tiara"),
    "iou": ("illustrious", "gracious"),
    "final_sia": ("amnesia", "asian"),
    "final_gue": ("colleague", "guest"),
    "i_vowel": ("phobia", "pie"),
    "ien": ("gradient", "friend"),
    "vowel_ble": ("humble", "bubble"),
    "triple_vowel": ("agreeable", "agree"),
    "mc_prefix": ("mcwhatever", "emcee"),
    "final_ism": ("sexism", "dismal"),
    "consonant_le": ("angle", "table"),
    "final_dnt": ("couldnt", "dent"),
    "vowel_y_vowel": ("layer", "bay"),
}


def test_rule_lists_keep_their_order():
    assert [rule.name for rule in SUBTRACT_RULES] == [
        "silent_e",
        "inflected_ending",
        "silent_e_derivative",
        "ion",
        "cia_tia",
        "iou",
        "final_sia",
        "final_gue",
    ]
    assert [rule.name for rule in ADD_RULES] == [
        "i_vowel",
        "ien",
        "vowel_ble",
        "triple_vowel",
        "mc_prefix",
        "final_ism",
        "consonant_le",
        "final_dnt",
        "vowel_y_vowel",
    ]
    assert set(CASES) == set(RULES)


@pytest.mark.parametrize("name", sorted(CASES))
def test_rule_matches_trigger_and_skips_near_miss(name):
    rule = RULES[name]
    trigger, near_miss = CASES[name]

    assert rule.matches(trigger)
    assert not rule.matches(near_miss)


@pytest.mark.parametrize("name", sorted(CASES))
def test_rule_example_triggers_its_rule(name):
    rule = RULES[name]

    assert rule.matches(rule.example)


def test_rules_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        SUBTRACT_RULES[0].name = "changed"
