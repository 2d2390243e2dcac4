"""
Tests for verb.py - verb type detection and verb conjugation tables.
"""

import pytest

from services.tables import GODAN_ENDINGS, ICHIDAN_STEM_MORAE, VERB_FORMS
from services.verb import (
    VerbType,
    conjugate_godan,
    conjugate_ichidan,
    conjugate_kuru,
    conjugate_suru,
    detect_verb_type,
    suru_prefix,
)


def _surfaces(forms):
    return [f.surface_text for f in forms]


def _by_name(forms):
    return {f.form_name: f.surface_text for f in forms}


# =============================================================================
# detect_verb_type
# =============================================================================


class TestDetectFromTags:
    """Tags override the reading."""

    def test_godan_tag(self):
        assert detect_verb_type("たべる", ["Godan verb with 'ru' ending"]) == VerbType.GODAN

    def test_v5_tag(self):
        assert detect_verb_type("はしる", ["v5r"]) == VerbType.GODAN

    def test_ichidan_tag(self):
        assert detect_verb_type("わかる", ["Ichidan verb"]) == VerbType.ICHIDAN

    def test_v1_tag(self):
        assert detect_verb_type("のむ", ["v1"]) == VerbType.ICHIDAN

    def test_suru_tag(self):
        assert detect_verb_type("する", ["Suru verb - included"]) == VerbType.SURU

    def test_noun_taking_suru(self):
        tags = ["Noun or participle which takes the aux. verb suru"]
        assert detect_verb_type("べんきょう", tags) == VerbType.SURU

    def test_kuru_tag(self):
        assert detect_verb_type("くる", ["Kuru verb - special class"]) == VerbType.KURU

    def test_vk_tag(self):
        assert detect_verb_type("くる", ["vk"]) == VerbType.KURU

    def test_case_insensitive(self):
        assert detect_verb_type("たべる", ["GODAN VERB"]) == VerbType.GODAN

    def test_godan_checked_before_ichidan(self):
        assert detect_verb_type("かえる", ["v1", "v5r"]) == VerbType.GODAN

    def test_unrelated_tags_fall_back_to_reading(self):
        assert detect_verb_type("のむ", ["Transitive verb", "common"]) == VerbType.GODAN


class TestDetectFromEnding:
    """Ending-based fallback when no tag matches."""

    @pytest.mark.parametrize("mora", sorted(ICHIDAN_STEM_MORAE))
    def test_ichidan_shaped_stems(self, mora):
        assert detect_verb_type("た" + mora + "る", []) == VerbType.ICHIDAN

    @pytest.mark.parametrize(
        "mora", ["あ", "か", "が", "さ", "た", "な", "ま", "ら", "わ", "う", "く", "つ", "お", "こ", "と", "よ", "ろ", "ん", "り", "ぢ"]
    )
    def test_other_ru_verbs_are_godan(self, mora):
        assert detect_verb_type("た" + mora + "る", []) == VerbType.GODAN

    @pytest.mark.parametrize("ending", GODAN_ENDINGS)
    def test_godan_endings(self, ending):
        assert detect_verb_type("あ" + ending, []) == VerbType.GODAN

    def test_common_verbs(self):
        assert detect_verb_type("たべる", []) == VerbType.ICHIDAN
        assert detect_verb_type("みる", []) == VerbType.ICHIDAN
        assert detect_verb_type("わかる", []) == VerbType.GODAN
        assert detect_verb_type("のむ", []) == VerbType.GODAN

    def test_known_imprecise_heuristic(self):
        """走る and 帰る are godan but look ichidan; the heuristic accepts this."""
        assert detect_verb_type("はしる", []) == VerbType.ICHIDAN
        assert detect_verb_type("かえる", []) == VerbType.ICHIDAN

    def test_suru_and_kuru_readings_follow_ru_rule(self):
        """The る rule runs first, so untagged する/くる resolve as godan."""
        assert detect_verb_type("する", []) == VerbType.GODAN
        assert detect_verb_type("くる", []) == VerbType.GODAN
        assert detect_verb_type("来る", []) == VerbType.GODAN

    def test_lone_ru(self):
        assert detect_verb_type("る", []) == VerbType.GODAN

    def test_undetermined(self):
        assert detect_verb_type("きれい", []) is None
        assert detect_verb_type("しずか", []) is None
        assert detect_verb_type("", []) is None

    def test_tags_default_to_empty(self):
        assert detect_verb_type("のむ") == VerbType.GODAN


# =============================================================================
# Ichidan
# =============================================================================


class TestIchidan:

    def test_taberu(self):
        assert _surfaces(conjugate_ichidan("たべる")) == [
            "たべる", "たべます", "たべて", "たべた", "たべました",
            "たべない", "たべません", "たべなかった", "たべられる", "たべられる",
            "たべさせる", "たべろ", "たべよう", "たべれば", "たべたら",
        ]

    def test_form_names_and_order(self):
        forms = conjugate_ichidan("みる")
        assert [(f.form_name, f.usage_note) for f in forms] == list(VERB_FORMS)

    @pytest.mark.parametrize("reading", ["たべる", "みる", "おきる", "食べる", "ねる"])
    def test_fifteen_forms_dictionary_first(self, reading):
        forms = conjugate_ichidan(reading)
        assert len(forms) == 15
        assert forms[0].surface_text == reading

    def test_kanji_reading(self):
        assert _by_name(conjugate_ichidan("食べる"))["Te-form"] == "食べて"

    def test_reading_without_ru(self):
        forms = conjugate_ichidan("たべ")
        assert forms[0].surface_text == "たべ"
        assert forms[1].surface_text == "たべます"


# =============================================================================
# Godan
# =============================================================================


class TestGodan:

    def test_nomu(self):
        forms = _by_name(conjugate_godan("のむ"))
        assert forms["Dictionary"] == "のむ"
        assert forms["Masu"] == "のみます"
        assert forms["Te-form"] == "のんで"
        assert forms["Ta-form"] == "のんだ"
        assert forms["Nai-form"] == "のまない"
        assert forms["Potential"] == "のめる"
        assert forms["Imperative"] == "のめ"
        assert forms["Volitional"] == "のもう"
        assert forms["Conditional"] == "のめば"

    def test_kaku_full_table(self):
        assert _surfaces(conjugate_godan("かく")) == [
            "かく", "かきます", "かいて", "かいた", "かきました",
            "かかない", "かきません", "かかなかった", "かける", "かかれる",
            "かかせる", "かけ", "かこう", "かけば", "かいたら",
        ]

    @pytest.mark.parametrize(
        "reading, te, ta, nai",
        [
            ("かう", "かって", "かった", "かわない"),
            ("およぐ", "およいで", "およいだ", "およがない"),
            ("はなす", "はなして", "はなした", "はなさない"),
            ("まつ", "まって", "まった", "またない"),
            ("しぬ", "しんで", "しんだ", "しなない"),
            ("あそぶ", "あそんで", "あそんだ", "あそばない"),
            ("よむ", "よんで", "よんだ", "よまない"),
            ("わかる", "わかって", "わかった", "わからない"),
        ],
    )
    def test_rows(self, reading, te, ta, nai):
        forms = _by_name(conjugate_godan(reading))
        assert forms["Te-form"] == te
        assert forms["Ta-form"] == ta
        assert forms["Nai-form"] == nai

    def test_u_verb_passive_and_causative(self):
        forms = _by_name(conjugate_godan("かう"))
        assert forms["Passive"] == "かわれる"
        assert forms["Causative"] == "かわせる"
        assert forms["Volitional"] == "かおう"

    def test_iku_irregular(self):
        forms = _by_name(conjugate_godan("いく"))
        assert forms["Te-form"] == "いって"
        assert forms["Ta-form"] == "いった"
        assert forms["Tara-form"] == "いったら"
        assert forms["Masu"] == "いきます"
        assert forms["Nai-form"] == "いかない"

    def test_iku_kanji_irregular(self):
        forms = _by_name(conjugate_godan("行く"))
        assert forms["Te-form"] == "行って"
        assert forms["Ta-form"] == "行った"

    def test_other_ku_verbs_keep_i_onbin(self):
        forms = _by_name(conjugate_godan("きく"))
        assert forms["Te-form"] == "きいて"

    def test_unknown_ending_uses_ru_row(self):
        forms = _by_name(conjugate_godan("ゆ"))
        assert forms["Masu"] == "ります"

    def test_empty_reading(self):
        forms = conjugate_godan("")
        assert len(forms) == 15
        assert forms[0].surface_text == ""


# =============================================================================
# Suru / Kuru
# =============================================================================


class TestSuru:

    def test_bare_suru(self):
        assert _surfaces(conjugate_suru("する")) == [
            "する", "します", "して", "した", "しました",
            "しない", "しません", "しなかった", "できる", "される",
            "させる", "しろ", "しよう", "すれば", "したら",
        ]

    def test_compound(self):
        forms = _by_name(conjugate_suru("べんきょうする"))
        assert forms["Dictionary"] == "べんきょうする"
        assert forms["Masu"] == "べんきょうします"
        assert forms["Potential"] == "べんきょうできる"

    def test_kanji_compound(self):
        assert _by_name(conjugate_suru("勉強する"))["Te-form"] == "勉強して"

    def test_bare_noun(self):
        assert _by_name(conjugate_suru("べんきょう"))["Dictionary"] == "べんきょうする"

    def test_kanji_reading_drops_final_ru(self):
        assert _surfaces(conjugate_suru("為る"))[:2] == ["為する", "為します"]

    @pytest.mark.parametrize(
        "reading, prefix",
        [("する", ""), ("べんきょうする", "べんきょう"), ("あいす", "あい"), ("べんきょう", "べんきょう"), ("為る", "為"), ("", "")],
    )
    def test_suru_prefix(self, reading, prefix):
        assert suru_prefix(reading) == prefix


class TestKuru:

    def test_table(self):
        assert _surfaces(conjugate_kuru()) == [
            "くる", "きます", "きて", "きた", "きました",
            "こない", "きません", "こなかった", "こられる", "こられる",
            "こさせる", "こい", "こよう", "くれば", "きたら",
        ]

    def test_romaji(self):
        assert conjugate_kuru()[2].romaji == "kite"
