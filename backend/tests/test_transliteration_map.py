"""
Unit tests for the transliteration engine.

Covers the tokenizer, sofit rules and the combination generator, including
the word-final "a" rule and the "kom" non-final mem case.
"""

import logging

import pytest

import config
from tools.transliteration_map import (
    DEFAULT_MAX_INPUT_TOKENS,
    PHONEME_TABLE,
    SOFIT_MAP,
    FINAL_A_OPTION,
    apply_sofit_rules,
    final_form_variants,
    generate,
    generate_hebrew_variants,
    match_grapheme,
    skipped_characters,
    tokenize,
)


class TestTokenizer:
    """Greedy longest-match tokenization."""

    def test_digraph_before_single_letter(self):
        assert match_grapheme("shalom") == "sh"
        assert match_grapheme("tzadik") == "tz"
        assert match_grapheme("ph") == "ph"

    def test_single_letter_when_no_digraph(self):
        assert match_grapheme("salom") == "s"
        assert match_grapheme("a") == "a"

    def test_no_match(self):
        assert match_grapheme("xa") is None
        assert match_grapheme("1") is None
        assert match_grapheme("") is None

    def test_tokenize_word(self):
        assert tokenize("shalom") == ["sh", "a", "l", "o", "m"]
        assert tokenize("tzchok") == ["tz", "ch", "o", "k"]

    def test_tokenize_normalizes(self):
        assert tokenize("  SHALOM ") == ["sh", "a", "l", "o", "m"]

    def test_unknown_characters_are_skipped(self):
        assert tokenize("c@t") == ["t"]
        assert skipped_characters("c@t") == ["c", "@"]
        assert skipped_characters("shalom") == []


class TestSofitRules:
    """Final letter substitution."""

    @pytest.mark.parametrize("regular,final", list(SOFIT_MAP.items()))
    def test_each_final_form(self, regular, final):
        assert apply_sofit_rules("ש" + regular) == "ש" + final

    def test_no_final_form(self):
        assert apply_sofit_rules("שלב") == "שלב"
        assert apply_sofit_rules("") == ""

    def test_idempotent(self):
        for word in ["קומ", "שלום", "מלכ", "צ", "ספר"]:
            once = apply_sofit_rules(word)
            assert apply_sofit_rules(once) == once

    def test_variants_single_output(self):
        assert final_form_variants("שלומ", "shalom") == ["שלום"]
        assert final_form_variants("גבר", "gever") == ["גבר"]

    def test_variants_kom_keeps_non_final(self):
        assert final_form_variants("קומ", "kom") == ["קום", "קומ"]

    def test_variants_kom_only_for_mem(self):
        assert final_form_variants("קונ", "kom") == ["קון"]

    def test_variants_empty_candidate(self):
        assert final_form_variants("", "kom") == []


class TestGenerate:
    """Combination generator."""

    def test_empty_input(self):
        assert generate("") == set()
        assert generate("   ") == set()

    def test_non_string_input(self):
        assert generate_hebrew_variants(None) == set()

    def test_only_unknown_characters(self):
        assert generate("123") == set()
        assert generate("cx") == set()

    def test_shalom(self):
        assert generate("shalom") == {"שלום", "שלם", "שאלום", "שאלם"}

    def test_shalom_digraph_not_split(self):
        """'sh' must map to ש alone, never ס/ש + ה/ח."""
        for candidate in generate("shalom"):
            assert candidate.startswith("ש")
            assert "ה" not in candidate
            assert "ח" not in candidate

    def test_kom_has_final_and_non_final(self):
        result = generate("kom")
        assert result == {"קום", "כום", "קם", "כם", "קומ", "כומ", "קמ", "כמ"}

    def test_kom_exception_after_normalization(self):
        assert "קומ" in generate("  KOM ")

    def test_no_non_final_for_other_words(self):
        result = generate("kam")
        assert result == {"קם", "קאם", "כם", "כאם"}

    def test_final_a_adds_heh(self):
        assert generate("lama") == {"לם", "למא", "למה", "לאם", "לאמא", "לאמה"}

    def test_final_a_rule_uses_whole_word(self):
        """A trailing unmatched char means the 'a' is not word-final."""
        assert generate("lama!") == {"לם", "למא", "לאם", "לאמא"}

    def test_savta(self):
        result = generate("savta")
        assert {"סבתא", "סבתה", "שבתא", "שבתה"} <= result

    def test_telefon(self):
        result = generate("telefon")
        assert {"טלפון", "תלפון", "טלפן", "טליפון"} <= result
        assert all(c.endswith("ן") for c in result)

    def test_leading_space_zaken(self):
        assert generate(" zaken") == {
            "זקן", "זקין", "זכן", "זכין", "זאקן", "זאקין", "זאכן", "זאכין",
        }

    def test_test_word_count(self):
        assert len(generate("test")) == 16

    def test_gever(self):
        result = generate("gever")
        assert "גבר" in result
        assert len(result) == 8

    def test_silent_option_drops_empty_path(self):
        assert generate("h") == {"ה", "ח"}

    def test_single_tokens(self):
        assert generate("sh") == {"ש"}
        assert generate("s") == {"ס", "ש"}
        assert generate("ch") == {"ך", "ח"}
        assert generate("j") == {"ג׳", "ג"}

    @pytest.mark.parametrize("word", ["shalom", "savta", "kom", "tzipora", "yehuda", "chaim"])
    def test_candidates_only_use_token_mappings(self, word):
        allowed = set(SOFIT_MAP.values())
        for token in tokenize(word):
            for option in PHONEME_TABLE[token]:
                allowed.update(option)
        if word.endswith("a"):
            allowed.add(FINAL_A_OPTION)

        for candidate in generate(word):
            assert candidate
            assert set(candidate) <= allowed

    @pytest.mark.parametrize("word", ["shalom", "savta", "telefon", "chaim"])
    def test_results_already_sofit(self, word):
        for candidate in generate(word):
            assert apply_sofit_rules(candidate) == candidate


class TestInputLimit:
    """Length bound on the generator."""

    def test_long_input_rejected(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert generate_hebrew_variants("a" * 13) == set()
        assert "exceeds limit" in caplog.text

    def test_explicit_limit(self):
        assert generate_hebrew_variants("shalom", max_input_tokens=3) == set()
        assert generate_hebrew_variants("kom", max_input_tokens=3) != set()

    def test_default_limit(self):
        assert DEFAULT_MAX_INPUT_TOKENS == 12
        assert generate_hebrew_variants("a" * 12) != set()

    def test_limit_counts_tokens(self):
        # 13 characters, 12 tokens (the space is skipped)
        variants = generate("benjamin levy")
        assert variants != set()
        # "sh" is one token
        assert generate_hebrew_variants("shalom", max_input_tokens=5) != set()
        assert generate_hebrew_variants("benjamin levyy") == set()

    def test_ignores_settings_and_env_file(self, tmp_path, monkeypatch):
        log_dir = tmp_path / "created_by_generate"
        (tmp_path / ".env").write_text(
            f"MAX_INPUT_TOKENS=2\nLOG_TO_FILE=true\nLOG_DIR={log_dir}\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)

        assert generate("kom") == {"קום", "כום", "קם", "כם", "קומ", "כומ", "קמ", "כמ"}
        assert not log_dir.exists()
        assert config._settings is None
