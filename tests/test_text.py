"""Tests for search-form normalization and tokenization."""

import pytest

from docsearch.core.text import normalize_for_search, stable_id, tokenize


class TestNormalize:

    def test_case_and_diacritics_insensitive(self):
        assert normalize_for_search("Café") == normalize_for_search("cafe") == "cafe"

    def test_punctuation_runs_become_single_space(self):
        assert normalize_for_search("Price: $40!!  (synthetic)") == "price 40 synthetic"

    def test_underscore_is_punctuation(self):
        assert normalize_for_search("snake_case") == "snake case"

    def test_whitespace_collapsed_and_trimmed(self):
        assert normalize_for_search("  a\t\tb \n c  ") == "a b c"

    def test_unicode_letters_and_numbers_kept(self):
        assert normalize_for_search("Добро пожаловать! 2024") == "добро пожаловать 2024"

    @pytest.mark.parametrize(
        "text",
        ["Café Crème", "ŁÓDŹ -- Ünïcödé", "ℌello", "İstanbul", "  ", "", "a_b__c", "½ price"],
    )
    def test_idempotent(self, text):
        once = normalize_for_search(text)
        assert normalize_for_search(once) == once

    def test_empty(self):
        assert normalize_for_search("") == ""


class TestTokenize:

    def test_basic(self):
        assert tokenize("Brake pads, price?") == ["brake", "pads", "price"]

    def test_short_tokens_dropped(self):
        assert tokenize("a b cd e fgh") == ["cd", "fgh"]

    def test_order_and_duplicates_preserved(self):
        assert tokenize("oil, OIL and oil") == ["oil", "oil", "and", "oil"]

    def test_tokens_have_no_punctuation(self):
        for token in tokenize("Email: service@autolife.example; phone +1-555-0142"):
            assert len(token) >= 2
            assert token.isalnum()

    def test_whitespace_only_has_no_tokens(self):
        assert tokenize("   \n\t ") == []
        assert tokenize("?! -") == []


class TestStableId:

    def test_deterministic_and_short(self):
        assert stable_id("t", "a.txt", "Title") == stable_id("t", "a.txt", "Title")
        assert len(stable_id("t", "a.txt", "Title")) == 16

    def test_parts_matter(self):
        assert stable_id("t", "a.txt", "Title") != stable_id("t", "b.txt", "Title")
