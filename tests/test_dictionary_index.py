"""
Tests for the Dictionary Index.

These tests verify:
1. Fingerprints and letter checks
2. Entries compare and order by fingerprint only
3. Index construction from files and word iterables
4. Unscramble results, including the charset/strict difference
5. Load failures surface as OSErrors
"""

import logging

import pytest

from wordplay.domain import DictionaryEntry, MatchMode
from wordplay.errors import DictionaryLoadError, WordplayError
from wordplay.fingerprint import (
    has_letter,
    same_letter_counts,
    same_letters,
    sum_characters,
)
from wordplay.index.dictionary import DictionaryIndex, read_words


# =============================================================================
# TEST FIXTURES
# =============================================================================

@pytest.fixture
def write_wordlist(tmp_path):
    def _write(text, name="words.txt"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write


@pytest.fixture
def listen_index():
    return DictionaryIndex.from_words(["listen", "silent", "enlist", "banana"])


def entry_pairs(index):
    return sorted((entry.word, entry.fingerprint) for entry in index)


# =============================================================================
# FINGERPRINT TESTS
# =============================================================================

class TestFingerprint:
    """Test the pure letter helpers."""

    def test_sum_characters(self):
        """Fingerprint is the sum of the character codes."""
        assert sum_characters("abc") == 97 + 98 + 99

    def test_sum_characters_ignores_case(self):
        """Uppercase letters are summed as lowercase."""
        assert sum_characters("ABC") == sum_characters("abc")

    def test_empty_word_is_zero(self):
        """An empty word has fingerprint 0."""
        assert sum_characters("") == 0

    def test_has_letter_ignores_case(self):
        """Letter membership ignores case on both sides."""
        assert has_letter("A", "banana")
        assert has_letter("n", "BANANA")
        assert not has_letter("z", "banana")

    def test_same_letters_both_ways(self):
        """Letter sets must be contained in each other."""
        assert same_letters("listen", "Silent")
        assert not same_letters("ab", "abc")
        assert not same_letters("abc", "ab")

    def test_same_letters_ignores_counts(self):
        """Charset check passes where the count check fails."""
        assert same_letters("aabcc", "abbbc")
        assert not same_letter_counts("aabcc", "abbbc")

    def test_same_letter_counts(self):
        """True anagrams have equal letter counts."""
        assert same_letter_counts("Listen", "silent")


# =============================================================================
# DICTIONARY ENTRY TESTS
# =============================================================================

class TestDictionaryEntry:
    """Test that entries compare by fingerprint, never by word."""

    def test_entry_carries_fingerprint(self):
        """Entry keeps the word as given and its fingerprint."""
        entry = DictionaryEntry.from_word("Cat")
        assert entry.word == "Cat"
        assert entry.fingerprint == sum_characters("cat")
        assert len(entry) == 3

    def test_anagrams_are_equal_entries(self):
        """Entries with the same fingerprint are equal."""
        assert DictionaryEntry.from_word("cat") == DictionaryEntry.from_word("act")

    def test_same_fingerprint_different_letters_equal(self):
        """Equality ignores the word entirely."""
        # "ad" and "bc" both sum to 197
        assert DictionaryEntry.from_word("ad") == DictionaryEntry.from_word("bc")

    def test_different_fingerprints_not_equal(self):
        """Entries with different fingerprints differ."""
        assert DictionaryEntry.from_word("cat") != DictionaryEntry.from_word("dog")

    def test_ordered_by_fingerprint_not_word(self):
        """Ordering follows fingerprints, not the alphabet."""
        single = DictionaryEntry.from_word("b")   # 98
        early = DictionaryEntry.from_word("aa")  # 194
        assert single < early
        assert sorted([early, single]) == [single, early]

    def test_ties_are_neither_less_nor_greater(self):
        """Equal fingerprints sort as ties."""
        cat = DictionaryEntry.from_word("cat")
        act = DictionaryEntry.from_word("act")
        assert not cat < act
        assert not act < cat
        assert cat <= act


# =============================================================================
# CONSTRUCTION TESTS
# =============================================================================

class TestConstruction:
    """Test building the index."""

    def test_entries_sorted_by_fingerprint(self):
        """Index order is ascending fingerprint."""
        index = DictionaryIndex.from_words(["zz", "a", "mm", "b"])
        fingerprints = [entry.fingerprint for entry in index]
        assert fingerprints == sorted(fingerprints)
        assert list(index.fingerprints) == fingerprints

    def test_build_reads_every_token(self, write_wordlist):
        """Every whitespace-delimited token becomes an entry."""
        path = write_wordlist("cat act\n\ntac\n  dog\t\n")
        index = DictionaryIndex.build(path)
        assert len(index) == 4
        assert sorted(index.words()) == ["act", "cat", "dog", "tac"]

    def test_build_without_trailing_newline(self, write_wordlist):
        """The last word is read even without a final newline."""
        index = DictionaryIndex.build(write_wordlist("cat\ndog"))
        assert sorted(index.words()) == ["cat", "dog"]

    def test_empty_file_gives_empty_index(self, write_wordlist):
        """An empty word list is a valid, empty index."""
        index = DictionaryIndex.build(write_wordlist(""))
        assert len(index) == 0
        assert index.unscramble("anything") == []

    def test_building_twice_gives_same_entries(self, write_wordlist):
        """Loading the same file twice gives the same words and fingerprints."""
        path = write_wordlist("listen silent enlist banana cat act tac")
        first = DictionaryIndex.build(path)
        second = DictionaryIndex.build(path)
        assert entry_pairs(first) == entry_pairs(second)

    def test_build_logs_path_and_count(self, write_wordlist, caplog):
        """Loading logs the path at DEBUG and the word count at INFO."""
        path = write_wordlist("cat act tac")

        with caplog.at_level(logging.DEBUG, logger="wordplay.index.dictionary"):
            DictionaryIndex.build(path)

        records = [
            (record.levelno, record.getMessage())
            for record in caplog.records
            if record.name == "wordplay.index.dictionary"
        ]
        assert (logging.DEBUG, f"Opening word list {path}") in records
        assert (logging.INFO, f"Loaded 3 words from {path}") in records

    def test_missing_file_raises_load_error(self, tmp_path):
        """A missing file raises DictionaryLoadError naming the path."""
        path = str(tmp_path / "missing.txt")
        with pytest.raises(DictionaryLoadError) as exc_info:
            DictionaryIndex.build(path)
        assert exc_info.value.path == path

    def test_load_error_is_an_oserror(self, tmp_path):
        """Load errors can be caught as plain OSErrors."""
        with pytest.raises(OSError):
            read_words(str(tmp_path / "missing.txt"))
        assert issubclass(DictionaryLoadError, WordplayError)

    def test_directory_is_not_a_word_list(self, tmp_path):
        """Opening a directory fails the same way as a missing file."""
        with pytest.raises(DictionaryLoadError):
            DictionaryIndex.build(str(tmp_path))


# =============================================================================
# UNSCRAMBLE TESTS
# =============================================================================

class TestUnscramble:
    """Test unscramble queries."""

    def test_tinsel(self, listen_index):
        """All three anagrams of tinsel are found, banana is not."""
        assert set(listen_index.unscramble("tinsel")) == {"listen", "silent", "enlist"}

    def test_each_match_once(self):
        """Each matching word appears exactly once."""
        index = DictionaryIndex.from_words(["cat", "act", "tac"])
        result = index.unscramble("act")
        assert sorted(result) == ["act", "cat", "tac"]
        assert len(result) == 3

    def test_every_word_unscrambles_to_itself(self, listen_index):
        """A word is always an anagram of itself."""
        for word in listen_index.words():
            assert word in listen_index.unscramble(word)

    def test_last_entry_is_reachable(self):
        """The entry with the largest fingerprint can still be matched."""
        # "zzz" has the largest fingerprint, so it sorts last
        index = DictionaryIndex.from_words(["a", "bb", "zzz"])
        assert index.unscramble("zzz") == ["zzz"]

    def test_unknown_fingerprint_gives_nothing(self, listen_index):
        """No entry with the input's fingerprint means no results."""
        assert listen_index.unscramble("q") == []

    def test_empty_input_gives_nothing(self, listen_index):
        """Empty input returns an empty list."""
        assert listen_index.unscramble("") == []

    def test_case_insensitive(self, listen_index):
        """Input case does not change the results."""
        assert set(listen_index.unscramble("Listen")) == set(listen_index.unscramble("listen"))
        assert set(listen_index.unscramble("TINSEL")) == {"listen", "silent", "enlist"}

    def test_length_mismatch_rejected(self):
        """Equal fingerprints of different lengths never match."""
        # "zzzz" and "aaaad" both sum to 488
        index = DictionaryIndex.from_words(["aaaad", "zzzz"])
        assert sum_characters("aaaad") == sum_characters("zzzz")
        assert index.unscramble("zzzz") == ["zzzz"]
        assert index.unscramble("daaaa") == ["aaaad"]

    def test_same_fingerprint_different_letters_rejected(self):
        """Equal fingerprints with different letters never match."""
        # "ad" and "bc" both sum to 197
        index = DictionaryIndex.from_words(["ad", "bc"])
        assert index.unscramble("da") == ["ad"]
        assert index.unscramble("cb") == ["bc"]

    def test_results_in_index_order(self):
        """Results follow index order, not the alphabet."""
        index = DictionaryIndex.from_words(["silent", "listen", "enlist"])
        assert index.unscramble("tinsel") == [entry.word for entry in index.candidates("tinsel")]

    def test_queries_do_not_mutate_index(self, listen_index):
        """Queries leave the index untouched."""
        before = listen_index.words()
        listen_index.unscramble("tinsel")
        listen_index.unscramble("banana")
        assert listen_index.words() == before


# =============================================================================
# MATCH MODE TESTS
# =============================================================================

class TestMatchMode:
    """Test the charset and strict letter checks."""

    def test_charset_accepts_different_counts(self):
        """Charset mode is the default and ignores letter counts."""
        # aabcc and abbbc: same length, same letter set, both sum to 490
        index = DictionaryIndex.from_words(["abbbc"])
        assert sum_characters("aabcc") == sum_characters("abbbc")
        assert index.unscramble("aabcc") == ["abbbc"]
        assert index.unscramble("aabcc", MatchMode.CHARSET) == ["abbbc"]

    def test_strict_rejects_different_counts(self):
        """Strict mode rejects words whose letter counts differ."""
        index = DictionaryIndex.from_words(["abbbc"])
        assert index.unscramble("aabcc", MatchMode.STRICT) == []

    def test_strict_accepts_true_anagrams(self, listen_index):
        """Strict mode still finds real anagrams."""
        assert set(listen_index.unscramble("tinsel", MatchMode.STRICT)) == {
            "listen", "silent", "enlist",
        }
