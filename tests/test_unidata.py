"""Tests for the Unicode data repository."""

import unicodedata
from unittest.mock import Mock, patch

import pytest
import requests

from unilookup.config import Config
from unilookup.models import Block
from unilookup.unidata import (
    NO_BLOCK,
    DataUnavailableError,
    UnicodeRepository,
    canonical_name,
    get_repository,
    parse_blocks,
    parse_emoji_test,
)
from unilookup.unidata.categories import CATEGORIES, build_category_map
from unilookup.unidata.loader import fetch_data_file, read_data_file


class TestCanonicalName:
    """Test category and block name canonicalization."""

    @pytest.mark.parametrize(
        "name",
        [
            "Po",
            "po",
            "PO",
            "Punctuation, Other",
            "Punctuation_Other",
            "punctuation other",
        ],
    )
    def test_punctuation_other_spellings(self, name):
        """Test that spellings differing in case and separators are equal."""
        assert build_category_map()[canonical_name(name)] == "Po"

    def test_block_names(self):
        """Test that block names lose spaces and case."""
        assert canonical_name("General Punctuation") == "generalpunctuation"
        assert canonical_name(" General_Punctuation ") == "generalpunctuation"
        assert canonical_name("Latin-1 Supplement") == "latin-1supplement"

    def test_category_map_has_every_spelling(self):
        """Test that code, alias and display name all map to the code."""
        catmap = build_category_map()
        for code, (alias, display) in CATEGORIES.items():
            assert catmap[canonical_name(code)] == code
            assert catmap[canonical_name(alias)] == code
            assert catmap[canonical_name(display)] == code
        assert catmap["otherpunctuation"] == "Po"
        assert catmap["mathsymbol"] == "Sm"


class TestParseBlocks:
    """Test Blocks.txt parsing."""

    def test_parse(self):
        """Test parsing ranges and names, skipping comments."""
        data = (
            "# Blocks-15.0.0.txt\n"
            "\n"
            "0080..00FF; Latin-1 Supplement\n"
            "0000..007F; Basic Latin\n"
            "1F300..1F5FF; Miscellaneous Symbols and Pictographs\n"
            "# EOF\n"
        )
        blocks = parse_blocks(data)

        assert blocks == [
            Block(0x0000, 0x007F, "Basic Latin"),
            Block(0x0080, 0x00FF, "Latin-1 Supplement"),
            Block(0x1F300, 0x1F5FF, "Miscellaneous Symbols and Pictographs"),
        ]

    def test_contains(self):
        """Test block membership."""
        block = Block(0x2000, 0x206F, "General Punctuation")
        assert 0x2042 in block
        assert 0x2070 not in block


class TestParseEmojiTest:
    """Test emoji-test.txt parsing."""

    def test_base_emoji_in_file_order(self, repo):
        """Test that only fully-qualified base emoji are kept, in order."""
        names = [e.name for e in repo.emojis]

        assert names == [
            "grinning face",
            "grinning face with big eyes",
            "smiling face",
            "waving hand",
            "clapping hands",
            "raising hands",
            "handshake",
            "folded hands",
            "person shrugging",
            "man shrugging",
            "detective",
            "people holding hands",
            "dog face",
        ]

    def test_sequences(self, repo):
        """Test that sequences keep ZWJ and variation selectors."""
        by_name = {e.name: e for e in repo.emojis}

        assert by_name["waving hand"].sequence == (0x1F44B,)
        assert by_name["smiling face"].text == "\u263a\ufe0f"
        assert by_name["man shrugging"].sequence == (0x1F937, 0x200D, 0x2642, 0xFE0F)

    def test_skin_tone_support(self, repo):
        """Test that skin tone support comes from single-modifier variants."""
        support = {e.name: e.supports_skin_tone for e in repo.emojis}

        assert support["waving hand"] is True
        assert support["clapping hands"] is True
        assert support["man shrugging"] is True
        assert support["detective"] is True
        assert support["handshake"] is False
        assert support["people holding hands"] is False
        assert support["dog face"] is False

    def test_groups(self, repo):
        """Test group and subgroup listing."""
        assert repo.emoji_groups == [
            "Smileys & Emotion",
            "People & Body",
            "Animals & Nature",
        ]
        assert repo.emoji_subgroups["People & Body"] == [
            "hand-fingers-open",
            "hands",
            "person-gesture",
            "person-role",
            "family",
        ]

    def test_line_without_version(self):
        """Test lines from older files that have no E<version> field."""
        data = (
            "# group: Flags\n"
            "# subgroup: flag\n"
            "1F3C1 ; fully-qualified # 🏁 chequered flag\n"
        )

        (emoji,) = parse_emoji_test(data)

        assert emoji.name == "chequered flag"
        assert emoji.group == "Flags"

    def test_malformed_line(self):
        """Test that unrecognized lines are an error."""
        with pytest.raises(ValueError):
            parse_emoji_test("# group: a\n# subgroup: b\nnot an emoji line\n")

    def test_missing_group(self):
        """Test that emoji before any group header are an error."""
        with pytest.raises(ValueError):
            parse_emoji_test("1F600 ; fully-qualified # 😀 E1.0 grinning face\n")


class TestUnicodeRepository:
    """Test codepoint, category and block lookups."""

    def test_find_codepoint(self, repo):
        """Test looking up an assigned codepoint."""
        info = repo.find_codepoint(0x2042)

        assert info.name == "ASTERISM"
        assert info.category == "Po"
        assert info.block == "General Punctuation"
        assert info.char == "⁂"
        assert info.label == "U+2042"

    @pytest.mark.parametrize("code", [0x0378, 0xD800, 0xE000, 0x110000, 0x9999999999])
    def test_find_codepoint_missing(self, repo, code):
        """Test unassigned, surrogate, private use and out of range values."""
        assert repo.find_codepoint(code) is None

    def test_control_names(self, repo):
        """Test that controls, which have no name, get a placeholder."""
        assert repo.find_codepoint(0x0A).name == "<control>"
        assert repo.find_codepoint(0x0A).block == "Basic Latin"

    def test_algorithmic_names(self, repo):
        """Test CJK ideograph names."""
        info = repo.find_codepoint(0x3402)
        assert info.name == "CJK UNIFIED IDEOGRAPH-3402"
        assert info.block == "CJK Unified Ideographs Extension A"

    def test_no_block(self, repo):
        """Test codepoints outside every known block."""
        assert repo.find_codepoint(0x0410).block == NO_BLOCK

    def test_codepoints_ascending(self, repo):
        """Test that the table is strictly ascending."""
        codes = [cp.code for cp in repo.codepoints]
        assert all(a < b for a, b in zip(codes, codes[1:]))

    def test_codepoints_by_category(self, repo):
        """Test category selection against unicodedata."""
        found = repo.codepoints_by_category("Po")

        assert found
        assert all(cp.category == "Po" for cp in found)
        assert len(found) == sum(
            1 for c in range(0x110000) if unicodedata.category(chr(c)) == "Po"
        )

    def test_codepoints_in_block_skips_unassigned(self, repo):
        """Test that unassigned codepoints in a block are left out."""
        greek = repo.find_block("greekandcoptic")
        codes = [cp.code for cp in repo.codepoints_in_block(greek)]

        assert codes[0] == 0x0370
        assert 0x0378 not in codes
        assert all(0x0370 <= c <= 0x03FF for c in codes)

    def test_find_block(self, repo):
        """Test block lookup by canonical name."""
        assert repo.find_block("generalpunctuation") == Block(
            0x2000, 0x206F, "General Punctuation"
        )
        assert repo.find_block("nosuchblock") is None


class TestDataFiles:
    """Test reading and downloading data files."""

    def test_offline_missing_file(self, tmp_path):
        """Test that missing files are an error when offline."""
        config = Config()
        config.data_directory = tmp_path
        config.offline = True

        with pytest.raises(DataUnavailableError):
            read_data_file(config, "Blocks.txt", config.blocks_url)

    def test_corrupt_emoji_file(self, tmp_path):
        """Test that an unreadable emoji-test.txt is reported as unavailable."""
        (tmp_path / "emoji-test.txt").write_text(
            "# group: Smileys & Emotion\n# subgroup: face-smiling\n1F600 ; fully-q",
            encoding="utf-8",
        )
        config = Config()
        config.data_directory = tmp_path
        config.offline = True

        with pytest.raises(DataUnavailableError, match="corrupt emoji-test.txt"):
            UnicodeRepository(config).emojis

    @patch("unilookup.unidata.loader.requests.get")
    def test_downloads_missing_file(self, mock_get, tmp_path):
        """Test that a missing file is downloaded once and then reused."""
        response = Mock()
        response.content = b"0000..007F; Basic Latin\n"
        mock_get.return_value = response

        config = Config()
        config.data_directory = tmp_path / "data"
        config.offline = False

        assert read_data_file(config, "Blocks.txt", "http://example/Blocks.txt") == (
            "0000..007F; Basic Latin\n"
        )
        read_data_file(config, "Blocks.txt", "http://example/Blocks.txt")

        mock_get.assert_called_once_with("http://example/Blocks.txt", timeout=30)
        assert (tmp_path / "data" / "Blocks.txt").exists()

    @patch("unilookup.unidata.loader.requests.get")
    def test_download_failure(self, mock_get, tmp_path):
        """Test that network errors become DataUnavailableError."""
        mock_get.side_effect = requests.exceptions.ConnectionError("offline")

        with pytest.raises(DataUnavailableError):
            fetch_data_file("http://example/Blocks.txt", tmp_path / "Blocks.txt")
        assert not (tmp_path / "Blocks.txt").exists()

    @patch("unilookup.unidata.loader.requests.get")
    def test_download_http_error(self, mock_get, tmp_path):
        """Test that HTTP errors become DataUnavailableError."""
        response = Mock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404")
        mock_get.return_value = response

        with pytest.raises(DataUnavailableError):
            fetch_data_file("http://example/Blocks.txt", tmp_path / "Blocks.txt")


class TestConfig:
    """Test configuration management."""

    def test_config_from_environment(self, monkeypatch, tmp_path):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("UNILOOKUP_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("UNILOOKUP_OFFLINE", "yes")
        monkeypatch.setenv("UNILOOKUP_UCD_URL", "http://mirror/{version}/ucd/")
        monkeypatch.setenv("UNILOOKUP_REQUEST_TIMEOUT", "5")

        config = Config()

        assert config.data_directory == tmp_path
        assert config.offline is True
        assert config.request_timeout == 5.0
        assert config.blocks_url == (
            f"http://mirror/{unicodedata.unidata_version}/ucd/Blocks.txt"
        )

    def test_config_defaults(self, monkeypatch):
        """Test defaults follow the interpreter's Unicode version."""
        for name in ("UNILOOKUP_DATA_DIR", "UNILOOKUP_OFFLINE", "UNILOOKUP_EMOJI_URL"):
            monkeypatch.delenv(name, raising=False)

        config = Config()

        assert config.offline is False
        assert config.data_directory.name == unicodedata.unidata_version
        assert config.emoji_test_url.endswith(
            f"/emoji/{config.emoji_version}/emoji-test.txt"
        )

    def test_get_repository_is_shared(self, offline_config):
        """Test that one repository is kept per data directory."""
        assert get_repository(offline_config) is get_repository(offline_config)
        assert isinstance(get_repository(offline_config), UnicodeRepository)
