"""
Tests for CLI Commands
======================
Tests for the phylang command-line interface in phylang/cli.py.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from phylang import PersonalNameContext, get_preset, new_language
from phylang.cli import main

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]


def preset_language(name, seed):
    profile, geography = get_preset(name)
    return new_language(profile, geography, seed)


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "phylang", "--version"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "phylang" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = subprocess.run(
            [sys.executable, "-m", "phylang", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "word" in result.stdout
        assert "presets" in result.stdout

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIWord:
    """Tests for word command."""

    def test_quiet_word(self, capsys):
        code = main(['-q', 'word', 'house', '--preset', 'coastal_folk', '--seed', '12345'])
        assert code == 0
        word = preset_language('coastal_folk', 12345).translate_word('house')
        assert f"house {word}" in capsys.readouterr().out

    def test_alias(self, capsys):
        assert main(['-q', 'w', 'fire', '--seed', '3']) == 0
        assert capsys.readouterr().out.startswith('fire ')

    def test_json(self, capsys):
        code = main(['word', 'house', 'river', '--preset', 'mountain_warriors',
                     '--seed', '9', '--json'])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        lang = preset_language('mountain_warriors', 9)
        assert data == {'house': lang.translate_word('house'),
                        'river': lang.translate_word('river')}

    def test_traits_and_geography(self, capsys):
        code = main(['-q', 'word', 'stone', '--traits', '3', '3', '3', '3', '3', '3',
                     '--geography', 'plains', '--seed', '1'])
        assert code == 0
        word = preset_language('plains_herders', 1).translate_word('stone')
        assert f"stone {word}" in capsys.readouterr().out

    def test_no_cache_same_result(self, capsys):
        main(['-q', 'word', 'sea', '--seed', '4'])
        cached = capsys.readouterr().out
        main(['-q', 'word', 'sea', '--seed', '4', '--no-cache'])
        assert capsys.readouterr().out == cached

    def test_table_output(self, capsys):
        assert main(['word', 'house', '--seed', '12345']) == 0
        out = capsys.readouterr().out
        assert 'Concept' in out
        assert 'house' in out


class TestCLIPhrase:
    """Tests for phrase command."""

    def test_phrase(self, capsys):
        code = main(['-q', 'phrase', 'the warrior sees the mountain',
                     '--preset', 'river_scholars', '--seed', '5'])
        assert code == 0
        expected = preset_language('river_scholars', 5).translate_phrase(
            'the warrior sees the mountain'
        )
        assert capsys.readouterr().out.strip() == expected

    def test_shows_word_order(self, capsys):
        main(['phrase', 'fire burns wood', '--preset', 'river_scholars'])
        assert 'Word order: SOV' in capsys.readouterr().out


class TestCLIName:
    """Tests for name command."""

    def test_person(self, capsys):
        code = main(['-q', 'name', 'person', '42', '--preset', 'coastal_folk', '--seed', '12345'])
        assert code == 0
        lang = preset_language('coastal_folk', 12345)
        expected = lang.naming.generate_personal_name(PersonalNameContext('42'))
        assert capsys.readouterr().out.strip() == expected

    def test_person_pattern_line(self, capsys):
        main(['n', 'person', '1', '--preset', 'desert_nobility', '--birth-order', '2'])
        assert 'Pattern: elaborate' in capsys.readouterr().out

    def test_person_with_parent(self, capsys):
        main(['-q', 'name', 'person', '1', '--preset', 'mountain_warriors', '--parent', 'Bob'])
        assert 'Bob' in capsys.readouterr().out

    def test_person_with_epithet(self, capsys):
        main(['-q', 'name', 'person', '1', '--seed', '2'])
        plain = capsys.readouterr().out.strip()
        main(['-q', 'name', 'person', '1', '--seed', '2', '--epithet'])
        full = capsys.readouterr().out.strip()
        assert full.startswith(plain + ' ')

    def test_place_with_founder(self, capsys):
        code = main(['-q', 'name', 'place', '7', '--type', 'settlement', '--founder', 'Kalo'])
        assert code == 0
        assert 'Kalo' in capsys.readouterr().out

    def test_place_types(self, capsys):
        for place_type in ('natural', 'landmark', 'region'):
            assert main(['-q', 'name', 'place', '3', '--type', place_type,
                         '--local-geography', 'forest']) == 0
            assert capsys.readouterr().out.strip()

    def test_epithet(self, capsys):
        code = main(['-q', 'name', 'epithet', '5', '--characteristic', 'brave', '--seed', '1'])
        assert code == 0
        the = preset_language('coastal_folk', 1).translate_word('the')
        assert capsys.readouterr().out.startswith(f"{the} ")

    def test_epithet_achievement(self, capsys):
        main(['name', 'epithet', '5', '--achievement', 'dragon'])
        assert 'Pattern: achievement' in capsys.readouterr().out

    def test_invalid_birth_order(self, capsys):
        assert main(['name', 'person', '1', '--birth-order', '0']) == 1
        assert 'Error:' in capsys.readouterr().err


class TestCLIGenome:
    """Tests for genome and presets commands."""

    def test_genome_json(self, capsys):
        code = main(['genome', '--preset', 'mountain_warriors', '--seed', '7', '--json'])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data['id'] == 'lang_7'
        assert data['geography'] == 'mountains'
        assert data['name_pattern'] == 'patronymic'

    def test_genome_table(self, capsys):
        assert main(['-q', 'genome', '--preset', 'forest_dreamers']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert 'geography forest' in lines
        assert any(line.startswith('word_order ') for line in lines)

    def test_presets_quiet(self, capsys):
        assert main(['-q', 'presets']) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].startswith('coastal_folk coastal')


class TestCLIErrors:
    """Invalid input exits with status 1 and a message on stderr."""

    def test_unknown_preset(self, capsys):
        assert main(['word', 'house', '--preset', 'atlantis']) == 1
        err = capsys.readouterr().err
        assert "Unknown preset 'atlantis'" in err
        assert 'coastal_folk' in err

    def test_unknown_geography(self, capsys):
        assert main(['word', 'house', '--geography', 'tundra']) == 1
        assert "Unknown geography 'tundra'" in capsys.readouterr().err

    def test_out_of_range_traits(self, capsys):
        assert main(['word', 'house', '--traits', '9', '3', '3', '3', '3', '3']) == 1
        assert 'agreeableness' in capsys.readouterr().err

    def test_preset_and_traits_exclusive(self):
        with pytest.raises(SystemExit):
            main(['word', 'house', '--preset', 'coastal_folk',
                  '--traits', '3', '3', '3', '3', '3', '3'])
