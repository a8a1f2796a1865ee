"""Tests for the build and audit command-line entry points."""

import itertools
import json
import string

import pytest
import yaml

from letterloom import audit
from letterloom.engine import ContentFilter, Dictionary, Difficulty, Grid, Level
from letterloom.main import load_config, main


@pytest.fixture
def word_lists(tmp_path):
    """Every three-letter string as the dictionary, with empty content lists."""
    dictionary = tmp_path / "words.txt"
    dictionary.write_text(
        "\n".join("".join(t) for t in itertools.product(string.ascii_lowercase, repeat=3))
    )
    denylist = tmp_path / "deny.txt"
    denylist.write_text("")
    flaglist = tmp_path / "flag.txt"
    flaglist.write_text("")
    return {"dictionary": str(dictionary), "denylist": str(denylist), "flaglist": str(flaglist)}


def write_config(tmp_path, **overrides):
    config = {
        "seed": 1,
        "max_attempts": 3,
        "levels": [
            {"id": 1, "difficulty": "easy", "target_score": 550},
            {"id": 51, "difficulty": "expert", "target_score": 7625, "time_limit": 78, "is_premium": True},
        ],
    }
    config.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(config))
    return str(path)


def audit_args(levels_path, word_lists):
    return [
        str(levels_path),
        "--dictionary", word_lists["dictionary"],
        "--denylist", word_lists["denylist"],
        "--flaglist", word_lists["flaglist"],
    ]


class TestLoadConfig:
    """YAML configuration loading."""

    def test_load(self, tmp_path):
        config = load_config(write_config(tmp_path, early_exit=True))

        assert config.seed == 1
        assert config.early_exit is True
        assert [spec.id for spec in config.levels] == [1, 51]
        assert config.levels[1].time_limit == 78

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))


class TestBuildCommand:
    """`letterloom-build`."""

    def test_build(self, tmp_path, word_lists, capsys):
        output = tmp_path / "levels.json"
        code = main([write_config(tmp_path, **word_lists), "--output", str(output)])

        assert code == 0
        data = json.loads(output.read_text())
        assert data["seed"] == 1
        assert [record["id"] for record in data["levels"]] == [1, 51]
        assert data["levels"][1]["timeLimit"] == 78
        assert "Build Summary" in capsys.readouterr().out

    def test_seed_override(self, tmp_path, word_lists):
        output = tmp_path / "levels.json"
        main([write_config(tmp_path, **word_lists), "-o", str(output), "--seed", "7"])

        assert json.loads(output.read_text())["seed"] == 7

    def test_exhaustion_fails(self, tmp_path, capsys):
        words = tmp_path / "words.txt"
        words.write_text("zzz\n")
        output = tmp_path / "levels.json"

        code = main([write_config(tmp_path, dictionary=str(words)), "-o", str(output)])

        assert code == 1
        assert not output.exists()
        assert "TOO_FEW_WORDS" in capsys.readouterr().err

    def test_keep_going_writes_partial_set(self, tmp_path):
        words = tmp_path / "words.txt"
        words.write_text("zzz\n")
        output = tmp_path / "levels.json"

        code = main([write_config(tmp_path, dictionary=str(words)), "-o", str(output), "--keep-going"])

        assert code == 1
        assert json.loads(output.read_text())["levels"] == []

    def test_missing_dictionary(self, tmp_path, capsys):
        code = main([write_config(tmp_path, dictionary=str(tmp_path / "nope.txt"))])

        assert code == 1
        assert "Error loading word lists" in capsys.readouterr().err

    def test_missing_config(self, tmp_path):
        assert main([str(tmp_path / "missing.yaml")]) == 1


class TestAuditCommand:
    """`letterloom-audit`."""

    @pytest.fixture
    def levels_path(self, tmp_path, word_lists):
        output = tmp_path / "levels.json"
        assert main([write_config(tmp_path, **word_lists), "-o", str(output)]) == 0
        return output

    def test_clean_set_passes(self, levels_path, word_lists, capsys):
        assert audit.main(audit_args(levels_path, word_lists)) == 0
        assert "FAIL:    0/2 levels" in capsys.readouterr().out

    def test_tampered_word_list_fails(self, levels_path, word_lists, capsys):
        """Dropping a reachable word from the stored list is caught."""
        data = json.loads(levels_path.read_text())
        data["levels"][0]["validWords"].pop()
        levels_path.write_text(json.dumps(data))

        assert audit.main(audit_args(levels_path, word_lists)) == 1
        assert "missing from word list" in capsys.readouterr().out

    def test_denylisted_word_fails(self, levels_path, word_lists, tmp_path):
        """A word newly denylisted but still reachable fails the audit."""
        data = json.loads(levels_path.read_text())
        word = data["levels"][0]["validWords"][0]
        deny = tmp_path / "deny2.txt"
        deny.write_text(word.lower() + "\n")

        args = audit_args(levels_path, {**word_lists, "denylist": str(deny)})
        assert audit.main(args) == 1

    def test_missing_file(self, tmp_path):
        assert audit.main([str(tmp_path / "missing.json")]) == 1


class TestAuditLevel:
    """Checks on a single stored level."""

    def make_level(self):
        grid = Grid(letters="SHITX" + "X" * 20)
        return Level(id=1, difficulty=Difficulty.EASY, grid=grid, target_score=100, valid_words=["HIT"])

    def test_consistent_level_below_minimum_warns(self):
        result = audit.audit_level(self.make_level(), Dictionary.from_words(["hit"]), ContentFilter())

        assert result.status == "WARNING"
        assert result.missing == [] and result.extra == []

    def test_reachable_denylisted_word_fails(self):
        """A forbidden word fails the audit even when the dictionary lacks it."""
        content_filter = ContentFilter(denylist=["shit"])
        result = audit.audit_level(self.make_level(), Dictionary.from_words(["hit"]), content_filter)

        assert result.status == "FAIL"
        assert any("SHIT" in issue for issue in result.issues)
