"""
Unit tests for the enchantment table script.
"""

import json

import pytest


class TestEnchantmentTableScript:
    """Tests for tools/enchantment_table.py."""

    def test_prints_whole_table(self, enchantment_table, config_path, capsys):
        """Test that no arguments prints one line per enchantment."""
        status = enchantment_table.main(["--config", str(config_path)])
        out = capsys.readouterr().out.splitlines()
        assert status == 0
        assert len(out) == 24
        assert "Protection" in out[0]
        assert "rodlure" in out[-1]

    def test_resolves_ids_and_aliases(self, enchantment_table, config_path, capsys):
        """Test resolving a mix of ids and aliases."""
        status = enchantment_table.main(["--config", str(config_path), "35", "SHARP"])
        out = capsys.readouterr().out.splitlines()
        assert status == 0
        assert "Fortune" in out[0]
        assert "Sharpness" in out[1]

    def test_unknown_query(self, enchantment_table, config_path, capsys):
        """Test that unknown queries are reported with exit status 1."""
        status = enchantment_table.main(["--config", str(config_path), "36", "nope"])
        out = capsys.readouterr().out.splitlines()
        assert status == 1
        assert out == ["no such enchantment: 36", "no such enchantment: nope"]

    @pytest.mark.parametrize("query,expected", [
        ("16", "Sharpness"),
        (" 1 ", "Fire protection"),
        ("-1", None),
        ("flameprotection", "Fire protection"),
    ])
    def test_resolve(self, enchantment_table, registry, query, expected):
        """Test numeric vs alias resolution."""
        enchant = enchantment_table.resolve(registry, query)
        if expected is None:
            assert enchant is None
        else:
            assert enchant.name == expected

    def test_check_clean(self, enchantment_table, config_path, capsys):
        """Test that the shipped table passes the check."""
        status = enchantment_table.main(["--config", str(config_path), "--check", "--strict"])
        assert status == 0
        assert capsys.readouterr().out.startswith("OK: 24 enchantments")

    def test_check_reports_collision(self, enchantment_table, config_path, monkeypatch, capsys):
        """Test that a broken table fails the check."""
        from systems.enchantments import EnchantmentType
        broken = enchantment_table.ENCHANTMENTS + (
            EnchantmentType(key="COPY", id=99, name="Copy", aliases=("sharp",)),
        )
        monkeypatch.setattr(enchantment_table, "ENCHANTMENTS", broken)

        assert enchantment_table.main(["--config", str(config_path), "--check"]) == 1
        assert "sharp" in capsys.readouterr().out

        assert enchantment_table.main(["--config", str(config_path), "--check", "--strict"]) == 1
        assert "inconsistent" in capsys.readouterr().out

    def test_bad_log_level_in_config(self, enchantment_table, config_path, capsys):
        """Test that an unknown log level exits with status 2."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{"log_level": "LOUD"}', encoding="utf-8")
        assert enchantment_table.main(["--config", str(config_path)]) == 2
        assert "LOUD" in capsys.readouterr().out

    def test_unusable_log_dir_in_config(self, enchantment_table, config_path, tmp_path, capsys):
        """Test that a log_dir pointing at a file exits with status 2."""
        not_a_dir = tmp_path / "not_a_dir.txt"
        not_a_dir.write_text("", encoding="utf-8")
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({"log_dir": str(not_a_dir)}), encoding="utf-8")
        assert enchantment_table.main(["--config", str(config_path)]) == 2
        assert "Log directory is unusable." in capsys.readouterr().out

    def test_huge_numeric_query(self, enchantment_table, registry, config_path, capsys):
        """Test that a number too long to convert is an unknown query."""
        query = "9" * 5000
        assert enchantment_table.resolve(registry, query) is None
        assert enchantment_table.main(["--config", str(config_path), query]) == 1
        assert capsys.readouterr().out.startswith("no such enchantment: 999")
