"""Tests for similarity_checker.core.env — .env loading and typed settings."""

import os
from pathlib import Path

import pytest
from similarity_checker.core.env import _find_dotenv, _parse_dotenv, env_float, env_int, load_env


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('SIMILARITY_THRESHOLD=0.95\n')
        assert _parse_dotenv(f) == {'SIMILARITY_THRESHOLD': '0.95'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_line_without_equals_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        # .env is above .git — should not be found
        repo = tmp_path / 'repo'
        (repo / '.git').mkdir(parents=True)
        (repo / 'src').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / 'src').mkdir(parents=True)
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_SIMILARITY_KEY', raising=False)
        (tmp_path / '.env').write_text('TEST_SIMILARITY_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_SIMILARITY_KEY') == 'secret'
        monkeypatch.delenv('TEST_SIMILARITY_KEY')

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_SIMILARITY_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_SIMILARITY_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_SIMILARITY_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_SIMILARITY_KEY3', raising=False)
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_SIMILARITY_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TEST_SIMILARITY_KEY3') == 'custom'
        monkeypatch.delenv('TEST_SIMILARITY_KEY3')

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # tmp_path has no .env, and we fake a .git so it stops
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestTypedSettings:
    def test_float_default_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('SIMILARITY_THRESHOLD', raising=False)
        assert env_float('SIMILARITY_THRESHOLD', 0.99) == 0.99

    def test_float_default_when_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SIMILARITY_THRESHOLD', '  ')
        assert env_float('SIMILARITY_THRESHOLD', 0.99) == 0.99

    def test_float_parsed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SIMILARITY_THRESHOLD', '0.9')
        assert env_float('SIMILARITY_THRESHOLD', 0.99) == 0.9

    def test_float_malformed_names_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SIMILARITY_THRESHOLD', 'high')
        with pytest.raises(ValueError, match='SIMILARITY_THRESHOLD'):
            env_float('SIMILARITY_THRESHOLD', 0.99)

    def test_int_parsed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SIMILARITY_MAX_WORKERS', '3')
        assert env_int('SIMILARITY_MAX_WORKERS', 6) == 3

    def test_int_malformed_names_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('SIMILARITY_MAX_WORKERS', '2.5')
        with pytest.raises(ValueError, match='SIMILARITY_MAX_WORKERS'):
            env_int('SIMILARITY_MAX_WORKERS', 6)
