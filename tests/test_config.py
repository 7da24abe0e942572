"""Tests for configuration loading and layering."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from silo.config import SiloConfig, load_config, load_config_file, resolve_home
from silo.exceptions import ConfigError


def test_load_config_file_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config_file(tmp_path / "missing.yaml")

    assert loaded == SiloConfig()
    assert loaded.shell_integration_warning is True
    assert not loaded.extra_command_args


def test_load_config_file_reads_all_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "silo.yaml"
    config_path.write_text(
        "\n".join(
            [
                "worktree_dir: ~/worktrees",
                "warn_shell_integration: false",
                "extra_command_args:",
                "  git: ['-c', 'color.ui=always']",
                "  git diff: ['--stat']",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    loaded = load_config_file(config_path)

    assert loaded.worktree_dir == "~/worktrees"
    assert loaded.shell_integration_warning is False
    assert loaded.extra_command_args == {"git": ("-c", "color.ui=always"), "git diff": ("--stat",)}


def test_load_config_file_accepts_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "silo.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config_file(config_path) == SiloConfig()


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("worktree_dir: 12\n", "worktree_dir"),
        ("warn_shell_integration: maybe\n", "warn_shell_integration"),
        ("extra_command_args: [git]\n", "extra_command_args"),
        ("extra_command_args:\n  git: --stat\n", "extra_command_args.git"),
        ("- just\n- a list\n", "mapping"),
        ("worktree_dir: [unclosed\n", "Invalid YAML"),
    ],
    ids=["non_str_dir", "non_bool_warn", "extra_not_mapping", "extra_not_list", "not_mapping", "bad_yaml"],
)
def test_load_config_file_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "silo.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config_file(config_path)


def test_unknown_keys_warn_with_suggestion(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_path = tmp_path / "silo.yaml"
    config_path.write_text("worktree_dirs: /x\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="silo.config.loader"):
        loaded = load_config_file(config_path)

    assert loaded == SiloConfig()
    assert "worktree_dirs" in caplog.text
    assert "did you mean `worktree_dir`?" in caplog.text


def test_merge_other_takes_precedence() -> None:
    merged = SiloConfig(worktree_dir="/base/dir").merge(SiloConfig(worktree_dir="/other/dir"))

    assert merged.worktree_dir == "/other/dir"


def test_merge_preserves_base_when_other_unset() -> None:
    merged = SiloConfig(worktree_dir="/base/dir", warn_shell_integration=False).merge(SiloConfig())

    assert merged.worktree_dir == "/base/dir"
    assert merged.warn_shell_integration is False


def test_merge_warn_shell_integration() -> None:
    merged = SiloConfig(warn_shell_integration=True).merge(SiloConfig(warn_shell_integration=False))

    assert merged.shell_integration_warning is False


def test_merge_extra_command_args_combines() -> None:
    base = SiloConfig(extra_command_args={"git": ("-c", "a=1"), "cargo": ("--color=always",)})
    other = SiloConfig(extra_command_args={"git": ("-c", "b=2"), "npm": ("--silent",)})

    merged = base.merge(other)

    assert merged.extra_command_args == {
        "git": ("-c", "a=1", "-c", "b=2"),
        "cargo": ("--color=always",),
        "npm": ("--silent",),
    }
    assert base.extra_command_args["git"] == ("-c", "a=1")


def test_worktree_path_defaults_under_home() -> None:
    assert SiloConfig().worktree_path(Path("/home/me")) == Path("/home/me/.local/var/silo")


def test_worktree_path_expands_tilde() -> None:
    config = SiloConfig(worktree_dir="~/my/silos")

    assert config.worktree_path(Path("/home/me")) == Path("/home/me/my/silos")


def test_load_config_layers_user_main_and_cwd(tmp_path: Path, home: Path) -> None:
    (home / ".config").mkdir()
    (home / ".config" / "silo.yaml").write_text(
        "worktree_dir: /user/silos\nextra_command_args:\n  git: ['--user']\n", encoding="utf-8"
    )
    main_worktree = tmp_path / "repo"
    main_worktree.mkdir()
    (main_worktree / ".silo.yaml").write_text(
        "warn_shell_integration: false\nextra_command_args:\n  git: ['--main']\n", encoding="utf-8"
    )
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    (cwd / ".silo.yaml").write_text("worktree_dir: /cwd/silos\n", encoding="utf-8")

    loaded = load_config(cwd=cwd, main_worktree=main_worktree)

    assert loaded.worktree_dir == "/cwd/silos"
    assert loaded.warn_shell_integration is False
    assert loaded.extra_command_args == {"git": ("--user", "--main")}


def test_load_config_explicit_path_ignores_other_layers(tmp_path: Path, home: Path) -> None:
    (home / ".config").mkdir()
    (home / ".config" / "silo.yaml").write_text("worktree_dir: /user/silos\n", encoding="utf-8")
    explicit = tmp_path / "custom.yaml"
    explicit.write_text("warn_shell_integration: false\n", encoding="utf-8")

    loaded = load_config(config_path=explicit)

    assert loaded.worktree_dir is None
    assert loaded.warn_shell_integration is False


def test_load_config_explicit_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(config_path=tmp_path / "missing.yaml")


def test_resolve_home_requires_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)

    with pytest.raises(ConfigError, match="HOME"):
        resolve_home()


def test_resolve_home_prefers_explicit_value(home: Path) -> None:
    assert resolve_home(Path("/elsewhere")) == Path("/elsewhere")
    assert resolve_home() == home
