from __future__ import annotations

import json
from pathlib import Path

import pytest
from scriptsync.config.loader import load_repo_config, strip_json_comments
from scriptsync.core.repo_root import find_repo_root
from scriptsync.errors import ScriptError
from scriptsync.exit_codes import ERR_CONFIG


def test_strip_json_comments_keeps_urls_inside_strings() -> None:
    raw = '{\n  // comment\n  "url": "https://rushjs.io/a//b", /* inline */ "n": 1\n}\n'
    assert json.loads(strip_json_comments(raw)) == {"url": "https://rushjs.io/a//b", "n": 1}


def test_strip_json_comments_keeps_line_numbers() -> None:
    raw = '{\n/* one\n two */\n"a": 1}'
    assert strip_json_comments(raw).count("\n") == raw.count("\n")


def test_strip_json_comments_handles_escaped_quotes() -> None:
    raw = '{"a": "say \\"// not a comment\\""} // trailing'
    assert json.loads(strip_json_comments(raw)) == {"a": 'say "// not a comment"'}


def test_strip_json_comments_rejects_unterminated_block() -> None:
    with pytest.raises(ValueError):
        strip_json_comments('{"a": 1 /* never closed')


def test_load_pnpm_repo_config(minimal_repo_root: Path) -> None:
    config = load_repo_config(minimal_repo_root)
    assert config.package_manager == "pnpm"
    assert config.package_manager_version == "8.15.1"
    assert config.rush_version == "5.112.0"
    assert config.common_scripts_folder == minimal_repo_root / "common" / "scripts"


def test_load_npm_repo_config(npm_repo_root: Path) -> None:
    assert load_repo_config(npm_repo_root).package_manager == "npm"


@pytest.mark.parametrize(
    "document",
    [
        {"rushVersion": "5.0.0"},
        {"rushVersion": "5.0.0", "pnpmVersion": "8.0.0", "yarnVersion": "1.22.0"},
    ],
)
def test_exactly_one_package_manager_required(tmp_path: Path, document: dict[str, str]) -> None:
    (tmp_path / "rush.json").write_text(json.dumps(document), encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_repo_config(tmp_path)
    assert err.value.kind == "invalid_config"
    assert err.value.code == ERR_CONFIG


def test_schema_violation_is_reported(tmp_path: Path) -> None:
    (tmp_path / "rush.json").write_text('{"pnpmVersion": 8}', encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_repo_config(tmp_path)
    assert err.value.kind == "invalid_config"


def test_invalid_json_is_reported(tmp_path: Path) -> None:
    (tmp_path / "rush.json").write_text("{ not json", encoding="utf-8")
    with pytest.raises(ScriptError) as err:
        load_repo_config(tmp_path)
    assert "invalid json" in str(err.value)


def test_find_repo_root_from_nested_path(minimal_repo_root: Path) -> None:
    nested = minimal_repo_root / "apps" / "web" / "src"
    nested.mkdir(parents=True)
    assert find_repo_root(nested) == minimal_repo_root.resolve()


def test_find_repo_root_outside_repo(tmp_path: Path) -> None:
    with pytest.raises(ScriptError) as err:
        find_repo_root(tmp_path)
    assert err.value.kind == "repo_root_not_found"
