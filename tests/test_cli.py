import io
import json

import pytest

from json2ts import __version__
from json2ts.cli import load_type_map, main

PERSON = '{"user": {"name": "John", "age": 30}}'


def test_text_input(capsys):
    assert main(["--text", PERSON, "--name", "Person", "-e", "a"]) == 0
    assert capsys.readouterr().out == (
        "export interface User {\n"
        "  name: string;\n"
        "  age: number;\n"
        "}\n"
        "\n"
        "export interface Person {\n"
        "  user: User;\n"
        "}\n"
    )


def test_flat_output(capsys):
    assert main(["-t", PERSON, "--flat"]) == 0
    out = capsys.readouterr().out
    assert out.count("interface ") == 1
    assert "  user: {\n" in out


def test_stdin_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": 1}'))
    assert main([]) == 0
    assert capsys.readouterr().out == "export interface RootObject {\n  a: number;\n}\n"


def test_file_input_and_output(tmp_path, capsys):
    source = tmp_path / "person.json"
    source.write_text(PERSON, encoding="utf-8")
    target = tmp_path / "person.d.ts"
    assert main(["-f", str(source), "-o", str(target), "-e", "n"]) == 0
    text = target.read_text(encoding="utf-8")
    assert text.startswith("interface User {")
    assert text.endswith("}\n")
    assert "Successfully wrote" in capsys.readouterr().err


def test_sample_option(tmp_path, capsys):
    source = tmp_path / "rows.json"
    source.write_text(json.dumps([{"id": 1}, {"id": 2, "extra": "x"}]), encoding="utf-8")
    assert main(["-f", str(source), "--sample", "1"]) == 0
    assert capsys.readouterr().out == (
        "interface RootObjectItem {\n"
        "  id: number;\n"
        "}\n"
        "\n"
        "export type RootObject = RootObjectItem[];\n"
    )


def test_sample_requires_file():
    with pytest.raises(SystemExit) as excinfo:
        main(["-t", "[]", "--sample", "1"])
    assert excinfo.value.code == 2


def test_suggest_name(capsys):
    assert main(["-t", '{"profile": {"name": "x"}}', "--suggest-name"]) == 0
    out = capsys.readouterr().out
    assert "export interface Profile {" in out
    assert "  profile: Profile2;" in out


def test_options_flags(capsys):
    args = ["-t", '{"user_name": "x", "n": null}', "-c", "camel", "--readonly", "--optional", "--strict"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "  readonly userName?: string;" in out
    assert "  readonly n?: null;" in out


def test_type_map_flags(tmp_path, capsys):
    mapping = tmp_path / "types.yaml"
    mapping.write_text("user_id: UserID\nnumber: Num\n", encoding="utf-8")
    args = ["-t", '{"user_id": "1", "count": 2, "flag": true}', "--type-map-file", str(mapping), "-m", "boolean=Flag"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "  user_id: UserID;" in out
    assert "  count: Num;" in out
    assert "  flag: Flag;" in out


def test_load_type_map_entries_override_file(tmp_path):
    mapping = tmp_path / "types.yaml"
    mapping.write_text("id: FromFile\n", encoding="utf-8")
    assert load_type_map(["id=FromFlag"], str(mapping)) == {"id": "FromFlag"}
    assert load_type_map([], None) is None


def test_bad_type_map_entry(capsys):
    assert main(["-t", "{}", "-m", "noequals"]) == 1
    assert "KEY=TYPE" in capsys.readouterr().err


def test_invalid_json(capsys):
    assert main(["-t", '{"name": "John"']) == 1
    assert "Error parsing JSON" in capsys.readouterr().err


def test_invalid_name(capsys):
    assert main(["-t", "{}", "-n", "1abc"]) == 1
    assert "invalid interface name" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.json")]) == 1
    assert "Error" in capsys.readouterr().err


def test_write_failure(tmp_path, capsys):
    assert main(["-t", "{}", "-o", str(tmp_path)]) == 1
    assert "Error writing output file" in capsys.readouterr().err


def test_depth_limit_fails(capsys):
    assert main(["-t", '{"a": {"b": {"c": {}}}}', "--max-depth", "1"]) == 1
    assert "Maximum nesting depth" in capsys.readouterr().err


def test_version(capsys):
    assert main(["--version"]) == 0
    assert __version__ in capsys.readouterr().err
