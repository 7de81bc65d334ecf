from __future__ import annotations

import json

import pytest

from property_cli.cli.main import main


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PROPERTY_CLI_DATA_FILE", raising=False)
    monkeypatch.setenv("PROPERTY_CLI_SEED", "99")
    return tmp_path


@pytest.fixture
def seeded(workdir, three_listings):
    data = {str(i): l.to_json_dict() for i, l in enumerate(three_listings)}
    (workdir / "properties.json").write_text(json.dumps(data), encoding="utf-8")
    return three_listings


def test_generate_writes_default_file(workdir, capsys):
    assert main(["generate", "4"]) == 0
    out = capsys.readouterr().out
    assert "Generated 4 properties." in out
    assert sorted(json.loads((workdir / "properties.json").read_text())) == ["0", "1", "2", "3"]


@pytest.mark.parametrize("count", ["0", "-3", "abc", "1e3", "5.0"])
def test_generate_rejects_bad_count(workdir, capsys, count):
    assert main(["generate", count]) == 0
    err = capsys.readouterr().err
    assert "Error generating properties: Please provide a valid positive number" in err
    assert not (workdir / "properties.json").exists()


def test_list_empty(capsys):
    main(["list"])
    assert "No properties available" in capsys.readouterr().out


def test_list(seeded, capsys):
    main(["list"])
    out = capsys.readouterr().out
    assert "$500,000" in out and "$250,000" in out


def test_details(seeded, capsys):
    main(["details", "1"])
    out = capsys.readouterr().out
    assert "Price: $500,000" in out
    assert "- garage: ✓" in out


@pytest.mark.parametrize("index", ["17", "-1", "x"])
def test_details_invalid_index(seeded, capsys, index):
    main(["details", index])
    assert "Error: Invalid property index" in capsys.readouterr().err


def test_search_combines_criteria(seeded, capsys):
    main(["search", "-p", "lt,600000", "--amenities", "garage", "pool"])
    out = capsys.readouterr().out
    assert "Filtering by price lt $600,000" in out
    assert "Filtering by amenities: garage, pool" in out
    assert "Found 1 matching properties:" in out
    assert "$250,000" in out


def test_search_short_square_feet_flag(seeded, capsys):
    main(["search", "-sf", "gt,2500"])
    assert "Found 1 matching properties:" in capsys.readouterr().out


def test_search_location(seeded, capsys):
    main(["search", "--location=37.7749,-122.4194,10", "-d", "SPACIOUS"])
    out = capsys.readouterr().out
    assert "Found 1 matching properties:" in out


def test_search_no_matches(seeded, capsys):
    main(["search", "--rooms", "gt,5"])
    assert "No properties found matching your criteria." in capsys.readouterr().out


@pytest.mark.parametrize(
    "args,message",
    [
        (["--price", "bad,1"], "Invalid operator"),
        (["--bathrooms", "eq,two"], "Invalid number value"),
        (["--amenities", "sauna"], "Invalid amenity: sauna"),
        (["--location", "1,2"], "Invalid location format"),
    ],
)
def test_search_invalid_criteria(seeded, capsys, args, message):
    main(["search", *args])
    captured = capsys.readouterr()
    assert message in captured.err
    assert "Found" not in captured.out


def test_data_file_option(workdir, capsys):
    main(["--data-file", "other.json", "generate", "2"])
    assert (workdir / "other.json").exists()
    assert not (workdir / "properties.json").exists()


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "1.0.0" in capsys.readouterr().out
