"""Tests for CLI module."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mscatalog.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "mscatalog" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("search", "show", "locations", "facets"):
        assert command in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


@pytest.mark.unit
def test_cli_missing_data_dir(runner: CliRunner, tmp_path: Path) -> None:
    """Test a nonexistent data directory is a usage error."""
    result = runner.invoke(cli, ["search", str(tmp_path / "nope")])

    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# search command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_search_term_in_field(runner: CliRunner, data_dir: Path) -> None:
    """Test a term restricted to one field lists matching rows."""
    result = runner.invoke(cli, ["search", str(data_dir), "فقه", "-f", "categories"])

    assert result.exit_code == 0
    assert "1054  كتاب الأم  الشافعي  d. ٢٠٤هـ" in result.output
    assert "17  Al-Muwatta" in result.output
    assert "MS-2001" not in result.output
    assert "3 matching records" in result.output


@pytest.mark.unit
def test_search_filters_and_date_bounds(runner: CliRunner, data_dir: Path) -> None:
    """Test --filter and --death-min narrow the result together."""
    result = runner.invoke(
        cli,
        ["search", str(data_dir), "--filter", "century=3", "--death-min", "250", "--json"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["total"] == 1
    assert payload["items"][0]["unique_id"] == "1500"
    assert payload["items"][0]["categories"] == ["Hadith", "فقه"]


@pytest.mark.unit
def test_search_sorted_pages(runner: CliRunner, data_dir: Path) -> None:
    """Test --sort, --page and --page-size select one sorted page."""
    result = runner.invoke(
        cli,
        [
            "search", str(data_dir), "--sort", "unique_id",
            "--page", "2", "--page-size", "2", "--json",
        ],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["total"] == 5
    assert payload["page"] == 2
    assert payload["page_count"] == 3
    assert [item["unique_id"] for item in payload["items"]] == ["17", "MS-2001"]


@pytest.mark.unit
def test_search_descending(runner: CliRunner, data_dir: Path) -> None:
    """Test --desc reverses the sort order."""
    result = runner.invoke(
        cli, ["search", str(data_dir), "--sort", "unique_id", "--desc", "--page-size", "1", "--json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["items"][0]["unique_id"] == "٣٠٥"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["--filter", "century"], "expected FIELD=VALUE"),
        (["--filter", "bogus=1"], "Unknown filter field"),
        (["--field", "ms_locations"], "Invalid value"),
        (["--page", "0"], "Invalid value"),
    ],
)
def test_search_bad_options(
    runner: CliRunner, data_dir: Path, args: list[str], message: str
) -> None:
    """Test malformed options are usage errors."""
    result = runner.invoke(cli, ["search", str(data_dir), *args])

    assert result.exit_code == 2
    assert message in result.output


@pytest.mark.unit
def test_search_missing_table(runner: CliRunner, tmp_path: Path) -> None:
    """Test a directory without the metadata table reports an error."""
    result = runner.invoke(cli, ["search", str(tmp_path)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "manuscript_metadata.csv" in result.output


@pytest.mark.unit
def test_search_writes_event_log(runner: CliRunner, data_dir: Path, tmp_path: Path) -> None:
    """Test --log-file records the table load."""
    log_file = tmp_path / "events.jsonl"

    result = runner.invoke(cli, ["search", str(data_dir), "--log-file", str(log_file)])

    assert result.exit_code == 0
    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [e["event"] for e in events] == ["table_loaded"]


# ---------------------------------------------------------------------------
# show / locations / facets commands
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_show_details(runner: CliRunner, data_dir: Path) -> None:
    """Test show prints metadata and resolved locations."""
    result = runner.invoke(cli, ["show", str(data_dir), "1054"])

    assert result.exit_code == 0
    assert "Title:      كتاب الأم" in result.output
    assert "            الأم" in result.output
    assert "Author:     الشافعي" in result.output
    assert "Locations (1):" in result.output
    assert "British Library (London, UK) #Or. 1054" in result.output


@pytest.mark.unit
def test_show_json(runner: CliRunner, data_dir: Path) -> None:
    """Test show --json includes locations with string catalog numbers."""
    result = runner.invoke(cli, ["show", str(data_dir), "17", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["author"] == "Malik ibn Anas"
    assert [loc["catalog_num"] for loc in payload["ms_locations"]] == ["3001", "512"]


@pytest.mark.unit
def test_show_unknown_manuscript(runner: CliRunner, data_dir: Path) -> None:
    """Test an unknown id exits non-zero."""
    result = runner.invoke(cli, ["show", str(data_dir), "4242"])

    assert result.exit_code == 1
    assert "Manuscript not found: 4242" in result.output


@pytest.mark.unit
def test_locations_command(runner: CliRunner, data_dir: Path) -> None:
    """Test locations resolves through the numeric fallback."""
    result = runner.invoke(cli, ["locations", str(data_dir), "MS-2001"])

    assert result.exit_code == 0
    assert "Azhar (Cairo, Egypt) #88" in result.output


@pytest.mark.unit
def test_locations_none_known(runner: CliRunner, data_dir: Path) -> None:
    """Test an id without copies prints a notice."""
    result = runner.invoke(cli, ["locations", str(data_dir), "1500"])

    assert result.exit_code == 0
    assert "No known locations." in result.output


@pytest.mark.unit
def test_facets_command(runner: CliRunner, data_dir: Path) -> None:
    """Test facets lists sorted distinct values with a labelled count."""
    result = runner.invoke(cli, ["facets", str(data_dir), "century"])

    assert result.exit_code == 0
    assert "2\n3\n4\n" in result.output
    assert "3 distinct value(s) for Century" in result.output


@pytest.mark.unit
def test_facets_unknown_field(runner: CliRunner, data_dir: Path) -> None:
    """Test an unknown facet field is a usage error."""
    result = runner.invoke(cli, ["facets", str(data_dir), "library"])

    assert result.exit_code == 2
