from pathlib import Path
import json
import subprocess
import sys

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts/garden_calendar.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
    )


def test_calendar_for_selected_crops():
    result = _run("2024-05-15", "2024", "5", "--crop", "Tomato", "--crop", "basil")
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {
        "2024-05-22": [{"crop": "Basil", "event": "transplant"}],
        "2024-05-29": [{"crop": "Tomato", "event": "transplant"}],
    }


def test_calendar_category_filter():
    result = _run("2024-05-15", "2024", "5", "--category", "herb")
    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["2024-05-15"] == [{"crop": "Dill", "event": "sow"}]
    assert data["2024-05-22"] == [{"crop": "Basil", "event": "transplant"}]
    crops = {event["crop"] for events in data.values() for event in events}
    assert crops == {"Basil", "Dill"}


def test_calendar_output_file(tmp_path: Path):
    out_file = tmp_path / "april.json"
    result = _run("2024-05-15", "2024", "4", "--crop", "tomato", "--output", str(out_file))
    assert result.returncode == 0, result.stderr
    assert json.loads(out_file.read_text()) == {
        "2024-04-03": [{"crop": "Tomato", "event": "indoor"}],
    }


def test_calendar_rejects_bad_month():
    assert _run("2024-05-15", "2024", "13").returncode == 2
