import json

from cli import main


def test_demo_prints_report(capsys):
    assert main(["--demo", "--top-n", "2"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["metadata"]["total_videos"] == 10
    assert [r["title"] for r in report["recommendations"]] == ["Data Scientist", "ML Engineer"]


def test_takeout_file(tmp_path, capsys):
    path = tmp_path / "watch-history.json"
    path.write_text(json.dumps([
        {"title": "Watched Learn React in 1 Hour", "time": "2024-01-02T00:00:00Z",
         "subtitles": [{"name": "Dev", "url": "https://www.youtube.com/channel/UC1"}]},
    ]), encoding="utf-8")
    assert main([str(path)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["metadata"]["total_videos"] == 1
    assert report["skills"][0]["name"] == "Programming"


def test_malformed_file(tmp_path):
    path = tmp_path / "watch-history.json"
    path.write_text('{"not": "a list"}', encoding="utf-8")
    assert main([str(path)]) == 1


def test_no_input():
    assert main([]) == 2


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_non_utf8_file(tmp_path):
    path = tmp_path / "watch-history.json"
    path.write_bytes(b"\xff\xfe\x00\x00")
    assert main([str(path)]) == 1


def test_no_usable_entries(tmp_path, capsys):
    path = tmp_path / "watch-history.json"
    path.write_text(json.dumps([
        {"title": "Watched Unknown Title", "time": "2024-01-02T00:00:00Z"},
        {"header": "YouTube", "time": "2024-01-03T00:00:00Z"},
    ]), encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""
