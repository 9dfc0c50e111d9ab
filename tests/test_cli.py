from __future__ import annotations

import json

from attendance_qa.cli import main


def test_sample_run_reports_placeholder(capsys):
    code = main(["validate", "--json"])
    result = json.loads(capsys.readouterr().out)

    assert code == 1
    assert result["summary"]["placeholdersFound"] == 1
    assert result["summary"]["presentInStructuredData"] == 3


def test_valid_file(tmp_path, capsys):
    path = tmp_path / "answer.json"
    path.write_text(
        json.dumps(
            {
                "naturalLanguageAnswer": "John Smith (S1001) was absent.",
                "structuredData": {"students": [{"firstName": "John", "lastName": "Smith", "studentId": "S1001"}]},
            }
        ),
        encoding="utf-8",
    )

    code = main(["validate", str(path)])

    assert code == 0
    assert "No issues detected" in capsys.readouterr().out


def test_malformed_file_is_salvaged(tmp_path, capsys):
    path = tmp_path / "answer.txt"
    path.write_text('model said: {"naturalLanguageAnswer": "Nobody was absent."} done', encoding="utf-8")

    code = main(["validate", "--json", str(path)])

    assert code == 0
    assert json.loads(capsys.readouterr().out)["summary"]["mentionedInNL"] == 0


def test_missing_file(tmp_path, capsys):
    code = main(["validate", str(tmp_path / "missing.json")])

    assert code == 2
    assert "File not found" in capsys.readouterr().err
