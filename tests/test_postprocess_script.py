"""Tests for the nflextract-postprocess command line script."""

import json
from pathlib import Path

import pytest

from nflextract.scripts.postprocess import main
from nflextract.sentence import Sentence

from tests.conftest import make_mention, make_sentence


def write_input(path: Path, sentences: list[Sentence]) -> Path:
    path.write_text("".join(s.model_dump_json() + "\n" for s in sentences) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_ambient_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NFLEXTRACT_CONFIG", raising=False)


@pytest.fixture
def tagged_input(tmp_path: Path) -> Path:
    first = make_sentence(["The", "Giants", "won", "on", "Sunday"], ners=["O", "O", "O", "O", "DATE"], doc_id="g")
    make_mention(first, 1, 2, "NFLTeam", "g-0-0")
    second = make_sentence(["Packers", "trail", "at", "the", "half"], ners=["O", "O", "O", "DATE", "DATE"], doc_id="g")
    return write_input(tmp_path / "tagged.jsonl", [first, second])


class TestPostprocessScript:
    def test_writes_corrected_sentences(self, tagged_input: Path, gazetteer_file: Path, tmp_path: Path, capsys) -> None:
        output = tmp_path / "out.jsonl"

        status = main(["--gazetteer", str(gazetteer_file), "--input", str(tagged_input), "--output", str(output)])

        assert status == 0
        rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
        assert len(rows) == 2
        first = [(m["entity_type"], m["extent"], m["mention_id"]) for m in rows[0]["mentions"]]
        assert first == [("Date", "Sunday", "g-0-1"), ("NFLTeam", "Giants", "g-0-2")]
        assert rows[1]["mentions"] == []
        assert "Post-processed 2 sentences" in capsys.readouterr().err

    def test_keep_tagger_teams(self, tagged_input: Path, gazetteer_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out.jsonl"

        main(
            [
                "--gazetteer", str(gazetteer_file),
                "--keep-tagger-teams",
                "--input", str(tagged_input),
                "--output", str(output),
            ]
        )

        first = Sentence.model_validate_json(output.read_text(encoding="utf-8").splitlines()[0])
        assert [m.mention_id for m in first.mentions] == ["g-0-0", "g-0-1"]

    def test_missing_gazetteer(self, tmp_path: Path, tagged_input: Path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("NFLEXTRACT_CONFIG", raising=False)

        status = main(["--gazetteer", str(tmp_path / "absent.tsv"), "--input", str(tagged_input)])

        assert status == 1
        assert "gazetteer file not found" in capsys.readouterr().err
