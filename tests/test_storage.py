from __future__ import annotations

import pytest

from localchart import storage
from localchart.errors import ChartGenerationError
from localchart.storage import ChartWriter, generate_chart


def _writer(tmp_path) -> ChartWriter:
    return ChartWriter(tmp_path / "charts", clock=lambda: 1700000000.5)


def test_write_uses_type_and_millisecond_stamp(tmp_path) -> None:
    writer = _writer(tmp_path)
    artifact = writer.write("pie", "<svg/>")
    assert artifact.filename == "pie_1700000000500.svg"
    assert artifact.path.read_text(encoding="utf-8") == "<svg/>"
    assert artifact.uri.startswith("file://")
    payload = artifact.to_payload()
    assert payload["type"] == "pie"
    assert payload["filename"] == "pie_1700000000500.svg"


def test_write_never_overwrites(tmp_path) -> None:
    writer = _writer(tmp_path)
    first = writer.write("line", "a")
    second = writer.write("line", "b")
    assert first.path != second.path
    assert second.filename == "line_1700000000500_1.svg"
    assert first.path.read_text(encoding="utf-8") == "a"


def test_unsafe_characters_in_type_are_replaced(tmp_path) -> None:
    artifact = _writer(tmp_path).write("../evil", "<svg/>")
    assert artifact.path.parent == tmp_path / "charts"
    assert artifact.filename == "___evil_1700000000500.svg"


def test_generate_chart_persists_rendered_document(tmp_path) -> None:
    artifact = generate_chart(
        "column",
        [{"category": "Q1", "value": 10}],
        {"title": "Revenue"},
        writer=_writer(tmp_path),
    )
    text = artifact.path.read_text(encoding="utf-8")
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert ">Revenue<" in text


def test_generate_chart_failure_writes_error_report(tmp_path, monkeypatch) -> None:
    def boom(*_args, **_kwargs):
        raise RuntimeError("layout exploded")

    monkeypatch.setattr(storage, "render_chart", boom)
    with pytest.raises(ChartGenerationError) as excinfo:
        generate_chart("pie", [1], {"width": 300}, writer=_writer(tmp_path))

    error = excinfo.value
    assert error.chart_type == "pie"
    assert isinstance(error.__cause__, RuntimeError)
    assert error.error_path is not None
    assert error.error_path.name == "pie_1700000000500_error.txt"
    report = error.error_path.read_text(encoding="utf-8")
    assert report.startswith("Error generating chart: layout exploded")
    assert '"width": 300' in report
