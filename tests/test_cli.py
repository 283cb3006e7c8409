from __future__ import annotations

import json
from pathlib import Path

import pytest

from main import load_input_payload, main
from proposal_service.documents.renderer import ProposalPdfRenderer, ProposalRenderError
from tests.mock_proposal import legacy_payload


def test_load_input_payload_accepts_path_or_raw_json(tmp_path: Path) -> None:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(legacy_payload()), encoding="utf-8")

    assert load_input_payload(str(path)) == legacy_payload()
    assert load_input_payload('{"clientName": "X"}') == {"clientName": "X"}


def test_main_writes_pdf(tmp_path: Path) -> None:
    output = tmp_path / "proposta.pdf"

    exit_code = main(["--json", json.dumps(legacy_payload()), "--output", str(output)])

    assert exit_code == 0
    assert output.read_bytes().startswith(b"%PDF")


def test_main_resolve_only_prints_record(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--json", json.dumps(legacy_payload()), "--resolve-only"])

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["document"]["city"] == "Campinas"
    assert printed["selling_broker_name"] == "Corretor Vendedor"


def test_main_rejects_invalid_proposal(tmp_path: Path) -> None:
    data = legacy_payload()
    data["value"] = 1.0
    output = tmp_path / "proposta.pdf"

    exit_code = main(["--json", json.dumps(data), "--output", str(output)])

    assert exit_code == 2
    assert not output.exists()


def test_main_reports_render_failure_without_traceback(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _fail(self, view):
        raise ProposalRenderError("Text block does not fit on a single page.")

    monkeypatch.setattr(ProposalPdfRenderer, "render", _fail)
    output = tmp_path / "proposta.pdf"

    exit_code = main(["--json", json.dumps(legacy_payload()), "--output", str(output)])

    assert exit_code == 1
    assert not output.exists()
