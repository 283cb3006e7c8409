from __future__ import annotations

from dataclasses import replace

import fitz

from proposal_service.documents.renderer import ProposalPdfRenderer, _PageCursor
from proposal_service.documents.view import ProposalDocumentView


def _view() -> ProposalDocumentView:
    return ProposalDocumentView(
        client_name="Maria Exemplo",
        client_cpf="123.456.789-09",
        intro_address="Rua B, 45, Bairro C",
        city="Campinas",
        state="SP",
        broker_signature="Corretora Demo",
        selling_broker_name="Ana",
        selling_broker_caption="Ana (Corretor Vendedor)",
        total_value="R$ 350.000,00",
        cash="R$ 50.000,00",
        trade_in="R$ 100.000,00",
        financing="R$ 200.000,00",
        others="",
        validity_days=10,
    )


def _text(pdf_bytes: bytes) -> str:
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)


def test_render_produces_pdf_with_proposal_text() -> None:
    pdf_bytes = ProposalPdfRenderer().render(_view())

    assert pdf_bytes.startswith(b"%PDF")
    text = _text(pdf_bytes)
    assert "PROPOSTA DE COMPRA" in text
    assert "Campinas" in text
    assert "R$ 350.000,00" in text
    assert "Permuta: R$ 100.000,00" in text
    assert "Outros:" not in text
    assert "10 dias" in text
    assert "Maria Exemplo (Proponente)" in text
    assert "123.456.789-09" in text


def test_render_breaks_pages_for_long_addresses() -> None:
    long_address = ", ".join(f"Quadra {index} Lote {index}" for index in range(120))
    pdf_bytes = ProposalPdfRenderer().render(replace(_view(), intro_address=long_address))

    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        assert doc.page_count >= 2


def test_cursor_at_page_bottom_continues_on_next_page() -> None:
    with fitz.open() as doc:
        cursor = _PageCursor(doc)
        cursor.y = cursor.bottom
        cursor.write("Linha no fim da página")

        assert doc.page_count == 2
        assert cursor.y <= cursor.bottom

        cursor.skip(1000)
        cursor.write("Outra linha")

        assert doc.page_count == 3
        assert "Outra linha" in doc[2].get_text()


def test_body_filling_the_page_exactly_does_not_fail() -> None:
    for count in range(100, 140, 3):
        long_address = ", ".join(f"Quadra {index} Lote {index}" for index in range(count))
        pdf_bytes = ProposalPdfRenderer().render(
            replace(_view(), intro_address=long_address)
        )
        assert pdf_bytes.startswith(b"%PDF")


def test_long_signature_caption_is_shrunk_not_dropped() -> None:
    broker = " ".join(["Corretora Imobiliária Exemplo"] * 3)
    pdf_bytes = ProposalPdfRenderer().render(replace(_view(), broker_signature=broker))

    assert "(Proprietário/Corretor)" in _text(pdf_bytes)
