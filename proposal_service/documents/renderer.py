"""PDF layout for the purchase proposal using PyMuPDF."""

from __future__ import annotations

import fitz  # PyMuPDF

from proposal_service.documents.view import ProposalDocumentView

MM = 72 / 25.4
PAGE_WIDTH, PAGE_HEIGHT = fitz.paper_size("a4")
MARGIN = 20 * MM
SIGNATURE_GAP = 18 * MM
SIGNATURE_OFFSET = 24 * MM
SIGNATURE_BLOCK_HEIGHT = 50 * MM
CAPTION_FONT_SIZES = (11, 10, 9, 8, 7, 6)

TITLE = "PROPOSTA DE COMPRA DE IMÓVEL"
INTRO_TEMPLATE = (
    "Esta proposta tem por finalidade assegurar uma oferta de compra de um "
    "imóvel de sua propriedade, situado à {address}, na cidade de {city} - "
    "{state}, por parte do comprador, nas seguintes condições:"
)


class ProposalRenderError(Exception):
    """PDF could not be produced."""


class _PageCursor:
    """Top-down text flow over A4 pages with automatic page breaks."""

    def __init__(self, doc: fitz.Document) -> None:
        self._doc = doc
        self.left = MARGIN
        self.right = PAGE_WIDTH - MARGIN
        self.bottom = PAGE_HEIGHT - MARGIN
        self.page = self._doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        self.y = MARGIN

    def new_page(self) -> None:
        self.page = self._doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
        self.y = MARGIN

    def skip(self, height: float) -> None:
        self.y += height

    def ensure(self, height: float) -> None:
        if self.y + height > self.bottom:
            self.new_page()

    def write(
        self,
        text: str,
        *,
        fontname: str = "helv",
        fontsize: float = 12,
        align: int = fitz.TEXT_ALIGN_LEFT,
        spacing_after: float = 2,
    ) -> None:
        if self.bottom - self.y < fontsize * 2:
            self.new_page()
        rc = self._insert(text, fontname=fontname, fontsize=fontsize, align=align)
        if rc < 0:
            self.new_page()
            rc = self._insert(text, fontname=fontname, fontsize=fontsize, align=align)
            if rc < 0:
                raise ProposalRenderError("Text block does not fit on a single page.")
        self.y = min(self.bottom - rc + spacing_after, self.bottom)

    def _insert(
        self, text: str, *, fontname: str, fontsize: float, align: int
    ) -> float:
        rect = fitz.Rect(self.left, self.y, self.right, self.bottom)
        return self.page.insert_textbox(
            rect, text, fontname=fontname, fontsize=fontsize, align=align
        )


def insert_caption(
    page: fitz.Page, rect: fitz.Rect, text: str, *, fontsize: float
) -> None:
    """Centre ``text`` in ``rect``, shrinking the font until it fits."""
    for size in (fontsize, *(s for s in CAPTION_FONT_SIZES if s < fontsize)):
        rc = page.insert_textbox(
            rect, text, fontname="helv", fontsize=size, align=fitz.TEXT_ALIGN_CENTER
        )
        if rc >= 0:
            return
    raise ProposalRenderError("Signature caption does not fit its box.")


class ProposalPdfRenderer:
    """Lay out a :class:`ProposalDocumentView` as an A4 PDF."""

    def render(self, view: ProposalDocumentView) -> bytes:
        doc = fitz.open()
        try:
            cursor = _PageCursor(doc)
            self._header(cursor)
            self._body(cursor, view)
            self._signatures(cursor, view)
            return doc.tobytes(garbage=3, deflate=True)
        except ProposalRenderError:
            raise
        except (RuntimeError, ValueError) as exc:
            raise ProposalRenderError(str(exc) or "PDF generation failed") from exc
        finally:
            doc.close()

    def _header(self, cursor: _PageCursor) -> None:
        cursor.write(TITLE, fontname="hebo", fontsize=18, align=fitz.TEXT_ALIGN_CENTER)
        cursor.skip(8 * MM)
        cursor.write("Ilmo(a) Sr(a).:", fontname="hebo", fontsize=13, spacing_after=0)
        cursor.write("(PROPRIETÁRIO DO IMÓVEL)", fontname="hebi", fontsize=13)
        cursor.skip(12 * MM)

    def _body(self, cursor: _PageCursor, view: ProposalDocumentView) -> None:
        intro = INTRO_TEMPLATE.format(
            address=view.intro_address, city=view.city, state=view.state
        )
        cursor.write(intro, align=fitz.TEXT_ALIGN_JUSTIFY, spacing_after=2 * MM)

        lines = [
            f"- Valor total da proposta: {view.total_value}",
            f"- Valor em dinheiro (Sinal/Entrada): {view.cash}",
        ]
        if view.trade_in:
            lines.append(f"- Permuta: {view.trade_in}")
        if view.financing:
            lines.append(f"- Financiamento: {view.financing}")
        if view.others:
            lines.append(f"- Outros: {view.others}")
        for line in lines:
            cursor.write(line, spacing_after=1)

        cursor.skip(2 * MM)
        if view.client_cpf:
            cursor.write(f"Proponente: {view.client_name} - CPF: {view.client_cpf}")
        cursor.write(f"Obs.: Esta proposta é válida por {view.validity_days} dias.")

    def _signatures(self, cursor: _PageCursor, view: ProposalDocumentView) -> None:
        cursor.ensure(SIGNATURE_BLOCK_HEIGHT)
        line_y = cursor.y + SIGNATURE_OFFSET
        line_width = (cursor.right - cursor.left - SIGNATURE_GAP) / 2
        left_x = cursor.left
        right_x = left_x + line_width + SIGNATURE_GAP

        page = cursor.page
        for x in (left_x, right_x):
            page.draw_line(fitz.Point(x, line_y), fitz.Point(x + line_width, line_y))

        captions = [
            (left_x, f"{view.client_name} (Proponente)"),
            (right_x, f"{view.broker_signature} (Proprietário/Corretor)"),
        ]
        for x, caption in captions:
            insert_caption(
                page,
                fitz.Rect(x, line_y + 2 * MM, x + line_width, line_y + 14 * MM),
                caption,
                fontsize=11,
            )

        selling_y = line_y + 16 * MM
        insert_caption(
            page,
            fitz.Rect(cursor.left, selling_y, cursor.right, selling_y + 8 * MM),
            view.selling_broker_caption,
            fontsize=10,
        )
        cursor.y = selling_y + 8 * MM
