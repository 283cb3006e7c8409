from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from proposal_service.documents.renderer import ProposalRenderError
from proposal_service.proposals.address import MalformedAddressPayload
from proposal_service.proposals.models import InvalidProposalPayload
from proposal_service.proposals.router import PDF_FILENAME, to_resolved_response
from proposal_service.proposals.service import ProposalService
from proposal_service.proposals.validation import ProposalValidationError


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def load_input_payload(raw: str) -> Any:
    """Read a JSON payload from a file path or a raw JSON string."""
    if raw.lstrip().startswith(("{", "[")):
        return json.loads(raw)
    candidate = Path(raw)
    if candidate.is_file():
        return json.loads(candidate.read_text(encoding="utf-8"))
    return json.loads(raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a real-estate purchase proposal PDF from a JSON payload."
    )
    parser.add_argument(
        "--json",
        required=True,
        help="JSON input payload. Either a file path or a raw JSON string.",
    )
    parser.add_argument(
        "--output",
        default=PDF_FILENAME,
        help="Where to write the generated PDF.",
    )
    parser.add_argument(
        "--resolve-only",
        action="store_true",
        help="Print the resolved record as JSON instead of rendering the PDF.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_logging()
    logger = logging.getLogger("main")
    args = build_parser().parse_args(argv)
    service = ProposalService()

    try:
        payload = load_input_payload(args.json)
        if args.resolve_only:
            prepared = service.prepare(payload)
            print(
                json.dumps(
                    to_resolved_response(prepared).model_dump(),
                    ensure_ascii=False,
                    indent=2,
                )
            )
            return 0
        _, pdf_bytes = service.generate_pdf(payload)
    except json.JSONDecodeError as exc:
        logger.error("Input is not valid JSON: %s", exc)
        return 2
    except (
        InvalidProposalPayload,
        MalformedAddressPayload,
        ProposalValidationError,
    ) as exc:
        logger.error("Proposal rejected: %s", exc)
        return 2
    except ProposalRenderError as exc:
        logger.error("PDF generation failed: %s", exc)
        return 1

    output = Path(args.output)
    output.write_bytes(pdf_bytes)
    logger.info("Proposal written to %s", output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
