"""Rebuild ``images_count`` and ``primary_image_url`` for initiatives.

Run it periodically (or after an incident) to repair drift left by failed or
interleaved image requests::

    python -m scripts.recompute_initiative_counters          # every initiative
    python -m scripts.recompute_initiative_counters 4 7      # only ids 4 and 7
"""

from __future__ import annotations

import argparse
import logging

from sqlalchemy import select

from tls_api.application.use_cases.initiative_images import recompute_counters
from tls_api.config import get_settings
from tls_api.domain.exceptions import InitiativeNotFoundError
from tls_api.infrastructure.database import SessionLocal, initialize_database
from tls_api.infrastructure.models import InitiativeModel
from tls_api.logging_config import configure_logging

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recompute the denormalized image fields of initiatives.",
    )
    parser.add_argument(
        "initiative_ids",
        nargs="*",
        type=int,
        help="Initiatives to repair; all of them when omitted",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(get_settings().log_level)
    initialize_database()

    session = SessionLocal()
    try:
        initiative_ids = args.initiative_ids or list(
            session.scalars(select(InitiativeModel.id).order_by(InitiativeModel.id))
        )
        for initiative_id in initiative_ids:
            try:
                initiative = recompute_counters(session, initiative_id)
            except InitiativeNotFoundError as exc:
                logger.warning("%s", exc.message)
                continue
            print(
                f"Initiative {initiative_id}: images_count={initiative.images_count} "
                f"primary_image_url={initiative.primary_image_url or '-'}"
            )
    finally:
        session.close()


if __name__ == "__main__":
    main()
