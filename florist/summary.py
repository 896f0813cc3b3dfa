"""End-of-run summary, rendered from a Jinja2 template."""

from pathlib import Path

import jinja2

from .composer import BouquetComposer

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(TEMPLATE_DIR),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_summary(composer: BouquetComposer) -> str:
    stems = sorted(composer.received)
    rows = [
        {
            "stem": str(stem),
            "received": composer.received[stem],
            "committed": composer.committed[stem],
            "on_hand": composer.ledger.available(stem),
        }
        for stem in stems
    ]
    return _env.get_template("summary.txt.j2").render(
        designs=len(composer.catalog),
        arrivals=composer.arrivals,
        bouquets=composer.emitted,
        on_hand=composer.ledger.total(),
        unusable=sum(
            n for stem, n in composer.received.items() if stem not in composer.catalog.stems
        ),
        rows=rows,
    )
