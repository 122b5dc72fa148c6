"""
Batch runner for the validation chain.

Reads:
  - validation_io/requests.json   (or the path given as first argument):
    a JSON list of factory parameter bags, e.g.
    [{"type": "PAGEABLE_LENIENT", "fieldName": "pageable", "page": -1, "size": 0}]

Produces:
  - validation_io/results.json
"""
import json
import logging
import sys
from pathlib import Path

from src.config.settings import LOG_LEVEL

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_validation")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
IO_DIR = ROOT / "validation_io"

REQUESTS_FILE = Path(sys.argv[1]) if len(sys.argv) > 1 else IO_DIR / "requests.json"
OUTPUT_FILE = IO_DIR / "results.json"

# ---------------------------------------------------------------------------
# Load inputs
# ---------------------------------------------------------------------------
logger.info("Loading requests from %s", REQUESTS_FILE)

with open(REQUESTS_FILE, encoding="utf-8") as f:
    requests: list = json.load(f)

logger.info("requests          : %d", len(requests))

# ---------------------------------------------------------------------------
# Chain & factory
# ---------------------------------------------------------------------------
from src.config.validation_config import ValidationConfig
from src.validation.chain import build_default_chain
from src.validation.factory import (
    FactoryParameterError,
    UnsupportedValidationTypeError,
    ValidationFactory,
)

config = ValidationConfig.from_settings()
chain = build_default_chain(config)
factory = ValidationFactory(chain)

logger.info("handlers          : %s", ", ".join(chain.registered_handlers))
logger.info("sort fields       : %s", ", ".join(config.sorted_sort_fields))
logger.info("page size         : default=%d max=%d", config.default_page_size, config.max_page_size)

# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
results = []
for index, bag in enumerate(requests):
    try:
        outcome = factory.create(bag).to_dict()
    except (FactoryParameterError, UnsupportedValidationTypeError) as exc:
        logger.warning("Request #%d rejected: %s", index, exc)
        outcome = {"valid": False, "rejected": True, "errors": [str(exc)]}
    results.append({"request": bag, "result": outcome})

valid_count = sum(1 for r in results if r["result"]["valid"])
logger.info("Validation done: %d valid, %d invalid", valid_count, len(results) - valid_count)

# ---------------------------------------------------------------------------
# Save output
# ---------------------------------------------------------------------------
OUTPUT_FILE.parent.mkdir(parents=True, exist_ok=True)
with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
    json.dump(results, f, ensure_ascii=False, indent=2, default=str)

logger.info("Output saved to: %s", OUTPUT_FILE)

# ---------------------------------------------------------------------------
# Print summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("VALIDATION RESULT — SUMMARY")
print("=" * 70)
for index, entry in enumerate(results):
    bag, outcome = entry["request"], entry["result"]
    label = f"{bag.get('type', '?')}:{bag.get('fieldName', '?')}" if isinstance(bag, dict) else "?"
    status = "OK " if outcome["valid"] else "ERR"
    detail = outcome.get("processed_value") if outcome["valid"] else outcome["errors"][0]
    print(f"  #{index:<3d} [{status}] {label:40s} {detail}")
    for warning in outcome.get("warnings", []):
        print(f"        warning: {warning}")
print("=" * 70)
print(f"Output: {OUTPUT_FILE}")
print("=" * 70 + "\n")
