"""Logic for fingerprinting the configuration that shapes a scan result."""

import hashlib
import json
from typing import Any

# Logging settings do not change which files are parsed or how.
RESULT_SECTIONS = ("scan", "excludes")


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a sha256 over the result-relevant sections of config.

    Sections are serialized as canonical JSON, so key order does not matter
    and missing sections hash like empty ones.
    """
    relevant = {section: config.get(section) for section in RESULT_SECTIONS}
    canonical = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
