# github_llm/core/rate_limits.py
"""速率等级表：从包内 YAML 数据文件加载各等级的文档化限制。"""

from pathlib import Path
from typing import Dict, Optional

import yaml

from .models import RateTier

DATA_DIR = Path(__file__).parent.parent / "data"
RATE_TIERS_FILE = DATA_DIR / "rate_tiers.yaml"


def load_rate_tiers(path: Path = RATE_TIERS_FILE) -> Dict[str, RateTier]:
    """Load the tier table keyed by lower-case tier name."""
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    tiers = {}
    for key, fields in (data.get("tiers") or {}).items():
        tiers[str(key).lower()] = RateTier(**{k: str(v) for k, v in fields.items()})
    return tiers


def lookup_tier(tier: Optional[str], tiers: Optional[Dict[str, RateTier]] = None) -> Optional[RateTier]:
    """Case-insensitive lookup; None for an unknown or empty tier name."""
    if not tier:
        return None
    if tiers is None:
        tiers = load_rate_tiers()
    return tiers.get(tier.strip().lower())
