# tests/test_rate_limits.py
from github_llm.core.rate_limits import load_rate_tiers, lookup_tier


def test_packaged_table_has_all_tiers():
    tiers = load_rate_tiers()
    assert set(tiers) == {"low", "high", "embedding"}
    assert tiers["embedding"].tokens_per_request == "64000"
    assert tiers["high"].concurrent_requests == "2 (Free/Pro/Business), 4 (Enterprise)"


def test_lookup_is_case_insensitive():
    assert lookup_tier("Low").name == "Low"
    assert lookup_tier("HIGH").name == "High"
    assert lookup_tier("embedding").name == "Embedding"


def test_lookup_unknown_or_empty():
    assert lookup_tier("custom") is None
    assert lookup_tier("") is None
    assert lookup_tier(None) is None


def test_load_from_custom_file(tmp_path):
    table = tmp_path / "tiers.yaml"
    table.write_text(
        "tiers:\n"
        "  Free:\n"
        "    name: Free\n"
        "    requests_per_minute: 1\n"
        "    requests_per_day: 2\n"
        "    tokens_per_request: 3\n"
        "    concurrent_requests: 4\n",
        encoding="utf-8",
    )
    tiers = load_rate_tiers(table)
    assert tiers["free"].requests_per_minute == "1"
    assert lookup_tier("FREE", tiers).concurrent_requests == "4"
