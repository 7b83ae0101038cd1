from typing import Dict, Set


def exclude_keys(data: Dict, keys: Set[str]) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}


def assert_subset(expected: Dict, actual: Dict) -> None:
    """Every key of expected is present in actual with the same value"""
    mismatched = {
        k: (v, actual.get(k)) for k, v in expected.items() if actual.get(k) != v
    }
    assert not mismatched, f"Mismatched fields (expected, actual): {mismatched}"
