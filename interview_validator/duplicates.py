from collections import defaultdict
from typing import Dict, List, Sequence, Set

MINUTE_MS = 60 * 1000


def truncate_to_minute(timestamp_ms: int) -> int:
    """Align a timestamp to the minute boundary at or before it."""
    return (timestamp_ms // MINUTE_MS) * MINUTE_MS


def find_duplicate_indices(timestamps: Sequence[int]) -> Set[int]:
    """Return every index whose timestamp shares a minute with another entry.

    All members of a group are reported, not only the later occurrences.
    """
    buckets: Dict[int, List[int]] = defaultdict(list)
    for index, timestamp in enumerate(timestamps):
        buckets[truncate_to_minute(timestamp)].append(index)

    duplicates = set()
    for indices in buckets.values():
        if len(indices) > 1:
            duplicates.update(indices)
    return duplicates
