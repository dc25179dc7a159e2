"""Near-equal contiguous partitioning of a sequence."""

from typing import List, Tuple


def bucket_sizes(length: int, count: int) -> List[int]:
    """
    Sizes of ``count`` near-equal buckets covering ``length`` items.

    The first ``length % count`` buckets carry one extra item.
    """
    if count <= 0:
        raise ValueError(f"Bucket count must be positive, got {count}")
    if length < count:
        raise ValueError(
            f"Cannot split {length} items into {count} non-empty buckets"
        )

    base, extra = divmod(length, count)
    return [base + 1] * extra + [base] * (count - extra)


def bucket_bounds(
    length: int, count: int, offset: int = 0
) -> List[Tuple[int, int]]:
    """
    Half-open ``(start, stop)`` index ranges for a near-equal split.

    Args:
        length: Number of items to partition
        count: Number of buckets
        offset: Index of the first item in the underlying sequence

    Returns:
        One range per bucket, in order, covering every index exactly once
    """
    bounds = []
    start = offset
    for size in bucket_sizes(length, count):
        bounds.append((start, start + size))
        start += size
    return bounds

