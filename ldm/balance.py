from ldm.partition import largest_differencing_method

def get_balanced_bipartition(size_list: list[int]) -> tuple[list[int], list[int]]:
    """ get indices of items split into two groups whose size sums are
        balanced, e.g. to spread sequences over two ranks
    Parameters:
        size_list (List[int]):
            sizes of each item
    Returns:
        partitions (Tuple[List[int], List[int]]):
            sorted indices of the items in each group
    """

    def _check_and_sort_partitions(partitions: tuple[list[int], list[int]]) -> tuple[list[int], list[int]]:
        seen_idx = set()
        for partition in partitions:
            for idx in partition:
                assert idx not in seen_idx, f"index {idx} is assigned twice"
                seen_idx.add(idx)
        assert seen_idx == set(range(len(size_list))), \
            f"{len(seen_idx)} of {len(size_list)} indices assigned"
        return sorted(partitions[0]), sorted(partitions[1])

    group_1, group_2, _ = largest_differencing_method(
        (idx, size) for idx, size in enumerate(size_list)
    )
    return _check_and_sort_partitions((group_1, group_2))

def get_bipartition_difference(size_list: list[int], partitions: tuple[list[int], list[int]]) -> int:

    sum_1 = sum(size_list[idx] for idx in partitions[0])
    sum_2 = sum(size_list[idx] for idx in partitions[1])
    return abs(sum_1 - sum_2)
