from core.services.sequences import concatenate_arrays


def test_concatenate_keeps_order_across_inputs() -> None:
    assert concatenate_arrays([1, 2], [3], []) == [1, 2, 3]
    assert concatenate_arrays(["a"], ["b", "c"]) == ["a", "b", "c"]


def test_concatenate_without_inputs() -> None:
    assert concatenate_arrays() == []


def test_concatenate_returns_new_list() -> None:
    first = [1]

    result = concatenate_arrays(first)
    result.append(2)

    assert first == [1]
