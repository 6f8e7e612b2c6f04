import pytest

from celestegame.bump_allocator import AllocatorFullError, BumpAllocator
from celestegame.logger import AssertionFailedError


def test_new_allocator_is_empty():
    allocator = BumpAllocator(64)
    assert allocator.capacity == 64
    assert allocator.used == 0


def test_alloc_rounds_up_to_eight():
    allocator = BumpAllocator(64)
    view = allocator.alloc(1)
    assert len(view) == 1
    assert allocator.used == 8


@pytest.mark.parametrize("size", [0, 1, 7, 8, 9, 15, 16, 33])
def test_used_is_aligned_and_covers_request(size):
    allocator = BumpAllocator(128)
    allocator.alloc(size)
    assert allocator.used % 8 == 0
    assert size <= allocator.used < size + 8


def test_memory_starts_zeroed():
    allocator = BumpAllocator(32)
    view = allocator.alloc(16)
    assert bytes(view) == bytes(16)


def test_allocations_do_not_overlap():
    allocator = BumpAllocator(32)
    first = allocator.alloc(8)
    second = allocator.alloc(8)
    first[:] = b"x" * 8
    assert bytes(second) == bytes(8)
    assert bytes(first) == b"x" * 8


def test_exact_fit_then_full():
    allocator = BumpAllocator(16)
    allocator.alloc(16)
    assert allocator.used == allocator.capacity
    with pytest.raises(AllocatorFullError, match="BumpAllocator is full!"):
        allocator.alloc(1)


def test_full_error_is_assertion_failure(capsys):
    allocator = BumpAllocator(8)
    with pytest.raises(AssertionFailedError):
        allocator.alloc(9)
    assert "BumpAllocator is full!" in capsys.readouterr().out
    assert allocator.used == 0


def test_reset_allows_reuse():
    allocator = BumpAllocator(16)
    allocator.alloc(16)
    allocator.reset()
    assert allocator.used == 0
    assert len(allocator.alloc(16)) == 16


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        BumpAllocator(-1)
    with pytest.raises(ValueError):
        BumpAllocator(8).alloc(-1)