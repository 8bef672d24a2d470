import pytest

from gearsengine.logger import Logger
from gearsengine.memory import MemoryPool, align


@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 100, 800, 1023])
@pytest.mark.parametrize("alignment", [1, 8, 16, 64])
def test_align_invariants(size, alignment):
    result = align(size, alignment)
    assert result % alignment == 0
    assert size <= result < size + alignment


def test_align_rounds_up():
    assert align(17, 16) == 32


@pytest.mark.parametrize("alignment", [0, 3, 12, -8])
def test_align_rejects_bad_alignment(alignment):
    with pytest.raises(ValueError):
        align(10, alignment)


def test_initial_block_is_handed_out():
    pool = MemoryPool(800, 1024)
    assert pool.total_size() == 800
    block = pool.allocate(800)
    assert block.size == 800
    assert pool.total_size() == 800


def test_pool_grows_until_ceiling():
    pool = MemoryPool(800, 1024)
    pool.allocate(800)
    extra = pool.allocate(100)
    assert extra.size == align(100, 16)
    assert pool.total_size() == 800 + align(100, 16)
    assert pool.allocate(200) is None


def test_deallocated_block_is_reused():
    pool = MemoryPool(800, 1024)
    block = pool.allocate(800)
    pool.deallocate(block, 800)
    again = pool.allocate(700)
    assert again is block
    assert pool.total_size() == 800


def test_smallest_sufficient_block_is_chosen():
    pool = MemoryPool(64, 1024)
    big = pool.allocate(64)
    small = pool.allocate(32)
    pool.deallocate(big, 64)
    pool.deallocate(small, 32)
    assert pool.allocate(20) is small
    assert pool.allocate(20) is big


def test_logger_records_use_and_free():
    logger = Logger(log_file=None)
    pool = MemoryPool(800, 1024, logger=logger)
    block = pool.allocate(800)
    pool.deallocate(block, 800)
    messages = [entry.message.split("|")[0] for entry in logger.logs()]
    assert messages == ["Memory Use", "Memory Free"]
    assert [entry.num for entry in logger.logs()] == [800.0, 800.0]