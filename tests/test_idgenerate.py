import threading
from concurrent.futures import ThreadPoolExecutor

from taskman.idgenerate import IdGenerator


def test_default_starts_at_zero():
    generator = IdGenerator()
    assert generator.next_id() == 0


def test_sequence_from_initial_value():
    generator = IdGenerator(5)
    assert [generator.next_id() for _ in range(3)] == list(range(5, 8))


def test_str_shows_next_value_without_consuming():
    generator = IdGenerator(10)
    before = str(generator)
    assert before == str(generator)
    assert before == str(generator.next_id())
    assert str(generator) == str(generator.next_id())


def test_concurrent_ids_are_unique():
    generator = IdGenerator()
    workers = 8
    per_worker = 200
    start = threading.Barrier(workers)

    def take_ids(_):
        start.wait()
        return [generator.next_id() for _ in range(per_worker)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        batches = list(pool.map(take_ids, range(workers)))

    collected = sorted(i for batch in batches for i in batch)
    assert collected == list(range(workers * per_worker))
    assert generator.next_id() == workers * per_worker