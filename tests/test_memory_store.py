import threading
from datetime import date

from src.workforce_erp.workforce_erp.memory.store import InMemoryStore


def test_next_id_continues_after_existing_keys(log_factory):
    store = InMemoryStore()
    store.work_logs[7] = log_factory(7, "e1", date(2024, 1, 2), 60)

    assert store.next_id("work_logs") == 8
    assert store.next_id("work_logs") == 9
    assert store.next_id("houses") == 1


def test_next_id_is_unique_across_threads():
    store = InMemoryStore()
    ids = []
    ids_lock = threading.Lock()

    def take():
        for _ in range(200):
            new_id = store.next_id("work_logs")
            with ids_lock:
                ids.append(new_id)

    threads = [threading.Thread(target=take) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == 1600
    assert len(set(ids)) == 1600
