import threading

from youvideo.lock import DEFAULT_LIBRARY_LOCK_MANAGER, LibraryLockManager


def test_first_lock_succeeds_second_fails():
    manager = LibraryLockManager()
    assert manager.try_to_lock(1) is True
    assert manager.try_to_lock(1) is False


def test_is_lock_reflects_state():
    manager = LibraryLockManager()
    assert manager.is_lock(3) is False
    manager.try_to_lock(3)
    assert manager.is_lock(3) is True
    manager.unlock_library(3)
    assert manager.is_lock(3) is False


def test_unlock_allows_relock():
    manager = LibraryLockManager()
    manager.try_to_lock(2)
    manager.unlock_library(2)
    assert manager.try_to_lock(2) is True


def test_libraries_are_independent():
    manager = LibraryLockManager()
    assert manager.try_to_lock(1) is True
    assert manager.try_to_lock(2) is True
    manager.unlock_library(1)
    assert manager.is_lock(1) is False
    assert manager.is_lock(2) is True


def test_unlocking_unknown_library_is_harmless():
    manager = LibraryLockManager()
    manager.unlock_library(42)
    assert manager.is_lock(42) is False
    assert manager.try_to_lock(42) is True


def test_only_one_thread_wins_the_lock():
    manager = LibraryLockManager()
    results = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(16)

    def worker():
        barrier.wait()
        outcome = manager.try_to_lock(7)
        with results_lock:
            results.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results.count(True) == 1
    assert len(results) == 16
    assert manager.is_lock(7) is True
    assert manager.try_to_lock(7) is False


def test_default_manager_works():
    library_id = 987654
    assert DEFAULT_LIBRARY_LOCK_MANAGER.try_to_lock(library_id) is True
    try:
        assert DEFAULT_LIBRARY_LOCK_MANAGER.is_lock(library_id) is True
    finally:
        DEFAULT_LIBRARY_LOCK_MANAGER.unlock_library(library_id)
    assert DEFAULT_LIBRARY_LOCK_MANAGER.is_lock(library_id) is False