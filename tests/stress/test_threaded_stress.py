"""Many threads hammering one file system instance.

Each scenario checks the table afterwards: no torn content, no lost
entries, and failed deletions leave their subtree whole.
"""

import threading

import pytest

from vfsemu import FileAttributes, VirtualFileSystem
from vfsemu._exceptions import VFSAccessDeniedError, VFSDirectoryNotFoundError

N_THREADS = 16
ITERATIONS = 200


@pytest.mark.stress
def test_private_files_never_tear(vfs):
    errors: list[Exception] = []
    barrier = threading.Barrier(N_THREADS)

    def writer(thread_id: int) -> None:
        path = f"/file_{thread_id}.bin"
        payload = bytes([thread_id]) * 64
        try:
            barrier.wait(timeout=10.0)
            for _ in range(ITERATIONS):
                with vfs.open(path, "wb") as f:
                    f.write(payload)
                with vfs.open(path, "rb") as f:
                    data = f.read()
                if data != payload:
                    raise AssertionError(f"thread {thread_id}: got {data[:4]!r}")
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(N_THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60.0)

    assert errors == []
    assert len([p for p in vfs.table.paths() if p.startswith("/file_")]) == N_THREADS


@pytest.mark.stress
def test_shared_file_holds_one_whole_snapshot(vfs):
    payloads = [bytes([i]) * 128 for i in range(N_THREADS)]
    vfs.add_file("/shared.bin", b"")
    barrier = threading.Barrier(N_THREADS)

    def writer(thread_id: int) -> None:
        barrier.wait(timeout=10.0)
        for _ in range(ITERATIONS // 4):
            with vfs.open("/shared.bin", "r+b") as f:
                f.write(payloads[thread_id])

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(N_THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60.0)

    assert vfs.read_bytes("/shared.bin") in payloads


@pytest.mark.stress
def test_deleters_racing_a_locked_tree():
    vfs = VirtualFileSystem()
    for i in range(20):
        vfs.add_file(f"/tree/d{i}/f.bin", b"x")
    vfs.add_file("/tree/d7/locked.bin", b"keep", FileAttributes.READ_ONLY)
    barrier = threading.Barrier(N_THREADS)
    outcomes: list[type] = []
    lock = threading.Lock()

    def deleter() -> None:
        barrier.wait(timeout=10.0)
        try:
            vfs.delete_directory("/tree", recursive=True)
            outcome = type(None)
        except (VFSAccessDeniedError, VFSDirectoryNotFoundError) as exc:
            outcome = type(exc)
        with lock:
            outcomes.append(outcome)

    threads = [threading.Thread(target=deleter) for _ in range(N_THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60.0)

    assert outcomes == [VFSAccessDeniedError] * N_THREADS
    assert len(vfs.table.paths()) == len(set(vfs.table.paths()))
    assert all(vfs.is_file(f"/tree/d{i}/f.bin") for i in range(20))
