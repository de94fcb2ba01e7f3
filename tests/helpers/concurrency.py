import threading
from concurrent.futures import ThreadPoolExecutor


def run_concurrent(target_fn, n_threads: int, timeout: float = 5.0):
    """Call ``target_fn(i)`` for i in range(n_threads), all released at once.

    Returns ``(results, errors)``, both indexed by thread number; the slot
    of the other list is None.
    """
    barrier = threading.Barrier(n_threads)

    def worker(i):
        barrier.wait(timeout=timeout)
        return target_fn(i)

    results = [None] * n_threads
    errors = [None] * n_threads
    with ThreadPoolExecutor(max_workers=n_threads) as pool:
        futures = [pool.submit(worker, i) for i in range(n_threads)]
        for i, future in enumerate(futures):
            exc = future.exception(timeout=timeout + 1.0)
            if exc is None:
                results[i] = future.result()
            else:
                errors[i] = exc
    return results, errors
