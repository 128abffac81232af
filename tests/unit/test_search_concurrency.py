"""Concurrent add/search against a shared index."""

from concurrent.futures import ThreadPoolExecutor
import threading

from title_index import Document, NotFoundError, new_index


WRITERS = 4
DOCS_PER_WRITER = 200


class TestConcurrentAccess:
    """Writers and readers interleave without corrupting entries."""

    def test_interleaved_add_and_search(self):
        index = new_index(name="concurrency")
        stop = threading.Event()
        inconsistencies = []
        searches = []

        def writer(worker: int) -> None:
            for i in range(DOCS_PER_WRITER):
                title = f"Movie {worker}-{i}"
                index.add(Document(title=title, payload=(title, worker, i)))

        def reader() -> None:
            while not stop.is_set():
                try:
                    results = index.rank("movie", 50)
                except NotFoundError:
                    continue
                searches.append(len(results))
                for result in results:
                    title, worker, i = result.payload
                    if title != result.title or title != f"Movie {worker}-{i}":
                        inconsistencies.append(result)

        readers = [threading.Thread(target=reader) for _ in range(3)]
        for thread in readers:
            thread.start()

        with ThreadPoolExecutor(max_workers=WRITERS) as pool:
            list(pool.map(writer, range(WRITERS)))

        stop.set()
        for thread in readers:
            thread.join(timeout=10)

        assert not any(thread.is_alive() for thread in readers)
        assert inconsistencies == []
        assert all(count <= 50 for count in searches)
        assert index.length() == WRITERS * DOCS_PER_WRITER

    def test_concurrent_batches_with_length_reads(self):
        index = new_index(name="concurrency-batch")
        lengths = []

        def batch(worker: int) -> None:
            index.batch(Document(title=f"Doc {worker}-{i}", payload=i) for i in range(100))
            lengths.append(index.length())

        threads = [threading.Thread(target=batch, args=(worker,)) for worker in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert not any(thread.is_alive() for thread in threads)
        assert index.length() == 500
        assert all(100 <= length <= 500 for length in lengths)
