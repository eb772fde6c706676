"""Batch extraction over many file pairs with per-file error isolation."""

import logging
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool

from fricatives.errors import FricativesError
from fricatives.extract import ExtractionConfig, extract_pair
from fricatives.output import RecordWriter
from fricatives.progress import ProgressObserver
from fricatives.types import BatchResult, FeatureRecord, FileFailure, FilePair, Interval

logger = logging.getLogger(__name__)

# Failures that discard one file but leave the rest of the batch running.
_FILE_ERRORS = (OSError, FricativesError, ValueError, IndexError)


class _SkipCollector(ProgressObserver):
    """Records skip events inside a worker so the parent can replay them."""

    def __init__(self):
        self.skipped: list[tuple[str, Interval, str]] = []

    def fricative_skipped(self, sound_name: str, fricative: Interval, reason: str) -> None:
        self.skipped.append((sound_name, fricative, reason))


def _extract_in_worker(
    pair: FilePair, config: ExtractionConfig,
) -> tuple[list[FeatureRecord] | None, list[tuple[str, Interval, str]], str | None]:
    """Worker entry point: returns (records, skipped, error)."""
    collector = _SkipCollector()
    try:
        records = extract_pair(pair, config, collector)
    except _FILE_ERRORS as e:
        return None, collector.skipped, f"{type(e).__name__}: {e}"
    return records, collector.skipped, None


def _accept(
    result: BatchResult,
    pair: FilePair,
    records: list[FeatureRecord],
    observer: ProgressObserver,
    sink: RecordWriter | None,
) -> None:
    if sink is not None:
        sink.write_all(records)
    result.records.extend(records)
    result.processed.append(pair)
    observer.file_finished(pair, len(records))


def _reject(result: BatchResult, pair: FilePair, error: str, observer: ProgressObserver) -> None:
    result.failures.append(FileFailure(pair=pair, error=error))
    observer.file_failed(pair, error)


def run_batch(
    pairs: list[FilePair],
    config: ExtractionConfig | None = None,
    observer: ProgressObserver | None = None,
    sink: RecordWriter | None = None,
    jobs: int = 1,
) -> BatchResult:
    """Extract records from every pair, in order.

    A file that fails is reported and skipped; the others still produce
    records. Records are handed to ``sink`` file by file, in input order,
    so interrupting the batch keeps everything written so far.

    Args:
        pairs: Audio/annotation pairs to process.
        config: Extraction settings shared by all files.
        observer: Receives progress events.
        sink: Optional writer receiving records as each file completes.
        jobs: Worker processes; 1 runs everything in this process.
    """
    config = config or ExtractionConfig()
    observer = observer or ProgressObserver()
    result = BatchResult()

    if jobs <= 1:
        _run_serial(pairs, config, observer, sink, result)
    else:
        _run_parallel(pairs, config, observer, sink, result, jobs)

    if result.interrupted:
        remaining = len(pairs) - len(result.processed) - len(result.failures)
        logger.warning(f"Interrupted, {remaining} file(s) not processed")
    return result


def _run_serial(
    pairs: list[FilePair],
    config: ExtractionConfig,
    observer: ProgressObserver,
    sink: RecordWriter | None,
    result: BatchResult,
) -> None:
    for pair in pairs:
        try:
            observer.file_started(pair)
            records = extract_pair(pair, config, observer)
        except KeyboardInterrupt:
            result.interrupted = True
            return
        except _FILE_ERRORS as e:
            _reject(result, pair, f"{type(e).__name__}: {e}", observer)
            continue
        _accept(result, pair, records, observer, sink)


def _run_parallel(
    pairs: list[FilePair],
    config: ExtractionConfig,
    observer: ProgressObserver,
    sink: RecordWriter | None,
    result: BatchResult,
    jobs: int,
) -> None:
    with ProcessPoolExecutor(max_workers=jobs) as executor:
        try:
            _collect(pairs, executor, config, observer, sink, result)
        except KeyboardInterrupt:
            result.interrupted = True
            executor.shutdown(wait=False, cancel_futures=True)


def _collect(
    pairs: list[FilePair],
    executor: ProcessPoolExecutor,
    config: ExtractionConfig,
    observer: ProgressObserver,
    sink: RecordWriter | None,
    result: BatchResult,
) -> None:
    """Submit every pair, then take results back in input order."""
    futures = [executor.submit(_extract_in_worker, pair, config) for pair in pairs]
    for pair, future in zip(pairs, futures):
        observer.file_started(pair)
        try:
            records, skipped, error = future.result()
        except BrokenProcessPool as e:
            _reject(result, pair, f"{type(e).__name__}: {e}", observer)
            continue
        for sound_name, fricative, reason in skipped:
            observer.fricative_skipped(sound_name, fricative, reason)
        if error is not None:
            _reject(result, pair, error, observer)
            continue
        for record in records:
            observer.fricative_measured(record)
        _accept(result, pair, records, observer, sink)
