"""Batch Sudoku dataset generator with optional multi-CPU parallelism.

This script wraps :class:`SudokuGenerator` and supports:
- Picking a preset difficulty, a custom removal count, or presets from a JSON file.
- Generating puzzles in parallel across CPU workers with per-worker seeds.
- Merging per-worker metadata into a single data.json.
"""

from __future__ import annotations

import argparse
import json
import logging
import multiprocessing as mp
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from logic_puzzles.puzzle.base import read_metadata
from logic_puzzles.puzzle.sudoku.difficulty import (
    DIFFICULTIES,
    SudokuDifficulty,
    custom_difficulty,
    load_difficulties,
)
from logic_puzzles.puzzle.sudoku.generator import SudokuGenerator, SudokuPuzzle, generate

logger = logging.getLogger(__name__)


def split_counts(total: int, parts: int) -> List[int]:
    if parts <= 0:
        return []
    base = total // parts
    extra = total % parts
    return [base + (1 if idx < extra else 0) for idx in range(parts)]


def resolve_difficulty(
    difficulty_id: Optional[str],
    removal_count: Optional[int] = None,
    config_path: Optional[str] = None,
) -> SudokuDifficulty:
    """Pick the difficulty requested on the command line.

    An explicit removal count wins; otherwise ``difficulty_id`` is looked up in
    the JSON config (when given) and then among the built-in presets.
    """
    if removal_count is not None:
        return custom_difficulty(removal_count)
    presets: Dict[str, SudokuDifficulty] = dict(DIFFICULTIES)
    if config_path:
        presets.update({key.lower(): value for key, value in load_difficulties(config_path).items()})
    key = (difficulty_id or "medium").strip().lower()
    if key not in presets:
        raise ValueError(f"Unknown difficulty '{difficulty_id}'. Choose from: {sorted(presets)}")
    return presets[key]


def _generate_job(difficulty: SudokuDifficulty, seed: Optional[int]) -> Optional[SudokuPuzzle]:
    return generate(difficulty, random.Random(seed))


def generate_with_timeout(
    difficulty: SudokuDifficulty,
    timeout: float,
    seed: Optional[int] = None,
) -> Optional[SudokuPuzzle]:
    """Run :func:`generate` in a child process and give up after ``timeout`` seconds.

    Expiry counts as a generation failure: the child is terminated and None
    is returned, same as a failed board fill.
    """
    if timeout <= 0:
        raise ValueError("timeout must be positive")
    ctx = mp.get_context("spawn")
    pool = ctx.Pool(processes=1)
    try:
        pending = pool.apply_async(_generate_job, (difficulty, seed))
        return pending.get(timeout=timeout)
    except mp.TimeoutError:
        logger.warning("Sudoku generation (%s) timed out after %.1fs", difficulty.id, timeout)
        return None
    finally:
        pool.terminate()
        pool.join()


def generate_worker(job: Dict[str, Any]) -> Dict[str, Any]:
    output_dir: Path = job["output_dir"]
    count: int = job["count"]

    generator = SudokuGenerator(
        output_dir=output_dir,
        difficulty=job["difficulty"],
        max_attempts=job["max_attempts"],
        seed=job["seed"],
    )
    records = [generator.create_random_puzzle() for _ in range(count)]
    metadata_path = output_dir / "data.json"
    generator.write_metadata(records, metadata_path, append=False)
    return {
        "count": count,
        "metadata": metadata_path.as_posix(),
        "worker_dir": output_dir.as_posix(),
    }


def merge_metadata(task_dir: Path, worker_dirs: List[Path]) -> Path:
    merged: List[Dict[str, Any]] = []
    for worker_dir in sorted(worker_dirs):
        meta_path = worker_dir / "data.json"
        if not meta_path.exists():
            logger.warning("Worker metadata missing: %s", meta_path)
            continue
        merged.extend(record for record in read_metadata(meta_path) if isinstance(record, dict))

    out_path = task_dir / "data.json"
    out_path.write_text(json.dumps(merged, ensure_ascii=False, indent=2), encoding="utf-8")
    return out_path


def build_jobs(
    output_root: Path,
    difficulty: SudokuDifficulty,
    count: int,
    num_workers: int,
    seed: Optional[int],
    max_attempts: int,
) -> List[Dict[str, Any]]:
    workers = max(1, min(num_workers, count))
    jobs: List[Dict[str, Any]] = []
    for worker_idx, worker_count in enumerate(split_counts(count, workers)):
        if worker_count <= 0:
            continue
        jobs.append(
            {
                "output_dir": output_root / f"worker_{worker_idx:02d}",
                "count": worker_count,
                "seed": (seed + worker_idx) if seed is not None else None,
                "difficulty": difficulty,
                "max_attempts": max_attempts,
            }
        )
    return jobs


def run(
    output_root: Path,
    difficulty: SudokuDifficulty,
    *,
    count: int,
    num_workers: int = 4,
    seed: Optional[int] = 42,
    max_attempts: int = 3,
) -> Path:
    """Generate ``count`` puzzles under ``output_root`` and return the merged metadata path."""
    if count <= 0:
        raise ValueError("count must be positive")
    output_root.mkdir(parents=True, exist_ok=True)
    jobs = build_jobs(output_root, difficulty, count, num_workers, seed, max_attempts)

    results: List[Dict[str, Any]] = []
    if len(jobs) == 1:
        results.append(generate_worker(jobs[0]))
    else:
        ctx = mp.get_context("spawn")
        with ctx.Pool(processes=len(jobs)) as pool:
            for result in tqdm(pool.imap_unordered(generate_worker, jobs), total=len(jobs), desc="workers"):
                results.append(result)

    worker_dirs = [Path(item["worker_dir"]) for item in results]
    merged_path = merge_metadata(output_root, worker_dirs)
    total = sum(item["count"] for item in results)
    logger.info("Merged %d puzzles into %s", total, merged_path)
    return merged_path


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Sudoku dataset generator with multi-CPU support")
    parser.add_argument("--output_dir", type=str, required=True, help="Root output directory")
    parser.add_argument("--count", type=int, default=10, help="Number of puzzles")
    parser.add_argument("--num_workers", type=int, default=4, help="CPU workers")
    parser.add_argument("--seed", type=int, default=42, help="Base seed")
    parser.add_argument("--difficulty", type=str, default="medium", help="Difficulty preset id")
    parser.add_argument("--removal_count", type=int, default=None, help="Custom number of clues to remove (0-81)")
    parser.add_argument("--difficulty_config", type=str, default=None, help="JSON file with extra difficulty presets")
    parser.add_argument("--max_attempts", type=int, default=3, help="Retries per puzzle when generation fails")
    parser.add_argument("--log_level", type=str, default="INFO", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    difficulty = resolve_difficulty(args.difficulty, args.removal_count, args.difficulty_config)
    output_root = Path(args.output_dir).expanduser().resolve()

    print("=" * 60)
    print("Sudoku Dataset Generator")
    print(f"Output Dir: {output_root}")
    print(f"Difficulty: {difficulty.name} (remove up to {difficulty.removal_count})")
    print(f"Count: {args.count}")
    print(f"Workers: {args.num_workers}")
    print("=" * 60)

    merged_path = run(
        output_root,
        difficulty,
        count=args.count,
        num_workers=args.num_workers,
        seed=args.seed,
        max_attempts=args.max_attempts,
    )
    print(f"  -> {merged_path}")
    print("Done.")


if __name__ == "__main__":
    main()
