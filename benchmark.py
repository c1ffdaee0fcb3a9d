"""
Bucket-width sweep for the grid spatial index.
Times inserts and queries on uniform random data for several bucket widths
and checks every answer against an exact KD-tree.
"""

import numpy as np
import time
import json
from datetime import datetime
from pathlib import Path
import matplotlib.pyplot as plt
from scipy.spatial import cKDTree
from tqdm import tqdm

from config import (BENCH_NUM_POINTS, BENCH_NUM_QUERIES, BENCH_BUCKET_WIDTHS,
                    BENCH_SEED, BENCH_TOLERANCE, DOMAIN_MAX, RESULTS_DIR)
from point_module import Point
from spatial_index import BasicSpatial, GridConfig
from rtree_module import RTreeSpatial


def generate_points(n, domain_max, rng):
    """Uniform random coordinates in [0, domain_max]^2, shape (n, 2)."""
    return rng.uniform(0.0, domain_max, size=(n, 2))


def time_index(spatial, points, queries, exact_dist):
    """
    Fill an index and query it once per query point.

    Returns
    -------
    dict
        insert_time / query_time in seconds, misses (None answers) and
        accuracy: fraction of queries whose answer is at the exact distance.
    """
    start_time = time.perf_counter()
    for p in points:
        spatial.insert(p)
    insert_time = time.perf_counter() - start_time

    answers = []
    start_time = time.perf_counter()
    for q in queries:
        answers.append(spatial.nearest_neighbor(q))
    query_time = time.perf_counter() - start_time

    hits = 0
    misses = 0
    for q, found, best in zip(queries, answers, exact_dist):
        if found is None:
            misses += 1
        elif found.distance(q) - best <= BENCH_TOLERANCE:
            hits += 1

    return {
        'insert_time': insert_time,
        'query_time': query_time,
        'mean_query_time': query_time / len(queries) if queries else 0.0,
        'misses': misses,
        'accuracy': hits / len(queries) if queries else 1.0,
    }


def run_benchmark(bucket_widths=BENCH_BUCKET_WIDTHS, num_points=BENCH_NUM_POINTS,
                  num_queries=BENCH_NUM_QUERIES, seed=BENCH_SEED,
                  domain_max=DOMAIN_MAX, full_ring=True, include_rtree=True):
    """
    Sweep bucket widths on one fixed random workload.
    """
    rng = np.random.default_rng(seed)
    coords = generate_points(num_points, domain_max, rng)
    query_coords = generate_points(num_queries, domain_max, rng)

    points = [Point(c) for c in coords]
    queries = [Point(c) for c in query_coords]

    if num_points > 0:
        exact_dist, _ = cKDTree(coords).query(query_coords, k=1)
    else:
        exact_dist = np.full(num_queries, np.inf)

    results = []
    pbar = tqdm(bucket_widths, desc="Bucket widths", unit="width")
    for width in pbar:
        spatial = BasicSpatial(GridConfig(bucket_width=width, domain_max=domain_max,
                                          full_ring=full_ring))
        metrics = time_index(spatial, points, queries, exact_dist)
        metrics['index'] = 'grid'
        metrics['bucket_width'] = width
        metrics['side_length'] = spatial.side
        metrics['stats'] = spatial.stats()
        results.append(metrics)
        pbar.set_postfix({'query_s': f"{metrics['query_time']:.3f}",
                          'acc': f"{metrics['accuracy']:.3f}"})

    reference = None
    if include_rtree:
        reference = time_index(RTreeSpatial(), points, queries, exact_dist)
        reference['index'] = 'rtree'

    return {
        'num_points': num_points,
        'num_queries': num_queries,
        'seed': seed,
        'domain_max': domain_max,
        'full_ring': full_ring,
        'grid': results,
        'rtree': reference,
    }


def best_bucket_width(results):
    """Fastest width among the runs with the best accuracy."""
    runs = results['grid']
    if not runs:
        return None
    top = max(r['accuracy'] for r in runs)
    return min((r for r in runs if r['accuracy'] == top),
               key=lambda r: r['query_time'])['bucket_width']


def save_results(results, results_dir=RESULTS_DIR):
    """Save benchmark results to a timestamped JSON file"""
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = results_dir / f"benchmark_{timestamp}.json"

    # Convert numpy types to native Python types
    def convert(obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif isinstance(obj, dict):
            return {k: convert(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [convert(item) for item in obj]
        return obj

    with open(filename, 'w') as f:
        json.dump(convert(results), f, indent=2)

    print(f"\nResults saved to {filename}")
    return filename


def plot_results(results, results_dir=RESULTS_DIR):
    """Query time and accuracy against bucket width"""
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)
    runs = results['grid']
    widths = [r['bucket_width'] for r in runs]

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(widths, [r['query_time'] for r in runs], 'o-', label='grid')
    if results.get('rtree'):
        axes[0].axhline(results['rtree']['query_time'], color='r', linestyle='--', label='rtree')
    axes[0].set_xscale('log')
    axes[0].set_xlabel('Bucket width')
    axes[0].set_ylabel('Total query time [s]')
    axes[0].set_title(f"{results['num_queries']} queries, {results['num_points']} points")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(widths, [r['accuracy'] for r in runs], 'o-')
    axes[1].set_xscale('log')
    axes[1].set_ylim(0, 1.05)
    axes[1].set_xlabel('Bucket width')
    axes[1].set_ylabel('Exact answers (fraction)')
    axes[1].set_title('Accuracy vs exact nearest neighbour')
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = results_dir / f"benchmark_plot_{timestamp}.png"
    plt.savefig(filename, dpi=150)
    print(f"Plot saved to {filename}")
    plt.close(fig)
    return filename


def main():
    """Run the bucket width sweep"""
    print("=" * 60)
    print("GRID SPATIAL INDEX BENCHMARK")
    print("=" * 60)
    print(f"{BENCH_NUM_POINTS} points, {BENCH_NUM_QUERIES} queries, domain [0, {DOMAIN_MAX}]")

    results = run_benchmark()

    print("\n" + "=" * 60)
    print(f"  {'width':>8s} {'side':>6s} {'insert [s]':>11s} {'query [s]':>10s} {'accuracy':>9s}")
    for r in results['grid']:
        print(f"  {r['bucket_width']:8g} {r['side_length']:6d} {r['insert_time']:11.4f} "
              f"{r['query_time']:10.4f} {r['accuracy']:9.4f}")
    if results['rtree']:
        r = results['rtree']
        print(f"  {'rtree':>8s} {'-':>6s} {r['insert_time']:11.4f} "
              f"{r['query_time']:10.4f} {r['accuracy']:9.4f}")
    print(f"\nBest bucket width: {best_bucket_width(results)}")

    save_results(results)
    plot_results(results)


if __name__ == "__main__":
    main()
