# config.py

# Grid spatial index resolution
BUCKET_WIDTH = 10      # width of one bucket along each axis
DOMAIN_MAX = 1000      # coordinates are expected in [0, DOMAIN_MAX]

# Scan the left/right columns of every search ring as well as the top/bottom rows.
# False reproduces the old top/bottom-only scan (can miss side neighbours).
FULL_RING_SCAN = True

# Benchmark parameters
BENCH_NUM_POINTS = 10000
BENCH_NUM_QUERIES = 10000
BENCH_BUCKET_WIDTHS = [1, 2, 5, 10, 20, 50, 100, 200, 500, 1000]
BENCH_SEED = 42
BENCH_TOLERANCE = 1e-9  # distance tolerance when comparing against the exact answer
RESULTS_DIR = "benchmark_results"
