"""
Benchmark color matrix throughput (single vectors vs. Numba batch kernel).
"""

import time

import numpy as np

from colormatrix import apply_matrices, apply_matrices_to_array, hue_rotate, saturate, sepia

N = 1_000_000
NUM_ITERATIONS = 50
NUM_SINGLE = 10_000

print("=" * 80)
print("COLOR MATRIX BENCHMARK (NumPy/Numba)")
print(f"Testing with {N:,} RGBA colors, {NUM_ITERATIONS} iterations")
print("=" * 80)

# Setup
colors_np = np.random.rand(N, 4).astype(np.float32)
stages = (sepia(0.3), saturate(1.2), hue_rotate(15.0))

# Warmup (triggers JIT compilation)
print("\nWarming up...")
colors_warmup = colors_np[:1000].copy()
for _ in range(5):
    apply_matrices_to_array(colors_warmup, *stages, inplace=True)

# Benchmark batch path
print(f"\nBenchmarking apply_matrices_to_array(inplace=True) - {NUM_ITERATIONS} iterations...")
times_batch = []
for _ in range(NUM_ITERATIONS):
    colors_test = colors_np.copy()
    start = time.perf_counter()
    apply_matrices_to_array(colors_test, *stages, inplace=True)
    times_batch.append((time.perf_counter() - start) * 1000)

mean_time_batch = np.mean(times_batch)
std_time_batch = np.std(times_batch)

print("\nResults (batch):")
print(f"  Time:       {mean_time_batch:.3f} ms +/- {std_time_batch:.3f} ms")
print(f"  Throughput: {N / mean_time_batch * 1000 / 1e6:.0f} M colors/sec")

# Benchmark single-vector path
print(f"\nBenchmarking apply_matrices() on {NUM_SINGLE:,} single vectors...")
start = time.perf_counter()
for vector in colors_np[:NUM_SINGLE]:
    apply_matrices(vector, *stages)
elapsed_single = (time.perf_counter() - start) * 1000

print("\nResults (single vectors):")
print(f"  Time:       {elapsed_single:.3f} ms")
print(f"  Per vector: {elapsed_single / NUM_SINGLE * 1000:.2f} us")

print("\n" + "=" * 80)
