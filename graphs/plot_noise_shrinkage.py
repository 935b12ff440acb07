import argparse

import matplotlib.pyplot as plt
import numpy as np

from streams.api import expected_value_current_board

# --- CONFIGURATION ---
DEFAULT_BOARD = "1__5___A_______K____"
SIM_COUNTS = [25, 100, 400, 1600]


def collect_estimates(board, sims, repeats, base_seed):
    """repeats independent estimates of the same board at one sims value."""
    return np.array([
        expected_value_current_board(board, sims, seed=base_seed + i)
        for i in range(repeats)
    ])


def plot_noise_shrinkage(board, repeats, base_seed, out):
    stds = []
    for n in SIM_COUNTS:
        est = collect_estimates(board, n, repeats, base_seed + 100_000 * n)
        stds.append(est.std(ddof=1))
        print(f"N={n:>5}  mean={est.mean():8.3f}  std={stds[-1]:.4f}")

    ns = np.array(SIM_COUNTS, dtype=float)
    stds = np.array(stds)
    # 1/sqrt(N) reference anchored at the smallest N
    ref = stds[0] * np.sqrt(ns[0] / ns)

    plt.figure(figsize=(8, 5))
    plt.loglog(ns, stds, "o-", color='#1f77b4', label='observed std of estimate')
    plt.loglog(ns, ref, "--", color='red', label='1/sqrt(N) reference')
    plt.title(f'Estimator noise vs simulations ({board})', fontsize=12, fontweight='bold')
    plt.xlabel('simulations per estimate (N)')
    plt.ylabel('std over repeated calls')
    plt.legend()
    plt.grid(True, which='both', alpha=0.3)
    plt.tight_layout()
    plt.savefig(out, dpi=200)
    print(f"Saved '{out}'")


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--board", type=str, default=DEFAULT_BOARD)
    ap.add_argument("--repeats", type=int, default=40)
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--out", type=str, default="graph_noise_shrinkage.png")
    args = ap.parse_args()
    plot_noise_shrinkage(args.board, args.repeats, args.seed, args.out)
