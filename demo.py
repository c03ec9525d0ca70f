"""
Binary Search Tree Demo -- Height growth for sorted vs shuffled insertion,
iterator agreement, and removal-during-iteration.

An unbalanced BST degenerates into a linked list when keys arrive in sorted
order (height n - 1) but stays close to 2 * ln(n) deep for random orders.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_search_tree import BinarySearchTree

SEED = 42
N_KEYS = 1500
N_SHUFFLES = 8
CHECKPOINTS = np.linspace(10, N_KEYS, 30, dtype=int)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "dark": "#2c3e50",
}


def height_curve(order):
    """Height of the tree after each checkpoint number of inserts."""
    bst = BinarySearchTree()
    heights = []
    inserted = 0
    for checkpoint in CHECKPOINTS:
        while inserted < checkpoint:
            bst.insert(int(order[inserted]))
            inserted += 1
        heights.append(bst.height())
    return np.array(heights), bst


# ---------------------------------------------------------------------------
# Example 1: Height Growth
# ---------------------------------------------------------------------------
def example_1_height_growth():
    """Sorted keys build a chain; shuffled keys build a bushy tree."""
    print("=" * 60)
    print("Example 1: Height Growth (sorted vs shuffled)")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sorted_heights, _ = height_curve(np.arange(N_KEYS))

    shuffled = []
    for _ in range(N_SHUFFLES):
        heights, bst = height_curve(rng.permutation(N_KEYS))
        assert bst.size() == N_KEYS
        shuffled.append(heights)
    shuffled = np.stack(shuffled)

    print(f"\n  Keys inserted: {N_KEYS}")
    print(f"  Sorted order height:   {sorted_heights[-1]}")
    print(f"  Shuffled mean height:  {shuffled[:, -1].mean():.1f} "
          f"(min {shuffled[:, -1].min()}, max {shuffled[:, -1].max()})")
    print(f"  2 * ln(n) reference:   {2 * np.log(N_KEYS):.1f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].plot(CHECKPOINTS, sorted_heights, "-", color=COLORS["red"],
                 linewidth=2, label="Sorted insertion")
    axes[0].plot(CHECKPOINTS, shuffled.mean(axis=0), "-", color=COLORS["green"],
                 linewidth=2, label="Shuffled insertion (mean)")
    axes[0].set_xlabel("Keys inserted")
    axes[0].set_ylabel("height()")
    axes[0].set_title("Height vs Keys Inserted\nSorted input degenerates to a list",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    for row in shuffled:
        axes[1].plot(CHECKPOINTS, row, color=COLORS["blue"], alpha=0.35, linewidth=1)
    axes[1].plot(CHECKPOINTS, 2 * np.log(CHECKPOINTS), "--", color=COLORS["dark"],
                 linewidth=2, label="2 ln(n)")
    axes[1].set_xlabel("Keys inserted")
    axes[1].set_ylabel("height()")
    axes[1].set_title(f"{N_SHUFFLES} Random Permutations\nLogarithmic growth",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: {VIZ_DIR / '01_height_growth.png'}")
    return int(sorted_heights[-1]), float(shuffled[:, -1].mean())


# ---------------------------------------------------------------------------
# Example 2: Iterator Agreement and Cost
# ---------------------------------------------------------------------------
def example_2_iterators():
    """All three iterators agree with sorted(); time each one."""
    print("\n" + "=" * 60)
    print("Example 2: Iterator Agreement and Cost")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    keys = rng.permutation(N_KEYS)
    bst = BinarySearchTree()
    for key in keys:
        bst.insert(int(key))

    expected = sorted(int(k) for k in keys)
    timings = {}
    for name in ("snapshot_iterator", "pre_order_iterator", "in_order_iterator"):
        start = time.perf_counter()
        values = list(getattr(bst, name)())
        timings[name] = (time.perf_counter() - start) * 1e3
        ordered = values == expected
        print(f"\n  {name}: {len(values)} values, sorted={ordered}, {timings[name]:.2f} ms")
        assert sorted(values) == expected

    removed = 0
    iterator = bst.in_order_iterator()
    while iterator.has_next():
        if next(iterator) % 2 == 0:
            iterator.remove()
            removed += 1
    print(f"\n  Removed {removed} even keys during in-order iteration; "
          f"{bst.size()} remain, height {bst.height()}")
    assert all(value % 2 == 1 for value in bst.to_array())

    fig, ax = plt.subplots(figsize=(8, 5))
    names = list(timings)
    ax.bar(range(len(names)), [timings[n] for n in names],
           color=[COLORS["orange"], COLORS["blue"], COLORS["green"]], edgecolor="white")
    ax.set_xticks(range(len(names)))
    ax.set_xticklabels([n.replace("_iterator", "") for n in names])
    ax.set_ylabel("Full traversal (ms)")
    ax.set_title(f"Traversal Cost, {N_KEYS} keys\nSnapshot pays for materialisation up front",
                 fontsize=10, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_iterators.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: {VIZ_DIR / '02_iterators.png'}")
    return removed


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report(summary):
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    viz_files = sorted(VIZ_DIR.glob("*.png"))
    with PdfPages(Path(__file__).parent / "report.pdf") as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.92, "Binary Search Tree", fontsize=24, fontweight="bold",
                ha="center", va="top", transform=ax.transAxes)
        summary_text = "\n".join(f"{key:<28} {value}" for key, value in summary.items())
        ax.text(0.06, 0.80, summary_text, fontsize=11, ha="left", va="top",
                transform=ax.transAxes, family="monospace", linespacing=1.4)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_height_growth.png": "Example 1: Height Growth",
            "02_iterators.png": "Example 2: Iterator Agreement and Cost",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Keys: {N_KEYS}, shuffles: {N_SHUFFLES}")
    print()

    sorted_height, shuffled_height = example_1_height_growth()
    removed = example_2_iterators()
    generate_pdf_report({
        "Keys inserted": N_KEYS,
        "Sorted insertion height": sorted_height,
        "Shuffled mean height": f"{shuffled_height:.1f}",
        "Evens removed mid-iteration": removed,
    })

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
