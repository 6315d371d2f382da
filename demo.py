"""
Binary Search Tree Demo -- Traversal orders, lookups, extremes, the three delete
cases, and how insertion order shapes an unbalanced tree.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- PDF report collecting every visualization
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from bstree import Tree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "steel": "steelblue",
    "dark": "#2c3e50",
}

REFERENCE_KEYS = [25, 20, 30, 15, 22, 27, 35]
DRIVER_KEYS = [25, 20, 15, 27, 30, 29, 26, 22, 32]


def format_keys(keys):
    return ", ".join(str(key) for key in keys)


def build_tree(keys):
    tree = Tree()
    for key in keys:
        tree.insert(key)
    return tree


def layout(tree):
    """Place every node at (in-order rank, -depth).

    Returns node coordinates as an (n, 2) array, the keys in the same order,
    and the parent/child edges as index pairs.
    """
    positions = []
    keys = []
    edges = []
    stack = []
    node = tree.root
    index_of = {}
    depth_of = {}
    parent_of = {}
    # in-order walk that also records depth and parent
    if node is not None:
        depth_of[id(node)] = 0
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            if node.left is not None:
                depth_of[id(node.left)] = depth_of[id(node)] + 1
                parent_of[id(node.left)] = node
            node = node.left
        node = stack.pop()
        depth = depth_of[id(node)]
        index_of[id(node)] = len(keys)
        keys.append(node.key)
        positions.append((len(positions), -depth))
        if node.right is not None:
            depth_of[id(node.right)] = depth + 1
            parent_of[id(node.right)] = node
        node = node.right

    for child_id, parent in parent_of.items():
        edges.append((index_of[id(parent)], index_of[child_id]))
    return np.array(positions, dtype=float).reshape(-1, 2), keys, edges


def draw_tree(ax, tree, title, highlight=(), color=COLORS["blue"]):
    coords, keys, edges = layout(tree)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")
    if len(keys) == 0:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center",
                transform=ax.transAxes, color="gray")
        return

    for parent, child in edges:
        ax.plot(coords[[parent, child], 0], coords[[parent, child], 1],
                color=COLORS["dark"], linewidth=1.2, zorder=1)

    node_colors = [COLORS["red"] if key in highlight else color for key in keys]
    ax.scatter(coords[:, 0], coords[:, 1], s=700, c=node_colors,
               edgecolors="white", linewidths=2, zorder=2)
    for (x, y), key in zip(coords, keys):
        ax.text(x, y, str(key), ha="center", va="center", fontsize=9,
                color="white", fontweight="bold", zorder=3)

    ax.set_xlim(coords[:, 0].min() - 0.8, coords[:, 0].max() + 0.8)
    ax.set_ylim(coords[:, 1].min() - 0.6, 0.6)


# ---------------------------------------------------------------------------
# Example 1: Traversal Orders
# ---------------------------------------------------------------------------
def example_1_traversals():
    """Build the driver tree and print the three traversal orders."""
    print("=" * 60)
    print("Example 1: Traversal Orders")
    print("=" * 60)

    tree = build_tree(DRIVER_KEYS)
    print(f"\n  Inserting: {format_keys(DRIVER_KEYS)}")
    print(f"\n  In-order (sorted):  {format_keys(tree.in_order())}")
    print(f"  Pre-order (NLR):    {format_keys(tree.pre_order())}")
    print(f"  Post-order (LRN):   {format_keys(tree.post_order())}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))
    draw_tree(axes[0], tree, f"Tree built from {format_keys(DRIVER_KEYS)}")

    orders = [
        ("in-order", tree.in_order(), COLORS["green"]),
        ("pre-order", tree.pre_order(), COLORS["orange"]),
        ("post-order", tree.post_order(), COLORS["purple"]),
    ]
    axes[1].axis("off")
    for row, (name, keys, color) in enumerate(orders):
        y = 0.8 - row * 0.3
        axes[1].text(0.0, y + 0.1, name, fontsize=11, fontweight="bold",
                     transform=axes[1].transAxes, color=color)
        for col, key in enumerate(keys):
            axes[1].text(0.02 + col * 0.105, y, str(key), fontsize=10,
                         ha="center", va="center", transform=axes[1].transAxes,
                         bbox=dict(boxstyle="round,pad=0.3", facecolor=color,
                                   alpha=0.25))
    axes[1].set_title("Visit order per traversal", fontsize=10, fontweight="bold")

    fig.suptitle("Traversals of a Binary Search Tree", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversals.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_traversals.png")
    return tree


# ---------------------------------------------------------------------------
# Example 2: Lookups and Extremes
# ---------------------------------------------------------------------------
def example_2_lookups_and_extremes():
    """get() follows one path from the root; min/max follow the outer edges."""
    print("\n" + "=" * 60)
    print("Example 2: Lookups and Extremes")
    print("=" * 60)

    tree = build_tree(REFERENCE_KEYS)
    for value in (27, 100):
        node = tree.get(value)
        found = f"found {node!r}" if node is not None else "not found"
        print(f"\n  get({value}): {found}")

    print(f"\n  min(): {tree.min()}")
    print(f"  max(): {tree.max()}")

    empty = Tree()
    print(f"\n  Empty tree min(): {empty.min()}")
    print(f"  Empty tree max(): {empty.max()}")

    fig, axes = plt.subplots(1, 2, figsize=(13, 4.5))
    draw_tree(axes[0], tree, "get(27) visits 25 -> 30 -> 27", highlight=(25, 30, 27))
    draw_tree(axes[1], tree, f"min() = {tree.min()}, max() = {tree.max()}",
              highlight=(tree.min(), tree.max()))
    fig.suptitle("Search Paths", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_lookups_extremes.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_lookups_extremes.png")


# ---------------------------------------------------------------------------
# Example 3: Deletion Cases
# ---------------------------------------------------------------------------
def example_3_deletion():
    """Delete a leaf, an inner node and the root, each from a fresh tree."""
    print("\n" + "=" * 60)
    print("Example 3: Deletion")
    print("=" * 60)

    cases = [
        (15, "leaf: unlinked"),
        (20, "two children: takes predecessor 15"),
        (25, "root, two children: takes predecessor 22"),
    ]

    fig, axes = plt.subplots(2, len(cases), figsize=(16, 8))
    for col, (value, description) in enumerate(cases):
        tree = build_tree(REFERENCE_KEYS)
        draw_tree(axes[0, col], tree, f"before delete({value})", highlight=(value,))
        root = tree.root
        tree.delete(value)
        print(f"\n  delete({value}) [{description}]")
        print(f"    in-order: {format_keys(tree.in_order())}")
        print(f"    root node kept: {tree.root is root}, root key: {tree.root.key}")
        draw_tree(axes[1, col], tree, description, color=COLORS["green"])

    missing = build_tree(REFERENCE_KEYS)
    missing.delete(100)
    print(f"\n  delete(100) [absent]: {format_keys(missing.in_order())}")

    drained = build_tree(REFERENCE_KEYS)
    for value in np.random.permutation(REFERENCE_KEYS).tolist():
        drained.delete(value)
    print(f"  Deleting every key in random order leaves: {drained!r}")

    fig.suptitle("Deletion: leaf removal, predecessor splicing",
                 fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_deletion.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_deletion.png")


# ---------------------------------------------------------------------------
# Example 4: Insertion Order and Height
# ---------------------------------------------------------------------------
def example_4_insertion_order():
    """Sorted input degrades the tree to a list; shuffled input stays shallow."""
    print("\n" + "=" * 60)
    print("Example 4: Insertion Order and Height")
    print("=" * 60)

    sizes = np.array([16, 32, 64, 128, 256, 512, 1024])
    random_heights = []
    sorted_heights = []
    for n in sizes:
        shuffled = build_tree(np.random.permutation(int(n)).tolist())
        ordered = build_tree(range(int(n)))
        random_heights.append(shuffled.height())
        sorted_heights.append(ordered.height())
        print(f"  n={int(n):5d}  shuffled height={shuffled.height():4d}"
              f"  sorted height={ordered.height():5d}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], label="sorted insert")
    axes[0].plot(sizes, random_heights, "o-", color=COLORS["blue"], label="shuffled insert")
    axes[0].plot(sizes, np.log2(sizes) + 1, "--", color="gray", label="log2(n) + 1")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Number of keys")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height vs size\nNo rebalancing: sorted input gives height n",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=8)
    axes[0].grid(True, alpha=0.3)

    draw_tree(axes[1], build_tree(range(1, 9)), "insert 1..8 in order",
              color=COLORS["red"])
    draw_tree(axes[2], build_tree(np.random.permutation(np.arange(1, 9)).tolist()),
              "insert 1..8 shuffled")

    fig.suptitle("Insertion Order Determines Shape", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_insertion_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_insertion_order.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Search Tree",
                fontsize=24, fontweight="bold", ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "An ordered set without rebalancing",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Every key in a node's left subtree is smaller than the node's key and\n"
            "every key in its right subtree is larger. Deleting a node with two\n"
            "children copies in its in-order predecessor and removes the\n"
            "predecessor from the left subtree instead.\n\n"
            "This demo covers:\n"
            "  1. In-order, pre-order and post-order traversal\n"
            "  2. Lookups and min/max, including the empty tree\n"
            "  3. The delete cases\n"
            "  4. Height under sorted and shuffled insertion\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.30, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = viz_file.stem.split("_", 1)[1].replace("_", " ").title()
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
    print()

    example_1_traversals()
    example_2_lookups_and_extremes()
    example_3_deletion()
    example_4_insertion_order()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
