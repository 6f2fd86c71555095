"""
Drawing of a Huffman tree with matplotlib.
The tree is only read, never changed.
"""
import matplotlib.pyplot as plt

from bytepress.huffman_coding import HuffmanTree, Node


def layout(tree: HuffmanTree) -> dict[Node, tuple[float, float]]:
    """
    Positions for every node: leaves are spread left to right in
    traversal order, an internal node sits above the middle of its
    children, the root is at the top.

    :param tree: built HuffmanTree
    :return: dict {node: (x, y)}
    """
    positions = {}
    height = tree.depth()
    next_x = 0

    def place(node, level):
        nonlocal next_x
        if node.is_leaf():
            positions[node] = (float(next_x), float(height - level))
            next_x += 1
            return positions[node]
        xs = [place(child, level + 1)[0] for child in (node.left, node.right) if child is not None]
        positions[node] = (sum(xs) / len(xs), float(height - level))
        return positions[node]

    if tree.root is not None:
        place(tree.root, 0)
    return positions


def draw_tree(tree: HuffmanTree, ax=None, title: str = "Huffman tree"):
    """
    Draw tree on ax (a new figure when not given).

    :return: the matplotlib Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    positions = layout(tree)
    for node, (x, y) in positions.items():
        for bit, child in ((0, node.left), (1, node.right)):
            if child is None:
                continue
            cx, cy = positions[child]
            ax.plot([x, cx], [y, cy], color="#0E103D", linewidth=1)
            ax.annotate(str(bit), ((x + cx) / 2, (y + cy) / 2), color="#3590F3")

    for node, (x, y) in positions.items():
        if node.is_leaf():
            label = f"{node.value:#04x}\n{node.val_freq}"
            color = "#E8EEF2"
        else:
            label = str(node.val_freq)
            color = "white"
        ax.annotate(
            label,
            (x, y),
            ha="center",
            va="center",
            fontsize=8,
            bbox=dict(boxstyle="circle", facecolor=color, edgecolor="#0E103D"),
        )

    if positions:
        xs = [x for x, _ in positions.values()]
        ax.set_xlim(min(xs) - 1, max(xs) + 1)
        ax.set_ylim(-1, tree.depth() + 1)
    ax.set_title(title)
    ax.axis("off")
    return ax


def show_tree(tree: HuffmanTree, title: str = "Huffman tree"):
    draw_tree(tree, title=title)
    plt.show()
