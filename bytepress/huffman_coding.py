"""
Huffman coding algorithm -
frequency tree over byte symbols
"""

from collections import Counter

from bitarray import bitarray

from bytepress.bit_utils.bit_reader import BitReader
from bytepress.errors import MalformedHeader, MalformedInput


class Node:
    """
    Class object for Node in Huffman's Tree
    """

    def __init__(self, value=None, val_freq: int = 0, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param value: byte held by a leaf, None for internal nodes
        :param val_freq: int, the frequency in our data for this value
        :param left: zero-branch child
        :param right: one-branch child
        """
        self.left = left
        self.right = right
        self.value = value
        self.val_freq = val_freq

    def __lt__(self, val):
        return self.val_freq < val.val_freq

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"Node({self.value!r}, {self.val_freq})"
        return f"Node(<internal>, {self.val_freq})"


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. The encoder builds it from symbol
    frequencies, the decoder rebuilds it as a trie from a code table.
    """

    def __init__(self, data=None):
        """
        Function initializes the structure of Huffman Tree.

        :param data: bytes to build the tree for, optional
        """
        self.res_codes = {}
        self.root = None
        self.char_frequency_dict = {}
        if data:
            self.char_frequency_dict = self.char_frequency(data)
            self.tree()
            self.codes_generation()

    @classmethod
    def build_from_freq(cls, freq_dict: dict[int, int]) -> "HuffmanTree":
        """
        Builds Huffman tree from an external frequency dictionary,
        generates prefix codes and returns the instance.

        :param freq_dict: dictionary {symbol: frequency}
        :return: HuffmanTree with filled res_codes
        """
        tree = cls(data=None)
        tree.char_frequency_dict = dict(sorted(freq_dict.items()))
        tree.tree()
        tree.codes_generation()
        return tree

    @classmethod
    def from_codes(cls, codes: dict[int, bitarray]) -> "HuffmanTree":
        """
        Rebuilds the decoding trie: every code becomes a root-to-leaf path,
        internal nodes are created on demand.

        :param codes: dictionary {symbol: code bits}
        :return: HuffmanTree whose root is the trie
        :raises MalformedHeader: if the codes are not prefix-free
        """
        tree = cls(data=None)
        tree.res_codes = dict(codes)
        if not codes:
            return tree

        if len(codes) == 1:
            ((symbol, code),) = codes.items()
            if not code:
                tree.root = Node(symbol)
                return tree

        tree.root = Node()
        for symbol, code in codes.items():
            if not code:
                raise MalformedHeader(
                    f"empty code for symbol {symbol} in a table of {len(codes)} symbols"
                )
            node = tree.root
            for bit in code[:-1]:
                if node.value is not None:
                    raise MalformedHeader(
                        f"code of symbol {symbol} runs through another symbol's leaf"
                    )
                child = node.right if bit else node.left
                if child is None:
                    child = Node()
                    if bit:
                        node.right = child
                    else:
                        node.left = child
                node = child

            if node.value is not None:
                raise MalformedHeader(
                    f"code of symbol {symbol} runs through another symbol's leaf"
                )
            if code[-1]:
                if node.right is not None:
                    raise MalformedHeader(f"code of symbol {symbol} is not prefix-free")
                node.right = Node(symbol)
            else:
                if node.left is not None:
                    raise MalformedHeader(f"code of symbol {symbol} is not prefix-free")
                node.left = Node(symbol)
        return tree

    def char_frequency(self, data) -> dict:
        """
        Function builds dictionary with frequency
        of each symbol for given data, ordered by symbol.

        :param data: bytes to count symbol frequency for
        :return: dict, dictionary with symbol frequency
        """
        return dict(sorted(Counter(data).items()))

    def tree(self):
        """
        Function builds Huffman Tree.

        Candidates are stably sorted by weight on every round, the two
        lightest become the zero and one branch of a new node which is
        appended after the remaining candidates.
        """
        nodes = [Node(val, val_freq) for val, val_freq in self.char_frequency_dict.items()]
        if not nodes:
            self.root = None
            return

        while len(nodes) > 1:
            nodes.sort()
            first, second = nodes[0], nodes[1]
            merged = Node(None, first.val_freq + second.val_freq, first, second)
            nodes = nodes[2:]
            nodes.append(merged)

        self.root = nodes[0]

    def codes_generation(self, node=None, curr_code=None):
        """
        Recursive function that generates
        code for each symbol, preorder traversal of Huffman's tree
        visiting the zero-branch first.

        :param node: node to start traversal from
        :param curr_code: bitarray, path from the root to node
        """
        if node is None:
            node = self.root
            self.res_codes = {}
            if node is None:
                return self.res_codes
        if curr_code is None:
            curr_code = bitarray(endian="big")

        # if our node is a leaf than we write the code for it
        if node.is_leaf():
            self.res_codes[node.value] = curr_code.copy()
            return self.res_codes

        curr_code.append(0)
        self.codes_generation(node.left, curr_code)
        curr_code.pop()
        curr_code.append(1)
        self.codes_generation(node.right, curr_code)
        curr_code.pop()
        return self.res_codes

    def depth(self, node=None) -> int:
        """
        Longest root-to-leaf path of the tree, in edges.

        :param node: subtree root, the tree root by default
        :return: int, 0 for an empty tree or a single leaf
        """
        if node is None:
            node = self.root
            if node is None:
                return 0
        if node.is_leaf():
            return 0
        return 1 + max(self.depth(child) for child in (node.left, node.right) if child is not None)

    def decode_symbols(self, reader: BitReader, count: int) -> bytes:
        """
        Walks the trie bit by bit and emits a symbol on every leaf reached.

        :param reader: bit source positioned at the first payload bit
        :param count: number of symbols to emit
        :return: decoded bytes
        :raises MalformedInput: if bits run out or lead off the trie
        """
        if count == 0:
            return b""
        if self.root is None:
            raise MalformedInput(f"empty code table cannot produce {count} symbols")
        if self.root.is_leaf():
            return bytes([self.root.value]) * count

        out = bytearray()
        node = self.root
        while len(out) < count:
            try:
                bit = reader.read_bit()
            except EOFError as exc:
                raise MalformedInput(
                    f"payload exhausted after {len(out)} of {count} symbols"
                ) from exc
            node = node.right if bit else node.left
            if node is None:
                raise MalformedInput(f"bit path after symbol {len(out)} is not a known code")
            if node.is_leaf():
                out.append(node.value)
                node = self.root
        return bytes(out)
