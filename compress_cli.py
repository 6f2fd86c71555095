"""
Command line front end for the RLE and Huffman compressors
"""
import argparse
import sys

from bytepress.errors import CompressionError
from bytepress.huffman_stream import HuffmanCompressor
from bytepress.RLE import RLECompressor

CODECS = {
    "rle": RLECompressor,
    "huffman": HuffmanCompressor,
}


def show_tree(input_file: str):
    # matplotlib is only needed for drawing
    from bytepress.tree_view import show_tree as draw

    with open(input_file, "rb") as f:
        data = f.read()
    tree = HuffmanCompressor.tree_for(data)
    print(f"{len(tree.res_codes)} symbols, tree depth {tree.depth()}")
    draw(tree, title=input_file)


def main(argv=None):
    """Parse command-line arguments and run compression or decompression."""
    parser = argparse.ArgumentParser(description="RLE / Huffman byte compressor")
    sub = parser.add_subparsers(dest="mode", required=True)

    # Compress subcommand
    c = sub.add_parser("compress")
    c.add_argument("input")
    c.add_argument("output")
    c.add_argument("--codec", default="huffman", choices=list(CODECS.keys()))

    # Decompress subcommand
    d = sub.add_parser("decompress")
    d.add_argument("input")
    d.add_argument("output")
    d.add_argument("--codec", default="huffman", choices=list(CODECS.keys()))

    # Tree subcommand
    t = sub.add_parser("tree")
    t.add_argument("input")

    args = parser.parse_args(argv)

    try:
        if args.mode == "compress":
            print(CODECS[args.codec].compress_file(args.input, args.output))
        elif args.mode == "decompress":
            print(CODECS[args.codec].decompress_file(args.input, args.output))
        else:
            show_tree(args.input)
    except (CompressionError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
