"""Huffman coding compressor and decompressor for files and byte strings."""

__version__ = "0.1.0"
__all__ = ["code", "tree", "frequency", "priority", "compress", "decompress", "cli"]