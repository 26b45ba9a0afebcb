# huffzip

huffzip compresses and decompresses files and byte strings with Huffman coding.
It has no dependencies beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

## Command line

Start the interactive program:

```
huffzip
```

It takes no options (`huffzip --help` prints a short usage line). It reads its
answers from standard input and shows a menu, with its prompts and messages in
Portuguese:

```
 === Menu ===
Escolha uma opcao:
1. Compactar arquivo
2. Descompactar arquivo
3. Sair
Escolha uma opcao: 
```

- `1` compresses a file. You are asked for the input file name, then the output
  file name.
- `2` decompresses a file. You are asked for the compressed file name, then the
  output file name.
- `3` quits.

Any other choice prints an "invalid option" message and shows the menu again.
File names are read as single whitespace-separated words, so they cannot contain
spaces. The program also ends when standard input runs out.

Errors are reported as messages and the menu comes back: a file that cannot be
opened, an empty input file (there is nothing to compress), or a compressed file
that is malformed.

## Library use

```python
from huffzip.compress import compress, compress_file
from huffzip.decompress import decompress, decompress_file, DecompressError

packed = compress(b"abracadabra")
assert decompress(packed) == b"abracadabra"

compress_file("notes.txt", "notes.huf")
decompress_file("notes.huf", "notes.out")
```

- `compress(data)` raises `ValueError` for empty input.
- `decompress(data)` raises `DecompressError` (a subclass of `ValueError`) when
  the header is short or holds no symbols, the trailing valid-bit byte is missing
  or above 8, or the bits lead off the code tree.
- `compress_file` and `decompress_file` read the whole input file and write the
  result to the output path. They let `OSError` through.

The lower-level pieces can be used on their own:

- `huffzip.frequency.FrequencyTable` counts byte values (`add`, `update`), and
  `nodes()` gives one leaf `Node` per byte seen, in ascending byte order.
  `count_frequencies(path)` fills a table from a file.
- `huffzip.priority.PriorityQueue` keeps nodes by ascending frequency; nodes of
  equal frequency stay in insertion order. `PriorityQueue.from_table(table)`
  fills one from a frequency table, and `build_tree(queue)` merges the queue into
  one Huffman tree, emptying it. `build_tree` raises `ValueError` on an empty
  queue.
- `huffzip.tree.Node` is a tree node (`byte`, `frequency`, `left`, `right`,
  `is_leaf()`), and `generate_codes(root)` maps each leaf byte to its `Code`
  (0 for left, 1 for right).
- `huffzip.code.Code` is a growable sequence of bits with `push`, `pop`, `copy`,
  `to_bytes` (MSB first, zero-padded), `len()` and iteration.

## File format

A compressed file holds these parts, in order:

1. A little-endian 16-bit count of distinct symbols.
2. For each symbol, one byte for the symbol and a little-endian 32-bit frequency
   (frequencies are truncated to 32 bits). The symbols are written in priority
   queue order: ascending frequency, ties in ascending byte order.
3. The packed code bits, most significant bit first, with the last byte padded
   with zeros.
4. One trailing byte giving how many bits of the last data byte are used. The
   value is 8 when the last data byte is full or there are no data bytes.

The decoder rebuilds the same tree from the symbol table and walks it bit by bit.

## Limitations

- Input made up of one distinct byte value (for example `b"aaaa"`) gives a tree
  of a single leaf. That leaf has an empty code, so no data bits are written, and
  decompressing the result gives empty output: such input does not survive a
  round trip.
- Empty input cannot be compressed.
- Whole files are held in memory while they are compressed or decompressed.

## Tests

```
pip install ".[test]"
pytest
```