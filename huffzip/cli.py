"""Interactive menu for compressing and decompressing files."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from huffzip.compress import compress_file
from huffzip.decompress import DecompressError, decompress_file
from huffzip.frequency import count_frequencies

_INT = re.compile(r"[+-]?\d+")

_MENU = "\n".join(
    (
        "",
        " === Menu ===",
        "Escolha uma opcao:",
        "1. Compactar arquivo",
        "2. Descompactar arquivo",
        "3. Sair",
        "Escolha uma opcao: ",
    )
)


class _Scanner:
    """Reads whitespace-separated tokens from a text stream, line by line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: list[str] = []

    def token(self) -> str | None:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                return None
            self._tokens = line.split()
        return self._tokens.pop(0)

    def discard_line(self) -> None:
        self._tokens = []


def _ask(scanner: _Scanner, prompt: str) -> str | None:
    print(prompt, end="", flush=True)
    return scanner.token()


def _compress(scanner: _Scanner) -> bool:
    print("\n=== Compactacao de Arquivo ===")
    source = _ask(scanner, "Digite o nome do arquivo a ser compactado: ")
    if source is None:
        return False
    target = _ask(scanner, "Digite o nome do arquivo de saida (compactado): ")
    if target is None:
        return False

    try:
        table = count_frequencies(source)
    except OSError:
        print("Erro ao contar frequencias do arquivo.")
        return True
    if not len(table):
        print("Erro ao criar fila de prioridade.")
        return True

    print("\nArquivo sendo compactado...")
    try:
        compress_file(source, target)
    except (OSError, ValueError) as exc:
        print(f"Erro ao abrir arquivo: {getattr(exc, 'strerror', None) or exc}", file=sys.stderr)
        print("Erro ao compactar o arquivo.")
    else:
        print("\nArquivo compactado com sucesso!")
    return True


def _decompress(scanner: _Scanner) -> bool:
    print("\n=== Descompactacao de Arquivo ===")
    source = _ask(scanner, "Digite o nome do arquivo compactado: ")
    if source is None:
        return False
    target = _ask(scanner, "Digite o nome do arquivo de saida (descompactado): ")
    if target is None:
        return False

    print("\nArquivo sendo descompactado...")
    try:
        decompress_file(source, target)
    except OSError as exc:
        print(f"Erro ao abrir arquivo: {exc.strerror or exc}", file=sys.stderr)
        print("Erro ao descompactar o arquivo.")
    except DecompressError as exc:
        print(exc)
        print("Erro ao descompactar o arquivo.")
    else:
        print("\nArquivo descompactado com sucesso!")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the menu loop on standard input until the user chooses to quit."""
    argparse.ArgumentParser(
        prog="huffzip", description="Compress and decompress files with Huffman codes."
    ).parse_args(argv)

    scanner = _Scanner(sys.stdin)
    option: int | None = None
    while True:
        print(_MENU, end="", flush=True)
        token = scanner.token()
        if token is None:
            return 0
        match = _INT.match(token)
        if match:
            option = int(match.group())
        scanner.discard_line()

        if option == 1:
            if not _compress(scanner):
                return 0
        elif option == 2:
            if not _decompress(scanner):
                return 0
        elif option == 3:
            print("\nEncerrando o programa...")
            return 0
        else:
            print("\nOpcao invalida! Por favor, tente novamente.")


if __name__ == "__main__":
    raise SystemExit(main())