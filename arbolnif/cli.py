"""Command line front end: build a tree of NIF keys and drive it from an interactive menu."""

from __future__ import annotations

import os
import sys
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple

from arbolnif.avl import AVLTree
from arbolnif.nif import InvalidNifError, Nif
from arbolnif.trees import BalancedTree, BinaryTree, SearchTree

_NIF_ERROR = "Error: El número de NIF debe tener 8 dígitos\n"
_NIF_RETRY = "Introduzca un número de NIF válido: "
_INSERT_PROMPT = "Introduzca una clave a insertar en el árbol (inserte -1 para finalizar):\n"
_SEARCH_PROMPT = "Introduzca una clave a buscar en el árbol (inserte -1 para salir):\n"
_CLEAR_SCREEN = "\033[H\033[2J"


class UsageError(Exception):
    """Raised when the command line arguments are missing or invalid."""


class _HelpRequested(Exception):
    """Raised when the user asks for the usage text."""


def usage_text(prog: str) -> str:
    """Return the help text describing the command line options."""
    lines = [
        f"Modo de uso: {prog} [-h | --help ] -ab <'abb'|'abe'|'avl'> -init <'manual'|'random' "
        "<nº elementos a generar> |'file' <nº elementos a generar> <nombre del fichero>> "
        "-trace <'y'|'n'>",
        "",
        "-h | --help: Muestra las instrucciones para el correcto funcionamiento del programa.",
        "-ab: Con esta opción se indica el tipo de árbol a utilizar (ABB o ABE).",
        "\tÁrbol Binario de Búsqueda (ABB): es un tipo de árbol en el que las claves/llaves se "
        "ordenan de menor (subárbol izquierdo) a mayor (subárbol derecho) con respecto a la raíz.",
        "\tÁrbol binario Equilibrado (ABE): es un tipo de árbol en el que las claves/llaves se van "
        "ordenando por niveles, es decir independientemente del orden, hasta que un nivel no se haya "
        "completado, no se empieza a rellenar el siguiente.",
        "\tÁrbol binario Adelson-Velskii y Landis (AVL): es un tipo de árbol binario de búsqueda en "
        "el que para cada nodo, las alturas de los subárboles izquierdo y derecho difieren en como "
        "máximo uno.",
        "-init <'manual'|'random' <nº elementos a generar> |'file' <nº elementos a generar> "
        "<nombre del fichero>>: Con esta opción se indica cómo se van a inicializar los nodos del árbol.",
        "\tInicialización manual ('manual'): se inicializan los nodos introduciendo los valores por teclado.",
        "\tInicialización aleatoria ('random' <nº elementos a generar>): se inicializan el número de "
        "nodos especificado con claves aleatorias.",
        "\tInicialización mediante fichero ('file' <nº elementos a generar> <fichero de entrada>): se "
        "inicializan el número de nodos especificado leyendo los valores del fichero proporcionado.",
        "-trace <'y'|'n'>: Con esta opción se indica si se quiere mostrar la traza en caso de que se "
        "produzca un balanceo (solamente en tipo de árbol 'avl'), mostrando los factores de balaceo, "
        "y el tipo de rotación.",
        "",
    ]
    return "\n".join(lines) + "\n"


def menu_text() -> str:
    """Return the interactive menu, ending with the option prompt."""
    return (
        "Práctica 7: Árbol AVL, Algoritmos y Estructuras de Datos Avanzadas\n\n"
        "============== MENÚ DE OPCIONES ==============\n"
        "i. [I]nsertar una clave en el árbol.\n"
        "b. [B]uscar una clave en el árbol.\n"
        "o. Mostrar el recorrido en in[o]rden del árbol.\n"
        "m. [M]ostrar el árbol en pantalla (por niveles).\n\n"
        "q. Finalizar el programa\n\n"
        "Introduce la letra de la acción a ejecutar  > "
    )


def _build_tree(kind: Optional[str], out: Optional[TextIO]) -> BinaryTree:
    if kind == "abb":
        return SearchTree()
    if kind == "abe":
        return BalancedTree()
    if kind == "avl":
        return AVLTree(out)
    raise UsageError("Tipo de árbol no válido.")


def make_tree(kind: str) -> BinaryTree:
    """Create an empty tree of the named kind: 'abb', 'abe' or 'avl'."""
    return _build_tree(kind, None)


def _read_char(stream: TextIO) -> Optional[str]:
    """Return the next non-whitespace character, or None at end of input."""
    while True:
        ch = stream.read(1)
        if ch == "":
            return None
        if not ch.isspace():
            return ch


def _next_token(stream: TextIO) -> Optional[str]:
    """Return the next whitespace-separated token, or None at end of input."""
    first = _read_char(stream)
    if first is None:
        return None
    chars = [first]
    while True:
        ch = stream.read(1)
        if ch == "" or ch.isspace():
            return "".join(chars)
        chars.append(ch)


def _next_number(stream: TextIO) -> Optional[int]:
    token = _next_token(stream)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _read_keys(
    stdin: TextIO, stdout: TextIO, stderr: Optional[TextIO] = None
) -> Iterator[Nif]:
    """Yield keys until the -1 marker, end of input or a non-numeric token.

    Without ``stderr`` an invalid key raises; with it the user is asked again.
    """
    while True:
        number = _next_number(stdin)
        if number is None:
            return
        while True:
            try:
                key = Nif(number)
                break
            except InvalidNifError:
                if stderr is None:
                    raise
                stderr.write(_NIF_ERROR)
                stdout.write(_NIF_RETRY)
                number = _next_number(stdin)
                if number is None:
                    return
        if key.is_sentinel():
            return
        yield key


def _insert_all(tree: BinaryTree, keys, trace: bool, stdout: TextIO, how: str) -> None:
    for key in keys:
        if tree.insert(key, trace):
            stdout.write(f"La clave {key} se ha insertado correctamente{how} en el árbol.\n")
        else:
            stdout.write(f"La clave {key} ya existe en el árbol.\n")


def _parse_count(text: Optional[str]) -> int:
    if text is None:
        raise UsageError("Falta argumento del número de elementos a generar.")
    try:
        return int(text)
    except ValueError as exc:
        raise UsageError("Número de elementos a generar no válido.") from exc


def _read_file_keys(filename: str, count: int) -> List[Nif]:
    try:
        with open(filename, encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError as exc:
        raise UsageError("No se ha podido abrir el fichero de entrada.") from exc
    return [Nif.parse(token) for token in tokens[: max(count, 0)]]


def parse_arguments(
    argv: Sequence[str], stdin: TextIO, stdout: TextIO
) -> Tuple[BinaryTree, bool]:
    """Parse the options, build and fill the tree; return it with the trace flag."""
    if not argv:
        raise UsageError("No se han introducido argumentos por línea de comandos.")

    tree: Optional[BinaryTree] = None
    trace = False
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "-help", "--help"):
            raise _HelpRequested()

        if arg == "-ab":
            kind = next(args, None)
            if kind is None:
                raise UsageError("Falta argumento del tipo de árbol.")
            tree = _build_tree(kind, stdout)

        elif arg == "-init":
            mode = next(args, None)
            if mode is None:
                raise UsageError("Falta argumento de la forma de introducir los datos.")
            if mode not in ("manual", "random", "file"):
                raise UsageError("Forma de introducir los datos no válida.")
            if tree is None:
                raise UsageError("Falta argumento del tipo de árbol.")

            if mode == "manual":
                stdout.write(_INSERT_PROMPT)
                _insert_all(tree, _read_keys(stdin, stdout), trace, stdout, " de manera manual")
            elif mode == "random":
                count = _parse_count(next(args, None))
                stdout.write(
                    f"Generando {count} claves aleatorias para insertar en el árbol...\n"
                )
                keys = (Nif.random() for _ in range(count))
                _insert_all(tree, keys, trace, stdout, " de manera aleatoria")
            else:
                count_text = next(args, None)
                filename = next(args, None)
                if count_text is None or filename is None:
                    raise UsageError(
                        "Falta argumento del número de elementos a generar o del nombre del fichero."
                    )
                count = _parse_count(count_text)
                keys = _read_file_keys(filename, count)
                stdout.write(
                    f"Leyendo {count} claves del fichero {filename} para insertar en el árbol...\n"
                )
                _insert_all(tree, keys, trace, stdout, f" desde el fichero {filename}")

        elif arg == "-trace":
            flag = next(args, None)
            if flag is None:
                raise UsageError("Falta argumento de si se quiere mostrar la traza.")
            if flag == "y":
                trace = True
            elif flag == "n":
                trace = False
            else:
                raise UsageError("Opción de mostrar la traza no válida.")

    if tree is None:
        raise UsageError("Falta argumento del tipo de árbol.")
    return tree, trace


def _clear(stream: TextIO) -> None:
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        stream.write(_CLEAR_SCREEN)


def run_menu(
    tree: BinaryTree, trace: bool, stdin: TextIO, stdout: TextIO, stderr: TextIO
) -> None:
    """Show the menu and carry out options until 'q' or end of input."""
    while True:
        stdout.write(menu_text())
        stdout.flush()
        option = _read_char(stdin)
        stdout.write("\n")
        if option is None or option == "q":
            return

        if option == "i":
            _clear(stdout)
            stdout.write(_INSERT_PROMPT)
            _insert_all(tree, _read_keys(stdin, stdout, stderr), trace, stdout, "")
            stdout.write(tree.render() + "\n")
        elif option == "b":
            _clear(stdout)
            stdout.write(_SEARCH_PROMPT)
            for key in _read_keys(stdin, stdout, stderr):
                if tree.search(key):
                    stdout.write(f"La clave {key} se encuentra en el árbol.\n")
                else:
                    stdout.write(f"La clave {key} no se encuentra en el árbol.\n")
            stdout.write("\n")
        elif option == "o":
            _clear(stdout)
            stdout.write("Recorrido en inorden del árbol: ")
            if tree.is_empty():
                stderr.write("El árbol está vacío.\n")
            else:
                stdout.write("".join(f"{key} " for key in tree.inorder()) + "\n")
            stdout.write(tree.render() + "\n")
        elif option == "m":
            _clear(stdout)
            stdout.write(tree.render() + "\n")
        else:
            _clear(stdout)
            stdout.write("\nOpción no valida, intentalo de nuevo\n\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "arbolnif"

    try:
        tree, trace = parse_arguments(list(argv), sys.stdin, sys.stdout)
    except _HelpRequested:
        sys.stdout.write(usage_text(prog))
        return 0
    except UsageError as exc:
        sys.stderr.write(f"Error: {exc}\n\n")
        sys.stderr.write(usage_text(prog))
        return 1
    except InvalidNifError:
        sys.stderr.write(_NIF_ERROR)
        return 1

    run_menu(tree, trace, sys.stdin, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())