import io
import sys

import pytest

from arbolnif.cli import (
    UsageError,
    main,
    make_tree,
    menu_text,
    parse_arguments,
    run_menu,
    usage_text,
)
from arbolnif.nif import InvalidNifError, Nif


def _parse(argv, stdin_text=""):
    out = io.StringIO()
    tree, trace = parse_arguments(argv, io.StringIO(stdin_text), out)
    return tree, trace, out.getvalue()


def _menu(tree, commands, trace=False):
    out, err = io.StringIO(), io.StringIO()
    run_menu(tree, trace, io.StringIO(commands), out, err)
    return out.getvalue(), err.getvalue()


@pytest.mark.parametrize("kind", ["abb", "abe", "avl"])
def test_make_tree_builds_working_tree(kind):
    tree = make_tree(kind)
    assert tree.is_empty()
    assert tree.insert(Nif(30000000), False)
    assert tree.insert(Nif(10000000), False)
    assert not tree.insert(Nif(30000000), False)
    assert sorted(tree.inorder()) == [Nif(10000000), Nif(30000000)]


def test_make_tree_rejects_unknown_kind():
    with pytest.raises(UsageError):
        make_tree("rojinegro")


def test_usage_text_mentions_program_and_options():
    text = usage_text("tree")
    assert text.startswith("Modo de uso: tree ")
    assert "-trace <'y'|'n'>" in text
    assert "'avl'" in text


def test_menu_text_ends_with_prompt():
    text = menu_text()
    assert text.endswith("Introduce la letra de la acción a ejecutar  > ")
    assert "q. Finalizar el programa" in text


def test_no_arguments_is_usage_error():
    with pytest.raises(UsageError):
        parse_arguments([], io.StringIO(), io.StringIO())


def test_manual_init_inserts_until_sentinel():
    tree, trace, out = _parse(
        ["-ab", "abb", "-init", "manual"],
        "30000000 20000000 30000000 -1 40000000",
    )
    assert trace is False
    assert tree.inorder() == [Nif(20000000), Nif(30000000)]
    assert "La clave 20000000 se ha insertado correctamente de manera manual en el árbol." in out
    assert "La clave 30000000 ya existe en el árbol." in out


def test_manual_init_invalid_key_raises():
    with pytest.raises(InvalidNifError):
        _parse(["-ab", "abe", "-init", "manual"], "123 -1")


def test_init_before_tree_kind_is_usage_error():
    with pytest.raises(UsageError):
        _parse(["-init", "manual", "-ab", "abb"], "-1")


def test_missing_tree_kind_is_usage_error():
    with pytest.raises(UsageError):
        _parse(["-ab"])


def test_invalid_init_mode_is_usage_error():
    with pytest.raises(UsageError):
        _parse(["-ab", "abb", "-init", "teclado"])


def test_file_init_reads_requested_count(tmp_path):
    path = tmp_path / "claves.txt"
    path.write_text("50000000\n40000000\n60000000\n", encoding="utf-8")
    tree, _, out = _parse(["-ab", "abb", "-init", "file", "2", str(path)])
    assert tree.inorder() == [Nif(40000000), Nif(50000000)]
    assert f"desde el fichero {path} en el árbol." in out


def test_file_init_missing_file_is_usage_error(tmp_path):
    with pytest.raises(UsageError):
        _parse(["-ab", "abb", "-init", "file", "2", str(tmp_path / "nada.txt")])


def test_file_init_missing_arguments_is_usage_error():
    with pytest.raises(UsageError):
        _parse(["-ab", "abb", "-init", "file", "2"])


def test_random_init_generates_count_keys():
    tree, _, out = _parse(["-ab", "abb", "-init", "random", "5"])
    assert out.count("La clave ") == 5
    assert 1 <= len(tree) <= 5
    assert tree.inorder() == sorted(tree.inorder())


def test_random_init_with_bad_count_is_usage_error():
    with pytest.raises(UsageError):
        _parse(["-ab", "abb", "-init", "random", "muchos"])


def test_trace_flag_is_parsed():
    _, trace, _ = _parse(["-ab", "avl", "-trace", "y"])
    assert trace is True
    _, trace, _ = _parse(["-ab", "avl", "-trace", "n"])
    assert trace is False


def test_invalid_trace_flag_is_usage_error():
    with pytest.raises(UsageError):
        _parse(["-ab", "avl", "-trace", "quizas"])


def test_menu_insert_then_quit():
    tree = make_tree("abb")
    out, err = _menu(tree, "i 20000000 10000000 -1 q")
    assert tree.inorder() == [Nif(10000000), Nif(20000000)]
    assert "La clave 10000000 se ha insertado correctamente en el árbol." in out
    assert tree.render() in out
    assert err == ""


def test_menu_search_reports_presence():
    tree = make_tree("abe")
    tree.insert(Nif(20000000), False)
    out, _ = _menu(tree, "b 20000000 30000000 -1 q")
    assert "La clave 20000000 se encuentra en el árbol." in out
    assert "La clave 30000000 no se encuentra en el árbol." in out


def test_menu_inorder_on_empty_tree_reports_error():
    tree = make_tree("abb")
    out, err = _menu(tree, "o q")
    assert err == "El árbol está vacío.\n"
    assert "Recorrido en inorden del árbol: " in out


def test_menu_inorder_lists_sorted_keys():
    tree = make_tree("abb")
    for number in (30000000, 10000000, 20000000):
        tree.insert(Nif(number), False)
    out, _ = _menu(tree, "o q")
    assert "Recorrido en inorden del árbol: 10000000 20000000 30000000 \n" in out


def test_menu_show_prints_levels():
    tree = make_tree("abb")
    tree.insert(Nif(30000000), False)
    out, _ = _menu(tree, "m q")
    assert tree.render() in out
    assert "Nivel 0: [30000000]" in out


def test_menu_invalid_option():
    tree = make_tree("abb")
    out, _ = _menu(tree, "z q")
    assert "Opción no valida, intentalo de nuevo" in out
    assert out.count(menu_text()) == 2


def test_menu_end_of_input_stops():
    tree = make_tree("abb")
    out, _ = _menu(tree, "")
    assert out.count(menu_text()) == 1


def test_menu_reprompts_on_invalid_key():
    tree = make_tree("abb")
    out, err = _menu(tree, "i 42 20000000 -1 q")
    assert "Error: El número de NIF debe tener 8 dígitos" in err
    assert "Introduzca un número de NIF válido: " in out
    assert tree.inorder() == [Nif(20000000)]


def test_avl_trace_reports_rotation():
    out = io.StringIO()
    tree, trace = parse_arguments(["-ab", "avl", "-trace", "y"], io.StringIO(), out)
    run_menu(tree, trace, io.StringIO("i 10000000 20000000 30000000 -1 q"), out, io.StringIO())
    assert "Realizando una rotación derecha-derecha desde el nodo" in out.getvalue()
    assert tree.inorder() == [Nif(10000000), Nif(20000000), Nif(30000000)]
    assert tree.root.data == Nif(20000000)


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert "Modo de uso:" in capsys.readouterr().out


def test_main_usage_error(capsys):
    assert main(["-ab", "desconocido"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Tipo de árbol no válido.")
    assert "Modo de uso:" in err


def test_main_invalid_key(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("55 -1"))
    assert main(["-ab", "abb", "-init", "manual"]) == 1
    assert "El número de NIF debe tener 8 dígitos" in capsys.readouterr().err


def test_main_runs_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("20000000 -1 m q"))
    assert main(["-ab", "abb", "-init", "manual"]) == 0
    out = capsys.readouterr().out
    assert "Nivel 0: [20000000]" in out
    assert menu_text() in out