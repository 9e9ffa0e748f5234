import io

import pytest

from freqtable import table as table_module
from freqtable.main import count_words, main, repl, run_command
from freqtable.table import Table


@pytest.fixture(autouse=True)
def no_resize_trace(monkeypatch):
    monkeypatch.setattr(table_module, "_debug_trace_resize", False)


def test_count_words():
    t = Table()
    count_words("The cat and THE dog.\nthe end", t)

    assert t.frequency_of("the") == 3
    assert t.frequency_of("cat") == 1
    assert t.frequency_of("end") == 1
    assert not t.contains("The")
    assert t.size() == 5


def test_run_file(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("the cat and the dog\n")

    main([str(path)])

    assert capsys.readouterr().out == (
        "Table: ** [the, 2] [and, 1] ** [cat, 1] ** ** ** [dog, 1] ** \n"
        "size: 4\n"
        "collisions: 1\n"
        "capacity: 10\n"
    )


def test_run_file_trace_resize(tmp_path, capsys):
    path = tmp_path / "letters.txt"
    path.write_text("a b c d e f")

    main(["--trace-resize", str(path)])

    out = capsys.readouterr().out
    assert out.startswith("Rehashing 6 items, new size is 23\n")
    assert out.endswith("size: 6\ncollisions: 0\ncapacity: 23\n")


def test_run_file_missing(tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main([str(tmp_path / "missing.txt")])

    assert e.value.code == 74
    assert "Could not read" in capsys.readouterr().err


def test_usage(capsys):
    with pytest.raises(SystemExit) as e:
        main(["one", "two"])

    assert e.value.code == 64
    assert capsys.readouterr().err == "Usage: freqtable [--trace-resize] [path]\n"


def test_repl(capsys):
    t = Table()
    commands = io.StringIO(
        "insert cat\n"
        "insert cat\n"
        "freq cat\n"
        "hash cat\n"
        "remove cat\n"
        "remove cat\n"
        "remove cat\n"
        "contains cat\n"
        "\n"
        "bogus\n"
        "insert\n"
    )

    repl(t, commands)

    captured = capsys.readouterr()
    assert captured.out == "2\n4\ncat\ncat\nnot found\nfalse\n"
    assert captured.err == "Unknown command 'bogus'\nUnknown command 'insert'\n"


def test_run_command_queries(capsys):
    t = Table()
    for line in ["insert a", "insert k", "size", "collisions", "display"]:
        run_command(t, line)

    assert capsys.readouterr().out == (
        "2\n" "1\n" "Table: ** [a, 1] [k, 1] ** ** ** ** ** ** ** \n"
    )


def test_dump(capsys):
    t = Table()
    run_command(t, "insert a")
    run_command(t, "insert k")
    run_command(t, "remove a")
    run_command(t, "dump")

    assert capsys.readouterr().out == (
        "== table ==\n"
        "0000 **\n"
        "0001 #DEL#\n"
        "0002 [k, 1]  <- 0001\n"
        "0003 **\n"
        "0004 **\n"
        "0005 **\n"
        "0006 **\n"
        "0007 **\n"
        "0008 **\n"
        "0009 **\n"
        "size=1 occupied=2 collisions=0 load=0.20\n"
    )


def test_dump_key_in_home_bucket(capsys):
    t = Table(3)
    run_command(t, "insert a")
    run_command(t, "dump")

    # should not mark a key sitting in its own bucket
    assert capsys.readouterr().out == (
        "== table ==\n"
        "0000 **\n"
        "0001 [a, 1]\n"
        "0002 **\n"
        "size=1 occupied=1 collisions=0 load=0.33\n"
    )


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("insert a\ninsert b\nsize\n"))

    main([])

    assert capsys.readouterr().out == "2\n"
